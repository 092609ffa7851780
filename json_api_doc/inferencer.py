import enum, re

# OpenAPI schema object follows:
# https://swagger.io/specification/#schema-object

ONE_TAB = "  "

DATE_TIME_REGEXP = re.compile(
    r"^[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}\+[0-9]{2}:[0-9]{2}$")
UUID_REGEXP = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.I)

STRING_PATTERN_REFS = (
    (DATE_TIME_REGEXP, "#/components/schemas/DateTimeField"),
    (UUID_REGEXP, "#/components/schemas/UuidField"),
)

FIELD_NAME_REFS = {
    "editVersion": "#/components/schemas/EditVersionField",
    "createdBy": "#/components/schemas/Blameable",
    "updatedBy": "#/components/schemas/Blameable",
}

# Keyed by the object's key names, in order, each with a leading dot
OBJECT_SHAPE_REFS = {
    ".amount.currency": "#/components/schemas/MoneyField",
}


class JsonKind(enum.Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value):
    """
    Classify a decoded JSON value.
    bool is checked before int since bool is a subclass of int.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, int):
        return JsonKind.INTEGER
    if isinstance(value, float):
        return JsonKind.FLOAT
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError("Not a JSON value: %s" % type(value))


def _line(depth, text):
    return ONE_TAB * depth + text + "\n"


def _ref_line(depth, ref):
    return _line(depth, "$ref: '" + ref + "'")


def _example_line(depth, value):
    return _line(depth, "example: '" + str(value) + "'")


class SchemaInferencer(object):
    """
    Walk a decoded JSON object and write the OpenAPI schema of it as YAML.

    Every emitter takes the depth of its own first line and returns the
    text it produced. The depth is never shared between calls, so sibling
    properties line up whatever the depth of the subtree before them.
    """
    def __init__(self, field_refs=None, object_refs=None, pattern_refs=None):
        self.field_refs = dict(FIELD_NAME_REFS if field_refs is None else field_refs)
        self.object_refs = dict(OBJECT_SHAPE_REFS if object_refs is None else object_refs)
        self.pattern_refs = tuple(STRING_PATTERN_REFS if pattern_refs is None else pattern_refs)

    def infer(self, root_field_name, data):
        if type(data) is not dict:
            raise ValueError("Input must be a dict object.")
        return self.object_field(root_field_name, data, 0)

    def object_field(self, name, data, depth):
        content = ""
        if name is not None:
            content += _line(depth, name + ":")

        shape = "".join("." + key for key in data)
        ref = self.object_refs.get(shape)
        if ref is not None:
            return content + _ref_line(depth + 1, ref)

        content += _line(depth + 1, "type: object")
        content += self.required(data, depth + 1)
        content += self.properties(data, depth + 1)
        return content

    def required(self, data, depth):
        if not data:
            return ""
        content = _line(depth, "required:")
        for key in data:
            content += _line(depth + 1, "- " + key)
        return content

    def properties(self, data, depth):
        if not data:
            return ""
        content = _line(depth, "properties:")
        for key, value in data.items():
            content += self.property_field(key, value, depth + 1)
        return content

    def property_field(self, key, value, depth):
        ref = self.field_refs.get(key)
        if ref is not None:
            return _line(depth, key + ":") + _ref_line(depth + 1, ref)

        kind = kind_of(value)
        if kind is JsonKind.OBJECT:
            return self.object_field(key, value, depth)
        if kind is JsonKind.ARRAY:
            return self.array_field(key, value, depth)
        if kind is JsonKind.STRING:
            return _line(depth, key + ":") + self.string_schema(value, depth + 1)
        return _line(depth, key + ":") + self.scalar_schema(kind, value, depth + 1)

    def string_schema(self, value, depth):
        # Every matching pattern adds its ref, not only the first one
        content = ""
        for pattern, ref in self.pattern_refs:
            if pattern.search(value):
                content += _ref_line(depth, ref)
        if content:
            return content
        return _line(depth, "type: string") + _example_line(depth, value)

    def scalar_schema(self, kind, value, depth):
        if kind is JsonKind.STRING:
            return _line(depth, "type: string") + _example_line(depth, value)
        if kind is JsonKind.INTEGER:
            return _line(depth, "type: integer") + _example_line(depth, value)
        if kind is JsonKind.FLOAT:
            return (_line(depth, "type: number") +
                    _line(depth, "format: float") +
                    _example_line(depth, repr(value)))
        if kind is JsonKind.BOOLEAN:
            return _line(depth, "type: boolean")
        if kind is JsonKind.NULL:
            return _line(depth, "type: null") + _line(depth, "nullable: true")
        raise ValueError("Not a scalar kind: %s" % kind)

    def array_field(self, key, value, depth):
        """
        Items are described from the first element only.
        """
        content = _line(depth, key + ":")
        content += _line(depth + 1, "type: array")
        content += _line(depth + 1, "items:")

        if not value:
            return content + self.object_field(None, {}, depth + 1)

        first = value[0]
        kind = kind_of(first)
        if kind is JsonKind.OBJECT:
            return content + self.object_field(None, first, depth + 1)
        if kind is JsonKind.ARRAY:
            # A nested list is described like an object keyed by its indexes
            indexed = dict((str(i), v) for i, v in enumerate(first))
            return content + self.object_field(None, indexed, depth + 1)
        return content + self.scalar_schema(kind, first, depth + 2)
