import datetime
import attr
import singer
from dateutil.tz import tzutc

from .exceptions import BadRequestError, InvalidParameterError
from .helper import file_stem, read_json_object, write_text
from .inferencer import SchemaInferencer


LOGGER = singer.get_logger()

DEFAULT_CURRENT_DATE_VALUE = "now"
CURRENT_DATETIME_FORMAT = "%Y-%m-%d %H:%M"
DEFAULT_FIELD_NAME = "ObjectField"


class BaseCommand(object):
    """
    Base of every command. Adds --current-datetime and parses it into
    self.current_datetime before execute() runs.
    """
    name = None
    description = None

    def __init__(self, config):
        self.config = config
        self.current_datetime = None

    def configure(self, parser):
        parser.add_argument(
            "-d", "--current-datetime",
            dest="current_datetime",
            default=DEFAULT_CURRENT_DATE_VALUE,
            help='Date in format "YYYY-MM-DD HH:MM"')

    def initialize(self, args):
        value = getattr(args, "current_datetime", DEFAULT_CURRENT_DATE_VALUE)
        try:
            if not isinstance(value, str):
                raise InvalidParameterError(
                    "Parameter `current-datetime` is not a string")
            if value == DEFAULT_CURRENT_DATE_VALUE:
                self.current_datetime = datetime.datetime.now(tzutc())
            else:
                try:
                    parsed = datetime.datetime.strptime(value, CURRENT_DATETIME_FORMAT)
                except ValueError:
                    raise InvalidParameterError(
                        'Invalid date format. Correct format YYYY-MM-DD HH:MM, '
                        'e.g. "2018-11-01 14:45"')
                self.current_datetime = parsed.replace(tzinfo=tzutc())
        except InvalidParameterError as e:
            print(str(e))
            raise

    def execute(self, args):
        raise NotImplementedError()

    def run(self, args):
        self.initialize(args)
        return self.execute(args)


@attr.s
class DocumentationRequest(object):
    json_filename = attr.ib()
    yaml_filename = attr.ib()
    field_name = attr.ib(default=DEFAULT_FIELD_NAME)


class CreateDocumentationCommand(BaseCommand):
    name = "app:doc:create"
    description = "Create yaml file documentation from json file response"

    def configure(self, parser):
        super().configure(parser)
        parser.add_argument(
            "-j", "--json-file",
            dest="json_file",
            help="Json filename")
        parser.add_argument(
            "-y", "--yml-file",
            dest="yml_file",
            help="Yaml filename")
        parser.add_argument(
            "-f", "--field-name",
            dest="field_name",
            default=DEFAULT_FIELD_NAME,
            help="Field name")

    def build_request(self, args):
        json_filename = getattr(args, "json_file", None)
        yaml_filename = getattr(args, "yml_file", None)
        field_name = getattr(args, "field_name", None)

        if not isinstance(json_filename, str):
            raise BadRequestError("json filename required")

        if not isinstance(yaml_filename, str):
            stem = file_stem(json_filename)
            if not stem:
                stem = "doc-" + self.current_datetime.strftime("%Y-%m-%d-%H-%M-%S")
            yaml_filename = stem + ".yaml"

        if not field_name:
            field_name = DEFAULT_FIELD_NAME

        return DocumentationRequest(json_filename, yaml_filename, field_name)

    def execute(self, args):
        print("Create documentation...")

        request = self.build_request(args)
        self.create_documentation(request)

        print("json file: " + request.json_filename)
        print("yaml file: " + request.yaml_filename)
        print("[OK] DONE")
        return 0

    def create_documentation(self, request):
        file_path = self.config["resource_dir"].rstrip("/") + "/" + request.json_filename
        LOGGER.info("Reading %s", file_path)
        data = read_json_object(file_path)

        content = SchemaInferencer().infer(request.field_name, data)

        out_path = write_text(self.config["result_dir"], request.yaml_filename, content)
        LOGGER.info("Wrote %s", out_path)
        return out_path


COMMANDS = [CreateDocumentationCommand]
