import os
import simplejson as json

import jsonschema
import singer
from singer import utils

from .exceptions import BadRequestError, ConfigError


LOGGER = singer.get_logger()

CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "resource_dir": {"type": "string"},
        "result_dir": {"type": "string"},
    },
    "required": ["resource_dir", "result_dir"],
}


def get_abs_path(path):
    """Returns the absolute path"""
    return os.path.join(os.path.dirname(os.path.realpath(__file__)), path)


def load_config(config_file=None):
    """
    Read the default config and overwrite it with the custom config file
    """
    config = utils.load_json(get_abs_path("default_config.json"))
    if config_file:
        if not os.path.isfile(config_file):
            raise ConfigError("Config file %s not found" % config_file)
        config.update(utils.load_json(config_file))

    try:
        jsonschema.validate(config, CONFIG_SCHEMA)
    except jsonschema.exceptions.ValidationError as e:
        raise ConfigError("Invalid config: %s" % e.message)

    LOGGER.debug("Config: %s" % config)
    return config


def file_stem(filename):
    """
    Base name up to its last dot: "a/b.json" -> "b", ".json" -> ""
    """
    base = os.path.basename(filename)
    dot = base.rfind(".")
    if dot < 0:
        return base
    return base[:dot]


def read_json_object(file_path):
    """
    Decode the file into a dict, keeping the key order of the file
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError):
        raise BadRequestError("Can not get content from file %s" % file_path)

    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        raise BadRequestError("Can not get array from json")

    if type(data) is not dict:
        raise BadRequestError("Can not get array from json")
    return data


def write_text(dir_path, filename, content):
    if not os.path.exists(dir_path):
        os.makedirs(dir_path)
    file_path = os.path.join(dir_path, filename)
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(content)
    return file_path
