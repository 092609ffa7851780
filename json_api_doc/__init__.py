#!/usr/bin/env python3
import argparse, sys
import singer
from singer import utils

from .command import COMMANDS
from .helper import load_config

LOGGER = singer.get_logger()

APPLICATION = "json-api-doc"


def build_parser(config):
    ''' Build the parser with a sub-command for every registered command.
    -c,--config     Config file overwriting default_config.json
    Each command object is kept in the "command" default of its sub-parser.
    '''
    parser = argparse.ArgumentParser(APPLICATION)

    parser.add_argument(
        '-c', '--config',
        help='Config file')

    subparsers = parser.add_subparsers(dest="command_name")
    for command_class in COMMANDS:
        command = command_class(config)
        subparser = subparsers.add_parser(command.name,
                                          help=command.description)
        command.configure(subparser)
        subparser.set_defaults(command=command)

    return parser


def parse_args(argv=None):
    # The config file has to be known before the commands are built
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument('-c', '--config')
    known, _ = pre_parser.parse_known_args(argv)

    config = load_config(known.config)
    parser = build_parser(config)
    args = parser.parse_args(argv)
    if not getattr(args, "command", None):
        parser.error("a command is required")
    return args


def run(argv=None):
    args = parse_args(argv)
    return args.command.run(args)


@utils.handle_top_exception(LOGGER)
def main():
    """
    Entry point of json_api_doc
    """
    sys.exit(run())


if __name__ == "__main__":
    main()
