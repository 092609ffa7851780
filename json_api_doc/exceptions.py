"""Errors raised by json-api-doc commands."""


class JsonApiDocError(Exception):
    """Base exception for all json-api-doc errors."""
    pass


class InvalidParameterError(JsonApiDocError):
    """A command option has an invalid value."""
    pass


class ConfigError(JsonApiDocError):
    """Configuration file is missing a key or has a wrong type."""
    pass


class BadRequestError(JsonApiDocError):
    """The input file is missing or does not hold a JSON object."""

    status_code = 400

    def __init__(self, message):
        self.message = message
        super().__init__(message)
