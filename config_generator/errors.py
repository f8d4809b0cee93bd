"""
Errors raised while generating a chart scaffold.

Every error carries the HTTP status the service answers with, so the request
boundary can report it without inspecting the error kind.
"""


class ConfigGeneratorError(Exception):
    """Base class for all recoverable generation errors"""

    status_code = 500

    @property
    def kind(self) -> str:
        return type(self).__name__


class DecodeError(ConfigGeneratorError):
    """The inbound payload is not a JSON object"""

    status_code = 400


class TypeMismatch(ConfigGeneratorError):
    """A node has a type the walker cannot template"""

    status_code = 400


class SerializationError(ConfigGeneratorError):
    """A tree could not be rendered as YAML"""


class WriteError(ConfigGeneratorError):
    """An output destination could not be written"""


class GenerationCancelled(ConfigGeneratorError):
    """The caller cancelled the request before the walk finished"""

    status_code = 499


class ConfigurationError(ConfigGeneratorError):
    """Settings or chart metadata are invalid"""
