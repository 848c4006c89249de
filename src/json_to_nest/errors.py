"""Exceptions raised while reading a JSON document."""

from __future__ import annotations


class JsonToNestError(Exception):
    """Base class for conversion failures reported in a ConversionResult."""


class ParseError(JsonToNestError):
    """The input text is not valid JSON."""


class UnsupportedTopLevelShape(JsonToNestError):
    """The document parsed, but its top-level value cannot be declared."""

    MESSAGE = "Does not handle Array, please use a valid JSON!"

    def __init__(self, message: str = MESSAGE) -> None:
        super().__init__(message)
