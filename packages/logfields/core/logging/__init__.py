"""JSON log formatting for stdlib logging."""

from .formatter import JSON_FORMAT_VERSION, ArgumentsJSONFormatter, record_arguments

__all__ = [
    "ArgumentsJSONFormatter",
    "JSON_FORMAT_VERSION",
    "record_arguments",
]
