"""Core library for logfields.

Writes the arguments of a log record into JSON log output: structured
arguments serialize themselves, plain arguments become ``arg0``-style
string fields (optionally renamed), all either inline or nested under a
wrapper field.

Example:
    >>> import logging
    >>> from logfields.core import kv, configure_logging
    >>> configure_logging(structured=True)
    >>> logging.getLogger("app").info("login by %s", kv("user", "bob"))
"""

from logfields.core.arguments import StructuredArgument, array, entries, kv, raw, v
from logfields.core.decoders import JsonMappingDecoder, MappingDecoder, YamlMappingDecoder
from logfields.core.exceptions import (
    ConfigError,
    JsonWriteError,
    LogFieldsError,
    MappingDecodeError,
)
from logfields.core.fieldnames import FieldNames
from logfields.core.json import JsonWriter, StreamingJsonWriter, render_json
from logfields.core.logging import ArgumentsJSONFormatter
from logfields.core.providers import ArgumentsJsonProvider, ArgumentsProviderConfig
from logfields.core.status import LoggingStatusReporter, StatusCollector, StatusReporter
from logfields.core.utils.logging import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Provider
    "ArgumentsJsonProvider",
    "ArgumentsProviderConfig",
    # Arguments
    "StructuredArgument",
    "kv",
    "v",
    "entries",
    "array",
    "raw",
    # JSON output
    "JsonWriter",
    "StreamingJsonWriter",
    "render_json",
    # Decoders
    "MappingDecoder",
    "JsonMappingDecoder",
    "YamlMappingDecoder",
    # Status
    "StatusReporter",
    "LoggingStatusReporter",
    "StatusCollector",
    # Logging
    "ArgumentsJSONFormatter",
    "FieldNames",
    "configure_logging",
    "get_logger",
    # Errors
    "LogFieldsError",
    "MappingDecodeError",
    "JsonWriteError",
    "ConfigError",
]
