"""Formatter that renders log records as JSON with argument fields."""

from __future__ import annotations

from datetime import UTC, datetime
import io
import logging
from typing import Any

from logfields.core.fieldnames import FieldNames
from logfields.core.json.protocol import JsonWriter
from logfields.core.json.writer import StreamingJsonWriter
from logfields.core.providers.arguments import ArgumentsJsonProvider

JSON_FORMAT_VERSION = "1"

# LogRecord attributes that are not "extra" fields
_STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "exc_info",
        "exc_text",
        "stack_info",
        "taskName",
        "asctime",
    }
)


def record_arguments(record: logging.LogRecord) -> tuple[Any, ...]:
    """Return the arguments of a log record as a tuple.

    ``LogRecord`` unwraps a lone mapping argument into ``record.args``;
    it is wrapped back into a one-element tuple here.

    Args:
        record: Log record

    Returns:
        The record's arguments, in call order
    """
    args = record.args
    if not args:
        return ()
    if isinstance(args, tuple):
        return args
    return (args,)


class ArgumentsJSONFormatter(logging.Formatter):
    """Formats each record as one JSON object.

    Format:
    {
        "@timestamp": "2026-01-29T12:00:00.000000+00:00",
        "@version": "1",
        "message": "login by user=bob",
        "logger_name": "app.auth",
        "thread_name": "MainThread",
        "level": "INFO",
        "level_value": 20,
        "user": "bob"
    }

    The trailing fields come from the record's arguments, written by an
    ``ArgumentsJsonProvider``. Arguments not referenced by ``%``
    placeholders in the message still produce fields. If the message
    cannot be formatted with its arguments, the raw format string is
    written instead. Extra record attributes (from
    ``extra=`` or a ``LoggerAdapter``) are written before the arguments
    when ``include_extra`` is set.
    """

    def __init__(
        self,
        provider: ArgumentsJsonProvider | None = None,
        field_names: FieldNames | None = None,
        include_extra: bool = True,
    ) -> None:
        """Initialize formatter.

        Args:
            provider: Arguments provider (default: structured arguments only)
            field_names: Output field names. If ``field_names.arguments`` is
                set, it becomes the provider's wrapper field name.
            include_extra: Write extra record attributes as fields
        """
        super().__init__()
        self.field_names = field_names or FieldNames()
        provider = provider or ArgumentsJsonProvider()
        if self.field_names.arguments is not None:
            provider = provider.with_field_names(self.field_names)
        self.provider = provider
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as a JSON object.

        Args:
            record: LogRecord to format

        Returns:
            JSON text (no trailing newline)
        """
        buffer = io.StringIO()
        writer = StreamingJsonWriter(buffer)
        writer.write_start_object()
        self._write_standard_fields(writer, record)
        if self.include_extra:
            for key, value in record.__dict__.items():
                if key not in _STANDARD_ATTRS and not key.startswith("_"):
                    writer.write_object_field(key, value)
        self.provider.write_to(writer, record_arguments(record))
        writer.write_end_object()
        return buffer.getvalue()

    def _write_standard_fields(self, writer: JsonWriter, record: logging.LogRecord) -> None:
        names = self.field_names
        _write_field(
            writer, names.timestamp, datetime.fromtimestamp(record.created, tz=UTC).isoformat()
        )
        _write_field(writer, names.version, JSON_FORMAT_VERSION)
        _write_field(writer, names.message, _message(record))
        _write_field(writer, names.logger, record.name)
        _write_field(writer, names.thread, record.threadName)
        _write_field(writer, names.level, record.levelname)
        if names.level_value is not None:
            writer.write_object_field(names.level_value, record.levelno)

        if record.exc_info:
            # Cache like logging.Formatter does
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            _write_field(writer, names.stack_trace, record.exc_text)


def _write_field(writer: JsonWriter, name: str | None, value: str | None) -> None:
    if name is not None and value is not None:
        writer.write_string_field(name, value)


def _message(record: logging.LogRecord) -> str:
    try:
        return record.getMessage()
    except (TypeError, ValueError, KeyError):
        # Placeholders do not match the arguments
        return str(record.msg)
