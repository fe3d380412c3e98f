"""Built-in structured argument types and their factory helpers.

Each type writes JSON fields and renders a readable text form, so the
same object works as a ``%s`` placeholder in the log message.

Example:
    >>> logger.info("login by %s", kv("user", "bob"))
    # message: "login by user=bob", JSON: {..., "user": "bob"}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from logfields.core.json.protocol import JsonWriter

DEFAULT_KEY_VALUE_FORMAT = "{key}={value}"
VALUE_ONLY_FORMAT = "{value}"


@dataclass(frozen=True)
class KeyValueArgument:
    """Single ``key: value`` field."""

    key: str
    value: Any
    message_format: str = DEFAULT_KEY_VALUE_FORMAT

    def write_to(self, writer: JsonWriter) -> None:
        writer.write_object_field(self.key, self.value)

    def __str__(self) -> str:
        return self.message_format.format(key=self.key, value=self.value)


@dataclass(frozen=True)
class EntriesArgument:
    """One field per mapping entry, in mapping order."""

    entries: Mapping[str, Any] = field(default_factory=dict)

    def write_to(self, writer: JsonWriter) -> None:
        for key, value in self.entries.items():
            writer.write_object_field(str(key), value)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}={v}" for k, v in self.entries.items()) + "}"


@dataclass(frozen=True)
class ArrayArgument:
    """Field holding a JSON array of values."""

    key: str
    values: tuple[Any, ...] = ()

    def write_to(self, writer: JsonWriter) -> None:
        writer.write_array_field_start(self.key)
        for value in self.values:
            writer.write_object(value)
        writer.write_end_array()

    def __str__(self) -> str:
        return f"{self.key}=[" + ", ".join(str(v) for v in self.values) + "]"


@dataclass(frozen=True)
class RawArgument:
    """Field whose value is pre-encoded JSON, written verbatim.

    The text is not validated; invalid JSON produces an invalid document.
    """

    key: str
    raw_json: str

    def write_to(self, writer: JsonWriter) -> None:
        writer.write_field_name(self.key)
        writer.write_raw_value(self.raw_json)

    def __str__(self) -> str:
        return f"{self.key}={self.raw_json}"


def key_value(
    key: str, value: Any, message_format: str = DEFAULT_KEY_VALUE_FORMAT
) -> KeyValueArgument:
    """Create a ``key: value`` argument rendered as ``key=value`` in messages."""
    return KeyValueArgument(key, value, message_format)


def value(key: str, value: Any) -> KeyValueArgument:
    """Create a ``key: value`` argument rendered as just the value in messages."""
    return KeyValueArgument(key, value, VALUE_ONLY_FORMAT)


def entries(mapping: Mapping[str, Any]) -> EntriesArgument:
    """Create an argument writing one field per mapping entry."""
    return EntriesArgument(dict(mapping))


def array(key: str, *values: Any) -> ArrayArgument:
    """Create an argument writing ``key: [values...]``."""
    return ArrayArgument(key, tuple(values))


def raw(key: str, raw_json: str) -> RawArgument:
    """Create an argument writing ``key: <raw_json>`` verbatim."""
    return RawArgument(key, raw_json)


# Short aliases
kv = key_value
v = value
