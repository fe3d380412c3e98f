"""Streaming JSON writer over a text stream.

Writes compact JSON tokens straight to the stream, so output produced
before a failure stays written.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
import io
import json
from typing import Any, TextIO

from logfields.core.exceptions import JsonWriteError
from logfields.core.json.protocol import JsonWriter
from logfields.core.utils.json import dumps_compact


class ScopeKind(str, Enum):
    """Kind of an open JSON scope."""

    ROOT = "root"
    OBJECT = "object"
    ARRAY = "array"


@dataclass
class _Scope:
    kind: ScopeKind
    count: int = 0


class StreamingJsonWriter:
    """Compact JSON writer that tracks scopes to place separators.

    Not thread-safe (use one writer per document).

    Example:
        >>> buffer = io.StringIO()
        >>> writer = StreamingJsonWriter(buffer)
        >>> writer.write_start_object()
        >>> writer.write_string_field("message", "hello")
        >>> writer.write_end_object()
        >>> buffer.getvalue()
        '{"message":"hello"}'
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._scopes: list[_Scope] = [_Scope(ScopeKind.ROOT)]
        self._pending_name = False

    @property
    def depth(self) -> int:
        """Number of currently open object/array scopes."""
        return len(self._scopes) - 1

    # Structure

    def write_start_object(self) -> None:
        self._before_value()
        self._stream.write("{")
        self._scopes.append(_Scope(ScopeKind.OBJECT))

    def write_end_object(self) -> None:
        self._close(ScopeKind.OBJECT, "}")

    def write_start_array(self) -> None:
        self._before_value()
        self._stream.write("[")
        self._scopes.append(_Scope(ScopeKind.ARRAY))

    def write_end_array(self) -> None:
        self._close(ScopeKind.ARRAY, "]")

    def write_field_name(self, name: str) -> None:
        scope = self._scopes[-1]
        if scope.kind is not ScopeKind.OBJECT:
            raise JsonWriteError(f"Cannot write field name {name!r} in {scope.kind.value} scope")
        if self._pending_name:
            raise JsonWriteError(f"Cannot write field name {name!r}: previous field has no value")
        if scope.count:
            self._stream.write(",")
        self._stream.write(json.dumps(str(name), ensure_ascii=False))
        self._stream.write(":")
        self._pending_name = True

    # Fields

    def write_object_field_start(self, name: str) -> None:
        self.write_field_name(name)
        self.write_start_object()

    def write_array_field_start(self, name: str) -> None:
        self.write_field_name(name)
        self.write_start_array()

    def write_string_field(self, name: str, value: str) -> None:
        self.write_field_name(name)
        self.write_string(value)

    def write_object_field(self, name: str, value: Any) -> None:
        self.write_field_name(name)
        self.write_object(value)

    # Values

    def write_string(self, value: str) -> None:
        self._before_value()
        self._stream.write(json.dumps(str(value), ensure_ascii=False))

    def write_object(self, value: Any) -> None:
        encoded = dumps_compact(value)
        self._before_value()
        self._stream.write(encoded)

    def write_raw_value(self, text: str) -> None:
        self._before_value()
        self._stream.write(text)

    def flush(self) -> None:
        self._stream.flush()

    def _before_value(self) -> None:
        """Validate that a value may be written here and emit its separator."""
        scope = self._scopes[-1]
        if scope.kind is ScopeKind.OBJECT:
            if not self._pending_name:
                raise JsonWriteError("Cannot write a value in object scope without a field name")
            self._pending_name = False
        elif scope.kind is ScopeKind.ARRAY:
            if scope.count:
                self._stream.write(",")
        elif scope.count:
            raise JsonWriteError("Root scope already holds a value")
        scope.count += 1

    def _close(self, kind: ScopeKind, token: str) -> None:
        scope = self._scopes[-1]
        if scope.kind is not kind:
            raise JsonWriteError(f"Cannot end {kind.value}: current scope is {scope.kind.value}")
        if self._pending_name:
            raise JsonWriteError(f"Cannot end {kind.value}: last field has no value")
        self._stream.write(token)
        self._scopes.pop()


def render_json(write: Callable[[JsonWriter], None]) -> str:
    """Run a write callback against a fresh writer and return the text produced.

    Args:
        write: Callback receiving the writer

    Returns:
        The JSON text written by the callback
    """
    buffer = io.StringIO()
    write(StreamingJsonWriter(buffer))
    return buffer.getvalue()
