"""Streaming JSON output for logfields.

Example:
    >>> from logfields.core.json import render_json
    >>> render_json(lambda w: w.write_object({"a": 1}))
    '{"a":1}'
"""

from .protocol import JsonWriter
from .writer import ScopeKind, StreamingJsonWriter, render_json

__all__ = [
    # Protocol
    "JsonWriter",
    # Implementation
    "StreamingJsonWriter",
    "ScopeKind",
    # Helpers
    "render_json",
]
