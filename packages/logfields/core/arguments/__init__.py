"""Structured log arguments.

Arguments satisfying ``StructuredArgument`` write their own JSON fields;
everything else is emitted by the arguments provider through ``str()``.
"""

from .protocol import StructuredArgument
from .structured import (
    ArrayArgument,
    EntriesArgument,
    KeyValueArgument,
    RawArgument,
    array,
    entries,
    key_value,
    kv,
    raw,
    v,
    value,
)

__all__ = [
    # Protocol
    "StructuredArgument",
    # Types
    "KeyValueArgument",
    "EntriesArgument",
    "ArrayArgument",
    "RawArgument",
    # Factories
    "key_value",
    "kv",
    "value",
    "v",
    "entries",
    "array",
    "raw",
]
