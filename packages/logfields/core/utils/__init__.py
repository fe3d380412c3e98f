"""Shared utilities for logfields."""

from logfields.core.utils.json import dumps_compact, json_default, read_json

__all__ = [
    "dumps_compact",
    "json_default",
    "read_json",
]
