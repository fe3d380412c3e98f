"""JSON field providers for log events."""

from .arguments import (
    DEFAULT_FIELD_PREFIX,
    ArgumentsJsonProvider,
    ArgumentsProviderConfig,
    resolve_fields_mapping,
)

__all__ = [
    "ArgumentsJsonProvider",
    "ArgumentsProviderConfig",
    "DEFAULT_FIELD_PREFIX",
    "resolve_fields_mapping",
]
