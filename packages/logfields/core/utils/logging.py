"""Logging configuration utilities for logfields.

Provides centralized logging configuration with:
- Flexible output (stdout or file)
- Customizable format strings
- Structured JSON output with log-argument fields
- Context-aware logging with LoggerAdapter
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from logfields.core.fieldnames import FieldNames
from logfields.core.logging.formatter import ArgumentsJSONFormatter
from logfields.core.providers.arguments import ArgumentsJsonProvider

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
    provider: ArgumentsJsonProvider | None = None,
    field_names: FieldNames | None = None,
) -> logging.Handler:
    """Configure application-wide logging.

    Can be called multiple times to reconfigure logging (uses force=True).

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Case-insensitive.
        format_string: Custom format string for text output.
                      Ignored if structured=True.
        filename: Path to log file. If None, logs to stdout.
        structured: If True, write one JSON object per record.
        provider: Arguments provider for structured output
        field_names: Field names for structured output

    Returns:
        The installed handler

    Examples:
        Structured JSON logging with plain arguments as fields:
        >>> provider = ArgumentsJsonProvider(
        ...     ArgumentsProviderConfig(include_non_structured_arguments=True)
        ... )
        >>> configure_logging(level="INFO", structured=True, provider=provider)
    """
    handler: logging.Handler
    if filename:
        handler = logging.FileHandler(filename)
    else:
        handler = logging.StreamHandler(sys.stdout)

    formatter: logging.Formatter
    if structured:
        formatter = ArgumentsJSONFormatter(provider=provider, field_names=field_names)
    else:
        formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,  # Allow reconfiguration
    )
    return handler


def get_logger(name: str, **kwargs: Any) -> logging.Logger | logging.LoggerAdapter:
    """Get a configured logger instance.

    If context kwargs are provided, returns a LoggerAdapter that automatically
    includes the context in all log records.

    Args:
        name: Logger name (usually __name__ from the calling module)
        **kwargs: Additional context to attach to records (e.g., request_id)

    Returns:
        Logger instance, or LoggerAdapter if context provided
    """
    logger = logging.getLogger(name)

    if kwargs:
        return logging.LoggerAdapter(logger, kwargs)

    return logger
