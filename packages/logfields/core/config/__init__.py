"""Configuration management for logfields."""

from logfields.core.config.loader import (
    build_arguments_provider,
    configure_logging_from_config,
    detect_format,
    load_app_config,
    load_config,
)
from logfields.core.config.models import AppConfig, ArgumentsConfig, LoggingConfig

__all__ = [
    # Loaders
    "detect_format",
    "load_config",
    "load_app_config",
    "build_arguments_provider",
    "configure_logging_from_config",
    # Models
    "AppConfig",
    "ArgumentsConfig",
    "LoggingConfig",
]
