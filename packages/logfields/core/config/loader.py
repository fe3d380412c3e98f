"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from logfields.core.config.models import AppConfig, LoggingConfig
from logfields.core.decoders.decoders import get_decoder
from logfields.core.exceptions import ConfigError
from logfields.core.providers.arguments import ArgumentsJsonProvider
from logfields.core.status.protocol import StatusReporter
from logfields.core.utils.json import read_json
from logfields.core.utils.logging import configure_logging

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "LOGFIELDS_LOG_LEVEL"

# Default app config path (can be overridden)
_DEFAULT_APP_CONFIG_PATH = Path("logfields.yaml")


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ConfigError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ConfigError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Supports both JSON and YAML formats. Format is auto-detected
    from file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ConfigError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            return read_json(path)
        except ValueError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(content).__name__}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Missing files fall back to defaults. ``LOGFIELDS_LOG_LEVEL`` overrides
    the configured logging level when set.

    Args:
        path: Path to app config file (.json, .yaml, or .yml)
              Defaults to logfields.yaml

    Returns:
        Validated AppConfig instance with defaults for missing values

    Raises:
        ConfigError: If the file cannot be parsed
        ValidationError: If config is invalid
    """
    if path is None:
        path = _DEFAULT_APP_CONFIG_PATH

    if Path(path).exists():
        config = AppConfig.model_validate(load_config(path))
    else:
        logger.debug(f"No config file at {path}, using defaults")
        config = AppConfig()

    return _apply_env_overrides(config)


def build_arguments_provider(
    config: AppConfig | None = None,
    reporter: StatusReporter | None = None,
) -> ArgumentsJsonProvider:
    """Build an arguments provider from app config.

    Mapping decode problems are reported through ``reporter`` and never
    raised.

    Args:
        config: AppConfig instance (loads default if None)
        reporter: Status channel (default: log through stdlib logging)

    Returns:
        Configured provider
    """
    if config is None:
        config = load_app_config()

    arguments = config.arguments
    return ArgumentsJsonProvider(
        arguments.to_provider_config(field_name=config.field_names.arguments),
        decoder=get_decoder(arguments.mapping_format),
        reporter=reporter,
    )


def configure_logging_from_config(
    config: AppConfig | None = None,
    reporter: StatusReporter | None = None,
) -> logging.Handler:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
        reporter: Status channel for provider setup problems

    Returns:
        The installed handler
    """
    if config is None:
        config = load_app_config()

    return configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
        provider=build_arguments_provider(config, reporter=reporter),
        field_names=config.field_names,
    )


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    """Return config with environment overrides applied."""
    level = os.getenv(LOG_LEVEL_ENV_VAR)
    if not level:
        return config

    logger.debug(f"Loaded {LOG_LEVEL_ENV_VAR} from environment")
    logging_config = LoggingConfig.model_validate(
        {**config.logging.model_dump(), "level": level.upper()}
    )
    return config.model_copy(update={"logging": logging_config})
