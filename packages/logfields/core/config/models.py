"""Configuration models for logfields."""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from logfields.core.fieldnames import FieldNames
from logfields.core.providers.arguments import DEFAULT_FIELD_PREFIX, ArgumentsProviderConfig


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=True, description="Write one JSON object per record")
    filename: str | None = Field(default=None, description="Log file path (None = stdout)")


class ArgumentsConfig(BaseModel):
    """Log-argument output configuration.

    The field mapping may be given as text (decoded with ``mapping_format``)
    or as a plain mapping in the config file, which is stored as JSON text.
    """

    model_config = ConfigDict(extra="forbid")

    include_structured_arguments: bool = True
    include_non_structured_arguments: bool = False
    non_structured_arguments_field_prefix: str = DEFAULT_FIELD_PREFIX
    non_structured_arguments_fields_mapping: str | None = None
    mapping_format: Literal["json", "yaml"] = "json"

    @field_validator("non_structured_arguments_fields_mapping", mode="before")
    @classmethod
    def _mapping_to_text(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return json.dumps(v)
        return v

    @field_validator("mapping_format", mode="before")
    @classmethod
    def _normalize_format(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v

    def to_provider_config(self, field_name: str | None = None) -> ArgumentsProviderConfig:
        """Build the provider options.

        Args:
            field_name: Wrapper field name for the arguments

        Returns:
            Immutable provider config
        """
        return ArgumentsProviderConfig(
            include_structured_arguments=self.include_structured_arguments,
            include_non_structured_arguments=self.include_non_structured_arguments,
            non_structured_arguments_field_prefix=self.non_structured_arguments_field_prefix,
            non_structured_arguments_fields_mapping=self.non_structured_arguments_fields_mapping,
            field_name=field_name,
        )


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    logging: LoggingConfig = LoggingConfig()
    arguments: ArgumentsConfig = ArgumentsConfig()
    field_names: FieldNames = FieldNames()
