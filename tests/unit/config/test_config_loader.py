"""Tests for configuration loading."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from logfields.core.config import (
    AppConfig,
    ArgumentsConfig,
    build_arguments_provider,
    configure_logging_from_config,
    detect_format,
    load_app_config,
    load_config,
)
from logfields.core.decoders import YamlMappingDecoder
from logfields.core.exceptions import ConfigError
from logfields.core.logging import ArgumentsJSONFormatter

YAML_CONFIG = """\
logging:
  level: DEBUG
arguments:
  include_non_structured_arguments: true
  non_structured_arguments_field_prefix: p
  non_structured_arguments_fields_mapping: "{p0: first}"
  mapping_format: yaml
field_names:
  arguments: args
"""


class TestDetectFormat:
    """Tests for format detection."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("c.json", "json"), ("c.yaml", "yaml"), ("c.YML", "yaml")],
    )
    def test_known_extensions(self, name, expected):
        """Test supported extensions."""
        assert detect_format(name) == expected

    def test_unknown_extension(self):
        """Test unsupported extensions raise ConfigError."""
        with pytest.raises(ConfigError, match="Unsupported config format: .toml"):
            detect_format("c.toml")


class TestLoadConfig:
    """Tests for raw config loading."""

    def test_missing_file(self, tmp_path: Path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_json_file(self, tmp_path: Path):
        """Test JSON files load as dicts."""
        path = tmp_path / "c.json"
        path.write_text('{"logging": {"level": "INFO"}}', encoding="utf-8")

        assert load_config(path) == {"logging": {"level": "INFO"}}

    def test_invalid_json(self, tmp_path: Path):
        """Test malformed JSON raises ConfigError."""
        path = tmp_path / "c.json"
        path.write_text("{invalid", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(path)

    def test_empty_yaml(self, tmp_path: Path):
        """Test an empty YAML file loads as an empty dict."""
        path = tmp_path / "c.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == {}

    def test_invalid_yaml(self, tmp_path: Path):
        """Test malformed YAML raises ConfigError."""
        path = tmp_path / "c.yaml"
        path.write_text("logging: [unclosed", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_yaml_not_a_mapping(self, tmp_path: Path):
        """Test a YAML list document is rejected."""
        path = tmp_path / "c.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Expected a mapping"):
            load_config(path)


class TestLoadAppConfig:
    """Tests for validated app config."""

    def test_missing_file_uses_defaults(self, tmp_path: Path, monkeypatch):
        """Test defaults when no config file exists."""
        monkeypatch.delenv("LOGFIELDS_LOG_LEVEL", raising=False)

        config = load_app_config(tmp_path / "missing.yaml")

        assert config == AppConfig()
        assert config.arguments.include_structured_arguments is True
        assert config.field_names.arguments is None

    def test_yaml_file(self, tmp_path: Path, monkeypatch):
        """Test a YAML file populates every section."""
        monkeypatch.delenv("LOGFIELDS_LOG_LEVEL", raising=False)
        path = tmp_path / "logfields.yaml"
        path.write_text(YAML_CONFIG, encoding="utf-8")

        config = load_app_config(path)

        assert config.logging.level == "DEBUG"
        assert config.arguments.include_non_structured_arguments is True
        assert config.arguments.non_structured_arguments_fields_mapping == "{p0: first}"
        assert config.arguments.mapping_format == "yaml"
        assert config.field_names.arguments == "args"

    def test_env_overrides_level(self, tmp_path: Path, monkeypatch):
        """Test LOGFIELDS_LOG_LEVEL replaces the configured level."""
        monkeypatch.setenv("LOGFIELDS_LOG_LEVEL", "warning")

        config = load_app_config(tmp_path / "missing.yaml")

        assert config.logging.level == "WARNING"

    def test_invalid_env_level(self, tmp_path: Path, monkeypatch):
        """Test an invalid level from the environment is rejected."""
        monkeypatch.setenv("LOGFIELDS_LOG_LEVEL", "loud")

        with pytest.raises(ValidationError):
            load_app_config(tmp_path / "missing.yaml")

    def test_invalid_level(self):
        """Test schema validation of the logging level."""
        with pytest.raises(ValidationError):
            AppConfig.model_validate({"logging": {"level": "LOUD"}})

    def test_unknown_top_level_keys_ignored(self):
        """Test forward compatibility for unknown sections."""
        config = AppConfig.model_validate({"future_section": {"a": 1}})

        assert config == AppConfig()

    def test_unknown_argument_option_rejected(self):
        """Test typos in argument options are rejected."""
        with pytest.raises(ValidationError):
            ArgumentsConfig.model_validate({"include_structured": False})


class TestArgumentsConfig:
    """Tests for the arguments section."""

    def test_mapping_given_as_dict(self):
        """Test a mapping object is stored as JSON text."""
        config = ArgumentsConfig.model_validate(
            {"non_structured_arguments_fields_mapping": {"arg0": "user"}}
        )

        assert json.loads(config.non_structured_arguments_fields_mapping) == {"arg0": "user"}

    def test_mapping_format_case_insensitive(self):
        """Test mapping_format accepts any case."""
        assert ArgumentsConfig(mapping_format="YAML").mapping_format == "yaml"

    def test_to_provider_config(self):
        """Test provider options are copied across."""
        config = ArgumentsConfig(
            include_structured_arguments=False,
            include_non_structured_arguments=True,
            non_structured_arguments_field_prefix="p",
            non_structured_arguments_fields_mapping='{"p0": "first"}',
        )

        provider_config = config.to_provider_config(field_name="args")

        assert provider_config.include_structured_arguments is False
        assert provider_config.include_non_structured_arguments is True
        assert provider_config.non_structured_arguments_field_prefix == "p"
        assert provider_config.non_structured_arguments_fields_mapping == '{"p0": "first"}'
        assert provider_config.field_name == "args"


class TestBuildArgumentsProvider:
    """Tests for wiring a provider from config."""

    def test_yaml_mapping_resolved(self, tmp_path: Path, monkeypatch, collector):
        """Test the decoder follows mapping_format and the mapping resolves."""
        monkeypatch.delenv("LOGFIELDS_LOG_LEVEL", raising=False)
        path = tmp_path / "logfields.yaml"
        path.write_text(YAML_CONFIG, encoding="utf-8")

        provider = build_arguments_provider(load_app_config(path), reporter=collector)

        assert isinstance(provider.decoder, YamlMappingDecoder)
        assert provider.mapping_resolved
        assert dict(provider.fields_mapping) == {"p0": "first"}
        assert provider.field_name == "args"
        assert not collector.has_errors

    def test_bad_mapping_reported_not_raised(self, collector):
        """Test an undecodable mapping does not block startup."""
        config = AppConfig.model_validate(
            {"arguments": {"non_structured_arguments_fields_mapping": "{invalid"}}
        )

        provider = build_arguments_provider(config, reporter=collector)

        assert not provider.mapping_resolved
        assert len(collector.errors) == 1

    def test_bad_mapping_reported_once_with_wrapper(self, collector):
        """Test provider plus formatter setup reports a bad mapping once."""
        config = AppConfig.model_validate(
            {
                "arguments": {"non_structured_arguments_fields_mapping": "{invalid"},
                "field_names": {"arguments": "args"},
            }
        )

        provider = build_arguments_provider(config, reporter=collector)
        formatter = ArgumentsJSONFormatter(provider, field_names=config.field_names)

        assert formatter.provider.field_name == "args"
        assert len(collector.errors) == 1


class TestConfigureLoggingFromConfig:
    """Tests for logging setup from config."""

    def test_structured_handler_installed(self, restore_root_logger, collector):
        """Test the handler uses the JSON formatter and configured level."""
        config = AppConfig.model_validate(
            {"logging": {"level": "ERROR"}, "field_names": {"arguments": "args"}}
        )

        handler = configure_logging_from_config(config, reporter=collector)

        assert restore_root_logger.level == 40
        assert isinstance(handler.formatter, ArgumentsJSONFormatter)
        assert handler.formatter.provider.field_name == "args"

    def test_text_handler_installed(self, restore_root_logger):
        """Test structured: false keeps the text format."""
        config = AppConfig.model_validate({"logging": {"structured": False, "format": "%(message)s"}})

        handler = configure_logging_from_config(config)

        assert not isinstance(handler.formatter, ArgumentsJSONFormatter)
        assert handler.formatter._fmt == "%(message)s"
