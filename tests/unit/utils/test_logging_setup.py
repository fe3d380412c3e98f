"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from logfields.core.arguments import kv
from logfields.core.fieldnames import FieldNames
from logfields.core.logging import ArgumentsJSONFormatter
from logfields.core.providers import ArgumentsJsonProvider, ArgumentsProviderConfig
from logfields.core.utils.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_text_logging(self, restore_root_logger):
        """Test default text format."""
        handler = configure_logging(level="debug")

        assert restore_root_logger.level == logging.DEBUG
        assert restore_root_logger.handlers == [handler]
        assert isinstance(handler, logging.StreamHandler)
        assert not isinstance(handler.formatter, ArgumentsJSONFormatter)

    def test_structured_logging(self, restore_root_logger):
        """Test structured mode installs the JSON formatter with the provider."""
        provider = ArgumentsJsonProvider(
            ArgumentsProviderConfig(include_non_structured_arguments=True)
        )

        handler = configure_logging(
            structured=True, provider=provider, field_names=FieldNames(arguments="args")
        )

        assert isinstance(handler.formatter, ArgumentsJSONFormatter)
        assert handler.formatter.provider.field_name == "args"

    def test_structured_logging_to_file(self, restore_root_logger, tmp_path: Path):
        """Test structured JSON lines written to a file."""
        log_file = tmp_path / "app.jsonl"
        handler = configure_logging(level="INFO", structured=True, filename=str(log_file))

        logging.getLogger("test.file").info("saved %s", kv("rows", 3))
        handler.flush()

        line = log_file.read_text(encoding="utf-8").strip()
        data = json.loads(line)
        assert data["message"] == "saved rows=3"
        assert data["rows"] == 3

    def test_reconfigure_replaces_handler(self, restore_root_logger):
        """Test calling twice keeps only the latest handler."""
        configure_logging()
        handler = configure_logging(structured=True)

        assert restore_root_logger.handlers == [handler]


class TestGetLogger:
    """Test suite for get_logger."""

    def test_plain_logger(self):
        """Test a Logger is returned without context."""
        logger = get_logger("test.module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_logger_with_context(self):
        """Test context produces a LoggerAdapter carrying it."""
        logger = get_logger("test.module", request_id="req-1")

        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra == {"request_id": "req-1"}
