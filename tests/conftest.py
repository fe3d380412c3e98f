"""Shared pytest fixtures for logfields tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
import io
import logging
from typing import Any

import pytest

from logfields.core.decoders import JsonMappingDecoder
from logfields.core.json import StreamingJsonWriter, render_json
from logfields.core.providers import ArgumentsJsonProvider, ArgumentsProviderConfig
from logfields.core.status import StatusCollector

# ============================================================================
# JSON Output Fixtures
# ============================================================================


@pytest.fixture
def buffer() -> io.StringIO:
    """Provide an empty text buffer."""
    return io.StringIO()


@pytest.fixture
def writer(buffer: io.StringIO) -> StreamingJsonWriter:
    """Provide a writer over the shared buffer."""
    return StreamingJsonWriter(buffer)


@pytest.fixture
def render_fields() -> Callable[[ArgumentsJsonProvider, Sequence[Any] | None], str]:
    """Render a provider's output inside one enclosing JSON object."""

    def _render(provider: ArgumentsJsonProvider, arguments: Sequence[Any] | None) -> str:
        def write(w: StreamingJsonWriter) -> None:
            w.write_start_object()
            provider.write_to(w, arguments)
            w.write_end_object()

        return render_json(write)

    return _render


# ============================================================================
# Provider Fixtures
# ============================================================================


@pytest.fixture
def collector() -> StatusCollector:
    """Provide fresh StatusCollector instance."""
    return StatusCollector()


@pytest.fixture
def make_provider(
    collector: StatusCollector,
) -> Callable[..., ArgumentsJsonProvider]:
    """Build providers with a JSON decoder and the shared status collector."""

    def _make(**options: Any) -> ArgumentsJsonProvider:
        return ArgumentsJsonProvider(
            ArgumentsProviderConfig(**options),
            decoder=JsonMappingDecoder(),
            reporter=collector,
        )

    return _make


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def make_record() -> Callable[..., logging.LogRecord]:
    """Build LogRecords the way Logger.makeRecord does."""

    def _make(msg: str = "message", *args: Any, level: int = logging.INFO) -> logging.LogRecord:
        return logging.LogRecord(
            name="test.logger",
            level=level,
            pathname="/path/to/file.py",
            lineno=42,
            msg=msg,
            args=args,
            exc_info=None,
        )

    return _make


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
