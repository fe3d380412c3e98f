"""Status reporter implementations."""

from __future__ import annotations

import logging
import threading
import traceback

from .models import Status, StatusLevel

STATUS_LOGGER_NAME = "logfields.status"


class LoggingStatusReporter:
    """Forwards statuses to a stdlib logger.

    Example:
        reporter = LoggingStatusReporter()
        reporter.add_error("Failed to parse mapping", error=exc)
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(STATUS_LOGGER_NAME)

    def add_info(self, message: str, origin: str | None = None) -> None:
        self.logger.info(self._prefix(message, origin))

    def add_warn(self, message: str, origin: str | None = None) -> None:
        self.logger.warning(self._prefix(message, origin))

    def add_error(
        self,
        message: str,
        error: BaseException | None = None,
        origin: str | None = None,
    ) -> None:
        exc_info = (type(error), error, error.__traceback__) if error is not None else None
        self.logger.error(self._prefix(message, origin), exc_info=exc_info)

    @staticmethod
    def _prefix(message: str, origin: str | None) -> str:
        return f"[{origin}] {message}" if origin else message


class StatusCollector:
    """Keeps statuses in memory for later inspection.

    Thread-safe. Useful for tests and for surfacing startup problems
    after configuration has finished.
    """

    def __init__(self) -> None:
        self._statuses: list[Status] = []
        self._lock = threading.Lock()

    def add_info(self, message: str, origin: str | None = None) -> None:
        self._add(Status(level=StatusLevel.INFO, message=message, origin=origin))

    def add_warn(self, message: str, origin: str | None = None) -> None:
        self._add(Status(level=StatusLevel.WARN, message=message, origin=origin))

    def add_error(
        self,
        message: str,
        error: BaseException | None = None,
        origin: str | None = None,
    ) -> None:
        formatted = "".join(traceback.format_exception_only(error)).strip() if error else None
        self._add(Status(level=StatusLevel.ERROR, message=message, origin=origin, error=formatted))

    @property
    def statuses(self) -> list[Status]:
        """Snapshot of all collected statuses, oldest first."""
        with self._lock:
            return list(self._statuses)

    @property
    def errors(self) -> list[Status]:
        """Snapshot of collected ERROR statuses."""
        return [s for s in self.statuses if s.level is StatusLevel.ERROR]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def clear(self) -> None:
        with self._lock:
            self._statuses.clear()

    def _add(self, status: Status) -> None:
        with self._lock:
            self._statuses.append(status)


class NullStatusReporter:
    """Reporter that discards all statuses.

    Useful for:
    - Testing (avoid cluttering test output)
    - Dependency injection default where problems are irrelevant
    """

    def add_info(self, message: str, origin: str | None = None) -> None:
        """Discard status."""

    def add_warn(self, message: str, origin: str | None = None) -> None:
        """Discard status."""

    def add_error(
        self,
        message: str,
        error: BaseException | None = None,
        origin: str | None = None,
    ) -> None:
        """Discard status."""
