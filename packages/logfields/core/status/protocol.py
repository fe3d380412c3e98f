"""Protocol definition for configuration status reporting."""

from typing import Protocol


class StatusReporter(Protocol):
    """Channel for configuration-time problems.

    Components report setup problems (such as an undecodable field
    mapping) here instead of raising, so that a bad setting never
    blocks startup or leaks into event output.
    """

    def add_info(self, message: str, origin: str | None = None) -> None:
        """Report an informational status.

        Args:
            message: Human-readable message
            origin: Name of the reporting component
        """
        ...

    def add_warn(self, message: str, origin: str | None = None) -> None:
        """Report a warning status.

        Args:
            message: Human-readable message
            origin: Name of the reporting component
        """
        ...

    def add_error(
        self,
        message: str,
        error: BaseException | None = None,
        origin: str | None = None,
    ) -> None:
        """Report an error status.

        Args:
            message: Human-readable message
            error: Exception that caused the problem, if any
            origin: Name of the reporting component
        """
        ...
