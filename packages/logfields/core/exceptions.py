"""Exception hierarchy for logfields."""


class LogFieldsError(Exception):
    """Base class for all logfields errors."""

    pass


class MappingDecodeError(LogFieldsError, ValueError):
    """Raised when a field-name mapping text cannot be decoded.

    Attributes:
        raw: The rejected mapping text.
        reason: What specifically went wrong.
    """

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Failed to decode field mapping [{raw}]: {reason}")


class JsonWriteError(LogFieldsError, OSError):
    """Raised when a JSON writer is driven into an invalid state or its stream fails."""

    pass


class ConfigError(LogFieldsError):
    """Raised when a configuration file cannot be read or parsed."""

    pass
