"""Data models for configuration status reporting."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class StatusLevel(str, Enum):
    """Status level enumeration."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class Status(BaseModel):
    """A configuration-time message, kept apart from event output."""

    level: StatusLevel
    message: str
    origin: str | None = None
    error: str | None = Field(default=None, description="Formatted exception, if any")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}
