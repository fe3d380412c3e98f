"""Field names used in JSON log output."""

from pydantic import BaseModel, ConfigDict, Field


class FieldNames(BaseModel):
    """Names of the top-level fields written for each log event.

    Setting a name to ``None`` omits that field. ``arguments`` is the
    wrapper object for log arguments; ``None`` writes arguments inline.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    timestamp: str | None = "@timestamp"
    version: str | None = "@version"
    message: str | None = "message"
    logger: str | None = "logger_name"
    thread: str | None = "thread_name"
    level: str | None = "level"
    level_value: str | None = "level_value"
    stack_trace: str | None = "stack_trace"
    arguments: str | None = Field(
        default=None, description="Wrapper object for log arguments (None = inline)"
    )
