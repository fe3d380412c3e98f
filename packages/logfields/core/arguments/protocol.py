"""Protocol for arguments that serialize themselves into JSON output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from logfields.core.json.protocol import JsonWriter


@runtime_checkable
class StructuredArgument(Protocol):
    """Log argument that writes its own JSON representation.

    The argument is handed a writer positioned inside an open object
    scope and may write zero, one, or several fields. Any other log
    argument is treated as plain and emitted through its text form.

    Matching is structural: any instance with a ``write_to`` attribute
    qualifies. Class objects are always treated as plain arguments, since
    their ``write_to`` is unbound.

    Example:
        >>> class UserId:
        ...     def __init__(self, user_id: str) -> None:
        ...         self.user_id = user_id
        ...
        ...     def write_to(self, writer: JsonWriter) -> None:
        ...         writer.write_string_field("user_id", self.user_id)
        >>> isinstance(UserId("u-1"), StructuredArgument)
        True
    """

    def write_to(self, writer: JsonWriter) -> None:
        """Write this argument into the writer.

        Args:
            writer: Writer positioned inside an object scope
        """
        ...
