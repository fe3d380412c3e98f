"""Protocol definition for streaming JSON writers."""

from typing import Any, Protocol


class JsonWriter(Protocol):
    """Protocol for streaming JSON writers.

    A writer emits JSON tokens in order, directly into its sink.
    Callers open and close scopes explicitly; field names are only
    valid inside an object scope, and each field name must be
    followed by exactly one value.
    """

    def write_start_object(self) -> None:
        """Start an object value."""
        ...

    def write_end_object(self) -> None:
        """Close the innermost object scope."""
        ...

    def write_start_array(self) -> None:
        """Start an array value."""
        ...

    def write_end_array(self) -> None:
        """Close the innermost array scope."""
        ...

    def write_field_name(self, name: str) -> None:
        """Write a field name inside the current object scope.

        Args:
            name: Field name

        Raises:
            JsonWriteError: If the current scope is not an object
        """
        ...

    def write_object_field_start(self, name: str) -> None:
        """Write a field name followed by the start of an object value."""
        ...

    def write_array_field_start(self, name: str) -> None:
        """Write a field name followed by the start of an array value."""
        ...

    def write_string_field(self, name: str, value: str) -> None:
        """Write a field whose value is a JSON string.

        Args:
            name: Field name
            value: Text value
        """
        ...

    def write_object_field(self, name: str, value: Any) -> None:
        """Write a field whose value is any JSON-serializable object.

        Args:
            name: Field name
            value: Value to serialize
        """
        ...

    def write_string(self, value: str) -> None:
        """Write a JSON string value."""
        ...

    def write_object(self, value: Any) -> None:
        """Write any JSON-serializable value."""
        ...

    def write_raw_value(self, text: str) -> None:
        """Write pre-encoded JSON text verbatim as a value."""
        ...

    def flush(self) -> None:
        """Flush any buffered output to the underlying sink."""
        ...
