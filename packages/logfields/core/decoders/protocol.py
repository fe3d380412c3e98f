"""Protocol for decoders of field-name mapping text."""

from typing import Protocol


class MappingDecoder(Protocol):
    """Turns mapping text into a ``str -> str`` table.

    Implementations must raise ``MappingDecodeError`` for any text they
    cannot decode; other exceptions are treated as programming errors.
    """

    def decode(self, text: str) -> dict[str, str]:
        """Decode mapping text.

        Args:
            text: Raw mapping text (e.g. ``'{"arg0": "user"}'``)

        Returns:
            Mapping from default field name to replacement name

        Raises:
            MappingDecodeError: If the text is malformed or not a string mapping
        """
        ...
