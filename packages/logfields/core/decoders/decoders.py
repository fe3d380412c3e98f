"""JSON and YAML decoders for field-name mapping text."""

from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter, ValidationError
import yaml

from logfields.core.decoders.protocol import MappingDecoder
from logfields.core.exceptions import MappingDecodeError

_MAPPING_ADAPTER: TypeAdapter[dict[str, str]] = TypeAdapter(dict[str, str])


def _validate_mapping(raw: str, data: Any) -> dict[str, str]:
    """Validate decoded data as a string-to-string mapping."""
    if not isinstance(data, dict):
        raise MappingDecodeError(raw, f"expected an object, got {type(data).__name__}")
    try:
        return _MAPPING_ADAPTER.validate_python(data, strict=True)
    except ValidationError as e:
        raise MappingDecodeError(raw, f"{e.error_count()} invalid entries") from e


class JsonMappingDecoder:
    """Decodes JSON object text, e.g. ``{"arg0": "user"}``."""

    def decode(self, text: str) -> dict[str, str]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MappingDecodeError(text, e.msg) from e
        except RecursionError as e:
            raise MappingDecodeError(text, "nesting too deep") from e
        return _validate_mapping(text, data)


class YamlMappingDecoder:
    """Decodes YAML mapping text, block or flow style (``{arg0: user}``).

    An empty document decodes to an empty mapping.
    """

    def decode(self, text: str) -> dict[str, str]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise MappingDecodeError(text, " ".join(str(e).split())) from e
        except RecursionError as e:
            raise MappingDecodeError(text, "nesting too deep") from e
        # safe_load returns None for empty documents
        if data is None:
            return {}
        return _validate_mapping(text, data)


_DECODERS: dict[str, type[JsonMappingDecoder] | type[YamlMappingDecoder]] = {
    "json": JsonMappingDecoder,
    "yaml": YamlMappingDecoder,
}


def get_decoder(fmt: str = "json") -> MappingDecoder:
    """Return a decoder for a mapping text format.

    Args:
        fmt: "json" or "yaml" (case-insensitive)

    Returns:
        Decoder instance

    Raises:
        ValueError: If the format is unknown
    """
    try:
        return _DECODERS[fmt.lower()]()
    except KeyError:
        raise ValueError(f"Unsupported mapping format: {fmt}") from None
