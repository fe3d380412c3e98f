"""Decoders for the non-structured argument field-name mapping."""

from .decoders import JsonMappingDecoder, YamlMappingDecoder, get_decoder
from .protocol import MappingDecoder

__all__ = [
    "MappingDecoder",
    "JsonMappingDecoder",
    "YamlMappingDecoder",
    "get_decoder",
]
