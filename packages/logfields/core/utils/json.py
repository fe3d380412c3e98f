"""JSON utilities with numpy, pydantic and Path support."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np
from pydantic import BaseModel


def json_default(obj: Any) -> Any:
    """JSON serializer for types not supported by default.

    Handles:
    - pathlib.Path -> str
    - numpy arrays -> list
    - numpy scalars -> Python scalars
    - pydantic models -> JSON-mode dict
    - anything else -> str(obj)
    """
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.bool_):
        return bool(obj)

    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")

    return str(obj)


def dumps_compact(obj: Any) -> str:
    """Serialize a value as compact JSON text.

    Args:
        obj: Value to serialize

    Returns:
        JSON text without insignificant whitespace
    """
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False, default=json_default)


def read_json(path: str | Path) -> dict[str, Any]:
    """Read and parse JSON file.

    Args:
        path: Input file path

    Returns:
        Parsed JSON as dictionary

    Raises:
        ValueError: If the document is not a JSON object
    """
    data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data
