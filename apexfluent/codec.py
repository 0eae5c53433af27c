"""Encoding and loading helpers for chart options trees.

Builders hold plain Python values (including `date`/`datetime` categories),
while the rendering engine consumes JSON. These helpers convert a tree into a
JSON-safe payload and read seed trees back from JSON or YAML documents, which
`Chart.from_options` can then adopt.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import Any, cast

import yaml

from .schema import ChartOptions


def encode_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-safe deep copy of an options tree.

    Args:
        options: Options tree, typically `Chart.options`.

    Returns:
        Dict payload where dates are ISO strings and tuples are lists.

    Raises:
        ValueError: When a mapping key is not a string or a value has no JSON
            representation (for example a Python callable used as formatter).
    """

    return cast(dict[str, Any], _encode_value(options, ""))


def dumps_options(options: Mapping[str, Any], *, indent: int | None = None) -> str:
    """Serialize an options tree to a JSON string."""

    return json.dumps(encode_options(options), indent=indent)


def load_options(text: str) -> ChartOptions:
    """Parse an options tree from JSON or YAML text.

    Args:
        text: JSON or YAML document whose top level is a mapping.

    Returns:
        The parsed tree. An empty document yields an empty dict.

    Raises:
        ValueError: If the document's top level is not a mapping.
    """

    payload = yaml.safe_load(text) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"Chart options document must be a mapping, got {type(payload).__name__}.")
    return payload


def load_options_file(path: str | Path) -> ChartOptions:
    """Read a UTF-8 JSON or YAML file and parse it with `load_options`."""

    return load_options(Path(path).read_text(encoding="utf-8"))


def _encode_value(value: Any, path: str) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        encoded: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValueError(f"Option key {key!r} at {_display(path)} must be a string.")
            encoded[key] = _encode_value(item, f"{path}.{key}" if path else key)
        return encoded
    if isinstance(value, (list, tuple)):
        return [_encode_value(item, f"{path}[{idx}]") for idx, item in enumerate(value)]
    raise ValueError(f"Option {_display(path)} holds a {type(value).__name__} value that cannot be encoded as JSON.")


def _display(path: str) -> str:
    return path or "<root>"
