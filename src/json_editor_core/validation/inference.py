"""Minimal schema inference from a sample JSON value.

The inferred schema describes exactly the sample's shape:

- object -> ``{"type": "object", "properties": {...}, "required": [every key]}``
- array  -> ``{"type": "array", "items": <schema of the first element>}``,
  or ``"items": {}`` for an empty array
- primitives -> ``{"type": ...}``; strings additionally get a ``format`` of
  ``date-time``, ``email`` or ``uri`` when they look like one (checked in
  that order)

Arrays are inferred from their FIRST element only, so a heterogeneous array
gets the schema of whatever comes first.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any
from urllib.parse import urlsplit

from json_editor_core.tree.nodes import NodeType, node_type_of

__all__ = ["infer_schema"]

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def infer_schema(value: Any) -> dict[str, Any]:
    """Infer a Draft-07 schema that the given sample value satisfies.

    Raises:
        SerializationError: If ``value`` holds a non-JSON type.
    """
    node_type = node_type_of(value)

    if node_type is NodeType.OBJECT:
        return {
            "type": "object",
            "properties": {key: infer_schema(item) for key, item in value.items()},
            "required": list(value),
        }

    if node_type is NodeType.ARRAY:
        return {"type": "array", "items": infer_schema(value[0]) if value else {}}

    if node_type is NodeType.STRING:
        string_format = _detect_string_format(value)
        if string_format is None:
            return {"type": "string"}
        return {"type": "string", "format": string_format}

    # NUMBER covers both int and float
    return {"type": str(node_type)}


def _detect_string_format(text: str) -> str | None:
    if _is_date_time(text):
        return "date-time"
    if _EMAIL_RE.match(text):
        return "email"
    if _is_uri(text):
        return "uri"
    return None


def _is_date_time(text: str) -> bool:
    # A bare date such as "2024-01-31" parses too, but has no time component
    if "T" not in text:
        return False
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def _is_uri(text: str) -> bool:
    try:
        parts = urlsplit(text)
    except ValueError:
        return False
    if not parts.scheme or " " in text:
        return False
    return bool(parts.netloc or parts.path)
