"""JsonPath helpers: normalization, JSON Pointer conversion, and plain-value access.

A ``JsonPath`` is a tuple of segments, each either a ``str`` (object key) or an
``int`` (array index), locating a value from the document root.  The empty
tuple addresses the root.

JSON Pointer strings (RFC 6901) are used for display and for log messages:
- ``()``            -> ``""``
- ``("a", 0, "b")`` -> ``"/a/0/b"``
- ``"~"`` and ``"/"`` inside keys are escaped as ``"~0"`` and ``"~1"``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from json_editor_core.errors import NodeNotFoundError

__all__ = [
    "JsonPath",
    "delete_value_at_path",
    "format_value",
    "get_value_at_path",
    "normalize_path",
    "path_to_pointer",
    "pointer_to_path",
    "set_value_at_path",
]

JsonPath = tuple[str | int, ...]


def normalize_path(path: Sequence[str | int]) -> JsonPath:
    """Return ``path`` as a tuple, rejecting segments that are not str or int.

    A plain ``str`` is a sequence too, so it is refused explicitly: ``"abc"``
    would otherwise become ``("a", "b", "c")``.

    Raises:
        NodeNotFoundError: If ``path`` is a string or holds a non-str/int
            segment; such a path can never resolve.
    """
    if isinstance(path, str):
        msg = f"JsonPath must be a sequence of segments, got string {path!r}"
        raise NodeNotFoundError(msg)
    segments = tuple(path)
    for segment in segments:
        # bool subclasses int but is never a valid index
        if isinstance(segment, bool) or not isinstance(segment, (str, int)):
            msg = f"Invalid JsonPath segment {segment!r} in {segments!r}"
            raise NodeNotFoundError(msg)
    return segments


def path_to_pointer(path: Sequence[str | int]) -> str:
    """Render a JsonPath as an RFC 6901 JSON Pointer string."""
    return "".join(
        "/" + str(segment).replace("~", "~0").replace("/", "~1") for segment in path
    )


def pointer_to_path(pointer: str) -> JsonPath:
    """Parse a JSON Pointer into a JsonPath.

    Splits on ``/``, unescapes ``~1`` and ``~0``, and converts purely numeric
    segments into ``int`` indices.  Both ``""`` and ``"#"`` address the root.
    """
    if pointer.startswith("#"):
        pointer = pointer[1:]
    if not pointer:
        return ()
    segments: list[str | int] = []
    for raw in pointer.split("/")[1:]:
        segment = raw.replace("~1", "/").replace("~0", "~")
        segments.append(int(segment) if segment.isdigit() else segment)
    return tuple(segments)


def get_value_at_path(
    document: Any, path: Sequence[str | int], default: Any = None
) -> Any:
    """Return the value at ``path`` inside a plain JSON value.

    ``default`` is returned when the path does not resolve.  A stored JSON
    null is also None, so pass a sentinel ``default`` to tell the two apart.
    """
    current = document
    for segment in path:
        if isinstance(current, dict) and isinstance(segment, str):
            if segment not in current:
                return default
            current = current[segment]
        elif isinstance(current, list) and _is_index(segment):
            if segment >= len(current):
                return default
            current = current[segment]
        else:
            return default
    return current


def set_value_at_path(document: Any, path: Sequence[str | int], value: Any) -> None:
    """Set ``value`` at ``path`` in place, creating missing intermediate containers.

    A missing intermediate container (or a null placeholder left by padding)
    is a list when the following segment is an int and a dict otherwise.
    Arrays are padded with None up to the target index.

    Raises:
        ValueError: If ``path`` is empty (the root cannot be replaced in place).
        NodeNotFoundError: If a segment does not fit its container: a str into
            an array, an int or a negative index, or a step through a leaf.
    """
    if not path:
        msg = "Cannot set the root value in place"
        raise ValueError(msg)
    current = document
    for depth, (segment, following) in enumerate(
        zip(path[:-1], path[1:], strict=True)
    ):
        _check_step(current, segment, path[:depth])
        if isinstance(current, list):
            _pad(current, segment)
            if current[segment] is None:
                current[segment] = [] if isinstance(following, int) else {}
        elif current.get(segment) is None:
            current[segment] = [] if isinstance(following, int) else {}
        current = current[segment]
    last = path[-1]
    _check_step(current, last, path[:-1])
    if isinstance(current, list):
        _pad(current, last)
    current[last] = value


def _is_index(segment: Any) -> bool:
    return isinstance(segment, int) and not isinstance(segment, bool) and segment >= 0


def _check_step(container: Any, segment: Any, where: Sequence[str | int]) -> None:
    if isinstance(container, list) and _is_index(segment):
        return
    if isinstance(container, dict) and isinstance(segment, str):
        return
    msg = (
        f"Cannot address segment {segment!r} in {format_value(container)} "
        f"at {path_to_pointer(where)!r}"
    )
    raise NodeNotFoundError(msg)


def _pad(array: list[Any], index: int) -> None:
    while len(array) <= index:
        array.append(None)


def delete_value_at_path(document: Any, path: Sequence[str | int]) -> None:
    """Delete the value at ``path`` in place; absent paths are ignored.

    Array elements are spliced out, so later elements shift down by one.
    """
    if not path:
        return
    parent = get_value_at_path(document, path[:-1])
    last = path[-1]
    if isinstance(parent, list) and isinstance(last, int) and 0 <= last < len(parent):
        del parent[last]
    elif isinstance(parent, dict) and last in parent:
        del parent[last]


def format_value(value: Any) -> str:
    """Short human-readable rendering of a JSON value (used in log messages)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, list):
        return f"[{len(value)} items]"
    if isinstance(value, dict):
        return f"{{{len(value)} props}}"
    return str(value)
