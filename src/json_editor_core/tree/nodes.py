"""JsonNode dataclass and NodeType StrEnum for the editable JSON tree.

Provides the data types built by ``TreeBuilder`` and transformed by the pure
operations in ``json_editor_core.tree.model``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from json_editor_core.errors import SerializationError
from json_editor_core.paths import JsonPath

__all__ = ["CONTAINER_TYPES", "ROOT_KEY", "JsonNode", "NodeType", "node_type_of"]

# Key carried by the root node, which has no parent key of its own.
ROOT_KEY = "root"


class NodeType(StrEnum):
    """The closed set of JSON value kinds a node can hold.

    StrEnum values are the lowercased member names:
    - STRING  -> "string"
    - NUMBER  -> "number"  : int or float
    - BOOLEAN -> "boolean"
    - NULL    -> "null"
    - OBJECT  -> "object"  : dict with str keys
    - ARRAY   -> "array"   : list
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    OBJECT = auto()
    ARRAY = auto()


CONTAINER_TYPES = frozenset({NodeType.OBJECT, NodeType.ARRAY})


def node_type_of(value: Any) -> NodeType:
    """Return the NodeType tag for a JSON value.

    Raises:
        SerializationError: If ``value`` is not a JSON type.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if value is None:
        return NodeType.NULL
    if isinstance(value, bool):
        return NodeType.BOOLEAN
    if isinstance(value, (int, float)):
        return NodeType.NUMBER
    if isinstance(value, str):
        return NodeType.STRING
    if isinstance(value, dict):
        return NodeType.OBJECT
    if isinstance(value, list):
        return NodeType.ARRAY
    msg = f"Unsupported JSON value type: {type(value)!r}"
    raise SerializationError(msg)


@dataclass(slots=True, eq=False)
class JsonNode:
    """One JSON value at one path.

    Attributes:
        id:             Identity unique within one tree ("node_1", "node_2", ...),
                        assigned in preorder.
        path:           JsonPath from the root; always ``parent.path + (key,)``.
        key:            Last path segment, or ``"root"`` for the root node.
        value:          The JSON value.  For containers, a shallow container
                        mirroring ``children`` (treat as read-only).
        node_type:      Tag derived from ``value``.
        parent:         Non-owning back-reference for upward lookup only.
        children:       A list for OBJECT/ARRAY nodes, None for leaves.
        is_collapsed:   UI flag; set by ``collapse_to``.
        is_editable:    UI flag; carried, not interpreted.
        is_lazy_loaded: UI flag; carried, not interpreted.
    """

    id: str
    path: JsonPath
    key: str | int
    value: Any
    node_type: NodeType
    parent: JsonNode | None = field(default=None, repr=False)
    children: list[JsonNode] | None = None
    is_collapsed: bool = False
    is_editable: bool = True
    is_lazy_loaded: bool = False

    @property
    def is_container(self) -> bool:
        return self.node_type in CONTAINER_TYPES

    def iter_nodes(self) -> Iterator[JsonNode]:
        """Yield this node and all its descendants in preorder."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))
