"""Pure operations over JsonNode trees.

Every function here is non-destructive: mutations clone the input tree with
``clone_tree``, edit the private clone, and ``relink`` it before returning.
The input root and every node reachable from it stay exactly as they were, so
a reader holding an older root keeps a stable view without any locking.

Mutations rebuild the edited node's children wholesale rather than diffing
them, and all of them are O(tree size).
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from json_editor_core.errors import (
    NodeNotFoundError,
    NotAnObjectError,
    RootRemovalError,
    SerializationError,
)
from json_editor_core.paths import JsonPath, normalize_path, path_to_pointer
from json_editor_core.tree.builder import TreeBuilder, clone_tree, relink
from json_editor_core.tree.nodes import JsonNode, NodeType

__all__ = [
    "add_property",
    "collapse_to",
    "find_node",
    "parse",
    "remove_node",
    "serialize",
    "update_value",
]


def parse(value: Any, *, editable: bool = True) -> JsonNode:
    """Build a new tree from a JSON value (ids start again at ``node_1``)."""
    return TreeBuilder(editable=editable).build(value)


def find_node(root: JsonNode, path: Sequence[str | int]) -> JsonNode | None:
    """Return the node at ``path``, or None when the path does not resolve.

    Segments match child keys exactly and type-sensitively: the index ``1``
    never matches the object key ``"1"``, and ``True`` never matches ``1``.
    """
    current = root
    for segment in path:
        if current.children is None:
            return None
        for child in current.children:
            if type(child.key) is type(segment) and child.key == segment:
                current = child
                break
        else:
            return None
    return current


def update_value(
    root: JsonNode, path: Sequence[str | int], new_value: Any
) -> JsonNode:
    """Return a new tree with the value at ``path`` replaced by ``new_value``.

    The node's type is recomputed and, for containers, its children are
    rebuilt from ``new_value``.  Collapse and editable flags of the replaced
    node are kept; its new descendants start expanded.

    Raises:
        NodeNotFoundError: If ``path`` does not resolve.
        SerializationError: If ``new_value`` is not representable as a tree.
    """
    path = normalize_path(path)
    clone = clone_tree(root)
    target = _require(clone, path)
    builder = TreeBuilder(editable=target.is_editable)
    replacement = builder.create(new_value, target.key)
    target.value = replacement.value
    target.node_type = replacement.node_type
    target.children = replacement.children
    return relink(clone)


def add_property(
    root: JsonNode, path: Sequence[str | int], key: str, value: Any
) -> JsonNode:
    """Return a new tree with property ``key`` added to the object at ``path``.

    The new child is appended after existing properties.  When ``key`` is
    already present its child is replaced in place, so object keys stay unique
    and property order matches plain ``dict`` assignment.

    Raises:
        NodeNotFoundError: If ``path`` does not resolve.
        NotAnObjectError: If the node at ``path`` is not an object.
        SerializationError: If ``value`` is not representable as a tree.
    """
    path = normalize_path(path)
    if not isinstance(key, str):
        msg = f"Property key must be a string, got {key!r}"
        raise SerializationError(msg)
    clone = clone_tree(root)
    target = _require(clone, path)
    if target.node_type is not NodeType.OBJECT or target.children is None:
        msg = (
            f"Cannot add property to {target.node_type} node at "
            f"{path_to_pointer(path)!r}"
        )
        raise NotAnObjectError(msg)
    child = TreeBuilder(editable=target.is_editable).create(value, key)
    for index, existing in enumerate(target.children):
        if existing.key == key:
            target.children[index] = child
            break
    else:
        target.children.append(child)
    return relink(clone)


def remove_node(root: JsonNode, path: Sequence[str | int]) -> JsonNode:
    """Return a new tree without the node at ``path``.

    Removing an array element shifts the following elements down, so the
    remaining children are keyed ``0..n-1`` again.

    Raises:
        RootRemovalError: If ``path`` is empty.
        NodeNotFoundError: If the parent or the child does not exist.
    """
    path = normalize_path(path)
    if not path:
        msg = "Cannot remove the root node"
        raise RootRemovalError(msg)
    clone = clone_tree(root)
    parent = find_node(clone, path[:-1])
    child = find_node(clone, path)
    if parent is None or child is None or parent.children is None:
        raise NodeNotFoundError(_not_found_message(path))
    parent.children = [c for c in parent.children if c is not child]
    return relink(clone)


def serialize(node: JsonNode) -> Any:
    """Reconstruct a plain JSON value from a tree.

    The result shares no dict or list with the tree, so callers may mutate it
    freely.
    """
    if node.node_type is NodeType.OBJECT and node.children is not None:
        return {child.key: serialize(child) for child in node.children}
    if node.node_type is NodeType.ARRAY and node.children is not None:
        return [serialize(child) for child in node.children]
    return node.value


def collapse_to(root: JsonNode, max_depth: float) -> JsonNode:
    """Return a new tree with ``is_collapsed`` set to ``depth >= max_depth``.

    The root sits at depth 0, so ``max_depth=0`` collapses everything and
    ``math.inf`` expands everything.
    """
    if max_depth < 0 or (isinstance(max_depth, float) and math.isnan(max_depth)):
        msg = f"max_depth must be >= 0, got {max_depth}"
        raise ValueError(msg)
    clone = clone_tree(root)

    def apply(node: JsonNode, depth: int) -> None:
        node.is_collapsed = depth >= max_depth
        for child in node.children or ():
            apply(child, depth + 1)

    apply(clone, 0)
    return relink(clone)


def _require(root: JsonNode, path: JsonPath) -> JsonNode:
    node = find_node(root, path)
    if node is None:
        raise NodeNotFoundError(_not_found_message(path))
    return node


def _not_found_message(path: JsonPath) -> str:
    return f"Node not found at path {path_to_pointer(path)!r}"
