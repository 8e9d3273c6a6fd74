"""TreeBuilder: converts any valid JSON value into a JsonNode tree.

Building happens in two steps:

1. ``_create`` recursively dispatches on the value type and produces bare
   nodes (key, value, type, children).  Containers currently on the recursion
   stack are tracked by identity so a cyclic reference raises
   ``SerializationError`` instead of recursing forever.
2. ``relink`` walks the finished structure once in preorder and assigns ids,
   paths, parent back-references, contiguous array keys and container value
   mirrors.

The same ``relink`` pass is run by every mutation in
``json_editor_core.tree.model`` after it edits a fresh clone, so all trees
satisfy the same invariants no matter how they were produced.  Ids come from
an ``itertools.count`` local to each pass: two trees never share a counter.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Any

from json_editor_core.errors import SerializationError
from json_editor_core.paths import JsonPath
from json_editor_core.tree.nodes import ROOT_KEY, JsonNode, NodeType, node_type_of

__all__ = ["TreeBuilder", "clone_tree", "relink"]


@dataclass
class TreeBuilder:
    """Converts any valid JSON value into a JsonNode tree.

    Attributes:
        editable: Value of ``is_editable`` on every node produced.

    Example::
        builder = TreeBuilder()
        root = builder.build({"a": [1, 2]})
        # root: OBJECT("root") -> ARRAY("a") -> NUMBER(0), NUMBER(1)
        root.children[0].children[1].path   # ("a", 1)
    """

    editable: bool = True

    def build(self, value: Any) -> JsonNode:
        """Build a fully linked tree rooted at ``value``.

        Raises:
            SerializationError: If ``value`` contains a cycle, a non-JSON type,
                a non-string object key, or nests deeper than the interpreter
                recursion limit.
        """
        return relink(self.create(value, ROOT_KEY))

    def create(self, value: Any, key: str | int) -> JsonNode:
        """Build an unlinked subtree (no ids, paths or parents yet).

        Used directly by mutations that splice a new subtree into a clone
        before relinking the whole tree.
        """
        try:
            return self._create(value, key, set())
        except RecursionError as exc:
            msg = "JSON value is nested too deeply to build a tree"
            raise SerializationError(msg) from exc

    def _create(self, value: Any, key: str | int, active: set[int]) -> JsonNode:
        node_type = node_type_of(value)
        node = JsonNode(
            id="",
            path=(),
            key=key,
            value=value,
            node_type=node_type,
            is_editable=self.editable,
        )
        if node_type is NodeType.OBJECT:
            node.children = self._create_children(value, value.items(), active)
        elif node_type is NodeType.ARRAY:
            node.children = self._create_children(value, enumerate(value), active)
        return node

    def _create_children(
        self, container: Any, items: Any, active: set[int]
    ) -> list[JsonNode]:
        marker = id(container)
        if marker in active:
            msg = "Cyclic reference detected while building JSON tree"
            raise SerializationError(msg)
        active.add(marker)
        children = []
        for child_key, child_value in items:
            if isinstance(container, dict) and not isinstance(child_key, str):
                msg = f"Object keys must be strings, got {child_key!r}"
                raise SerializationError(msg)
            children.append(self._create(child_value, child_key, active))
        active.discard(marker)
        return children


def clone_tree(node: JsonNode) -> JsonNode:
    """Return an unlinked deep copy of ``node``'s structure and UI flags.

    Leaf values are immutable and shared; container values are rebuilt by the
    following ``relink``.  No node of the source tree is reused or touched.
    """
    return JsonNode(
        id="",
        path=(),
        key=node.key,
        value=None if node.children is not None else node.value,
        node_type=node.node_type,
        children=(
            [clone_tree(child) for child in node.children]
            if node.children is not None
            else None
        ),
        is_collapsed=node.is_collapsed,
        is_editable=node.is_editable,
        is_lazy_loaded=node.is_lazy_loaded,
    )


def relink(root: JsonNode) -> JsonNode:
    """Restore every structural invariant of a freshly built or cloned tree.

    In one preorder walk: assigns ids ``node_1``, ``node_2``, ... from a
    counter local to this call, sets ``key``/``path``/``parent`` (array
    children are re-keyed 0..n-1), and rebuilds each container's value as a
    new dict/list mirroring its children.  Only call this on nodes no other
    tree can observe.
    """
    counter = count(1)

    def visit(
        node: JsonNode, parent: JsonNode | None, key: str | int, path: JsonPath
    ) -> None:
        node.id = f"node_{next(counter)}"
        node.parent = parent
        node.key = key
        node.path = path
        if node.children is None:
            return
        if node.node_type is NodeType.ARRAY:
            for index, child in enumerate(node.children):
                visit(child, node, index, (*path, index))
            node.value = [child.value for child in node.children]
        else:
            for child in node.children:
                visit(child, node, child.key, (*path, child.key))
            node.value = {child.key: child.value for child in node.children}

    visit(root, None, root.key, ())
    return root
