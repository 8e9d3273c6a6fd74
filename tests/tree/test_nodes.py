"""Tests for JsonNode dataclass and NodeType StrEnum.

Verifies:
- NodeType has exactly 6 members with lowercase string values (StrEnum property)
- node_type_of dispatches bool before int and rejects non-JSON types
- JsonNode default flags and identity-based equality
- iter_nodes yields preorder
"""

from __future__ import annotations

import pytest

from json_editor_core.errors import SerializationError
from json_editor_core.tree import parse
from json_editor_core.tree.nodes import JsonNode, NodeType, node_type_of


class TestNodeType:
    """Tests for the NodeType StrEnum."""

    def test_has_exactly_six_members(self) -> None:
        assert len(NodeType) == 6

    def test_values_are_lowercased(self) -> None:
        assert NodeType.STRING == "string"
        assert NodeType.NUMBER == "number"
        assert NodeType.BOOLEAN == "boolean"
        assert NodeType.NULL == "null"
        assert NodeType.OBJECT == "object"
        assert NodeType.ARRAY == "array"

    def test_members_are_str_instances(self) -> None:
        for member in NodeType:
            assert isinstance(member, str), f"{member!r} is not a str instance"


class TestNodeTypeOf:
    """node_type_of maps every JSON value onto exactly one tag."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, NodeType.NULL),
            (True, NodeType.BOOLEAN),
            (False, NodeType.BOOLEAN),
            (0, NodeType.NUMBER),
            (3.5, NodeType.NUMBER),
            ("", NodeType.STRING),
            ({}, NodeType.OBJECT),
            ([], NodeType.ARRAY),
        ],
    )
    def test_tags(self, value: object, expected: NodeType) -> None:
        assert node_type_of(value) is expected

    def test_bool_is_not_number(self) -> None:
        # bool subclasses int; it must still be tagged BOOLEAN
        assert node_type_of(True) is not NodeType.NUMBER

    @pytest.mark.parametrize("value", [{1, 2}, (1, 2), object(), b"bytes"])
    def test_non_json_types_raise(self, value: object) -> None:
        with pytest.raises(SerializationError, match="Unsupported JSON value type"):
            node_type_of(value)


def _leaf() -> JsonNode:
    return JsonNode(
        id="node_1", path=(), key="root", value=1, node_type=NodeType.NUMBER
    )


class TestJsonNode:
    def test_default_flags(self) -> None:
        node = _leaf()
        assert node.parent is None
        assert node.children is None
        assert node.is_collapsed is False
        assert node.is_editable is True
        assert node.is_lazy_loaded is False

    def test_equality_is_identity(self) -> None:
        a = _leaf()
        b = _leaf()
        assert a == a
        assert a != b

    def test_repr_omits_parent(self) -> None:
        root = parse({"a": 1})
        assert "parent" not in repr(root.children[0])

    def test_is_container(self) -> None:
        root = parse({"a": [1], "b": "x"})
        assert root.is_container
        assert root.children[0].is_container
        assert not root.children[1].is_container

    def test_iter_nodes_is_preorder(self) -> None:
        root = parse({"a": [1, 2], "b": {"c": None}})
        paths = [node.path for node in root.iter_nodes()]
        assert paths == [(), ("a",), ("a", 0), ("a", 1), ("b",), ("b", "c")]
