"""Tests for JsonPath helpers."""

from __future__ import annotations

from typing import Any

import pytest

from json_editor_core.errors import NodeNotFoundError
from json_editor_core.paths import (
    delete_value_at_path,
    format_value,
    get_value_at_path,
    normalize_path,
    path_to_pointer,
    pointer_to_path,
    set_value_at_path,
)

# ---------------------------------------------------------------------------
# normalize_path
# ---------------------------------------------------------------------------


class TestNormalizePath:
    def test_list_becomes_tuple(self) -> None:
        assert normalize_path(["a", 0]) == ("a", 0)

    def test_empty(self) -> None:
        assert normalize_path([]) == ()

    def test_string_rejected(self) -> None:
        with pytest.raises(NodeNotFoundError):
            normalize_path("abc")

    @pytest.mark.parametrize("segment", [True, 1.5, None, ("a",)])
    def test_bad_segment_rejected(self, segment: Any) -> None:
        with pytest.raises(NodeNotFoundError, match="Invalid JsonPath segment"):
            normalize_path(["a", segment])


# ---------------------------------------------------------------------------
# JSON Pointer conversion
# ---------------------------------------------------------------------------


class TestPointers:
    @pytest.mark.parametrize(
        ("path", "pointer"),
        [
            ((), ""),
            (("a",), "/a"),
            (("a", 0, "b"), "/a/0/b"),
            (("a/b", "m~n"), "/a~1b/m~0n"),
        ],
    )
    def test_path_to_pointer(self, path: tuple[Any, ...], pointer: str) -> None:
        assert path_to_pointer(path) == pointer

    @pytest.mark.parametrize(
        ("pointer", "path"),
        [
            ("", ()),
            ("#", ()),
            ("/a/0/b", ("a", 0, "b")),
            ("#/properties/age", ("properties", "age")),
            ("/a~1b/m~0n", ("a/b", "m~n")),
            ("/", ("",)),
        ],
    )
    def test_pointer_to_path(self, pointer: str, path: tuple[Any, ...]) -> None:
        assert pointer_to_path(pointer) == path


# ---------------------------------------------------------------------------
# Plain value access
# ---------------------------------------------------------------------------


class TestGetValueAtPath:
    def test_nested(self) -> None:
        assert get_value_at_path({"a": [{"b": 2}]}, ["a", 0, "b"]) == 2

    def test_root(self) -> None:
        doc = {"a": 1}
        assert get_value_at_path(doc, []) is doc

    @pytest.mark.parametrize("path", [["x"], ["a", 5], ["a", "0"], ["a", 0, "c"]])
    def test_missing_returns_none(self, path: list[Any]) -> None:
        assert get_value_at_path({"a": [{"b": 2}]}, path) is None

    def test_default_distinguishes_stored_null(self) -> None:
        missing = object()
        doc = {"a": None}
        assert get_value_at_path(doc, ["a"], missing) is None
        assert get_value_at_path(doc, ["b"], missing) is missing

    def test_negative_index_is_missing(self) -> None:
        assert get_value_at_path([1, 2], [-1]) is None


class TestSetValueAtPath:
    def test_overwrites_existing(self) -> None:
        doc: dict[str, Any] = {"a": {"b": 1}}
        set_value_at_path(doc, ["a", "b"], 2)
        assert doc == {"a": {"b": 2}}

    def test_creates_intermediate_containers(self) -> None:
        doc: dict[str, Any] = {}
        set_value_at_path(doc, ["a", 0, "b"], "x")
        assert doc == {"a": [{"b": "x"}]}

    def test_pads_arrays(self) -> None:
        doc: dict[str, Any] = {"a": []}
        set_value_at_path(doc, ["a", 2], 1)
        assert doc == {"a": [None, None, 1]}

    def test_root_rejected(self) -> None:
        with pytest.raises(ValueError, match="root"):
            set_value_at_path({}, [], 1)

    def test_fills_null_placeholder(self) -> None:
        doc: dict[str, Any] = {"a": None}
        set_value_at_path(doc, ["a", "b"], 1)
        assert doc == {"a": {"b": 1}}

    @pytest.mark.parametrize(
        ("doc", "path"),
        [
            ({"a": []}, ["a", "x"]),
            ({"a": 5}, ["a", "b"]),
            ({"a": "text"}, ["a", 0, "b"]),
            ({"a": []}, ["a", -1]),
            ([], ["key"]),
        ],
    )
    def test_mismatched_segment_rejected(self, doc: Any, path: list[Any]) -> None:
        before = repr(doc)
        with pytest.raises(NodeNotFoundError, match="Cannot address segment"):
            set_value_at_path(doc, path, 1)
        assert repr(doc) == before


class TestDeleteValueAtPath:
    def test_deletes_key(self) -> None:
        doc = {"a": 1, "b": 2}
        delete_value_at_path(doc, ["a"])
        assert doc == {"b": 2}

    def test_splices_array(self) -> None:
        doc = {"a": [1, 2, 3]}
        delete_value_at_path(doc, ["a", 0])
        assert doc == {"a": [2, 3]}

    def test_missing_is_ignored(self) -> None:
        doc = {"a": [1]}
        delete_value_at_path(doc, ["a", 4])
        delete_value_at_path(doc, ["x", "y"])
        delete_value_at_path(doc, [])
        assert doc == {"a": [1]}


class TestFormatValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "null"),
            (True, "true"),
            ("hi", '"hi"'),
            (3, "3"),
            ([1, 2], "[2 items]"),
            ({"a": 1}, "{1 props}"),
        ],
    )
    def test_format(self, value: Any, expected: str) -> None:
        assert format_value(value) == expected
