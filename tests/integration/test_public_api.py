"""Integration tests for the public API surface.

All imports are from the top-level ``json_editor_core`` package, never from
internal submodules.  Covers the tree functions working together, schema
inference feeding validation, and the controller driving both.
"""

from __future__ import annotations

import pytest

from json_editor_core import (
    EditorController,
    EditorOptions,
    ValidationMode,
    add_property,
    find_node,
    infer_schema,
    parse,
    remove_node,
    serialize,
    update_value,
    validate,
)


class TestTreeFunctionsCompose:
    def test_chained_edits(self) -> None:
        root = parse({"users": [{"name": "a"}, {"name": "b"}]})
        root = update_value(root, ["users", 1, "name"], "c")
        root = add_property(root, ["users", 0], "admin", True)
        root = remove_node(root, ["users", 1])
        assert serialize(root) == {"users": [{"name": "a", "admin": True}]}

    def test_each_step_leaves_previous_tree(self) -> None:
        first = parse([1, 2, 3])
        second = remove_node(first, [0])
        assert serialize(first) == [1, 2, 3]
        assert serialize(second) == [2, 3]
        node = find_node(second, [0])
        assert node is not None and node.value == 2


class TestInferThenValidate:
    def test_inferred_schema_accepts_source(self) -> None:
        sample = {
            "id": 1,
            "email": "a@example.com",
            "tags": ["x"],
            "meta": {"created": "2024-01-01T00:00:00Z"},
        }
        assert validate(sample, infer_schema(sample)) == []

    def test_inferred_schema_flags_type_change(self) -> None:
        schema = infer_schema({"id": 1})
        errors = validate({"id": "one"}, schema)
        assert [(e.path, e.keyword) for e in errors] == [(("id",), "type")]


class TestControllerWithInferredSchema:
    @pytest.mark.parametrize(
        "mode", [ValidationMode.ON_CHANGE, ValidationMode.ON_DEMAND]
    )
    def test_edit_then_validate(self, mode: ValidationMode) -> None:
        document = {"id": 1, "name": "x"}
        editor = EditorController(
            schema=infer_schema(document),
            options=EditorOptions(validation_mode=mode),
        )
        assert editor.initialize(document)
        assert editor.remove_node(["name"])
        errors = editor.validate_now()
        assert [e.keyword for e in errors] == ["required"]
        assert errors[0].pointer == ""
