"""json-editor-core - immutable JSON tree model with validation and undo/redo."""

from __future__ import annotations

from json_editor_core.changes import ChangeKind, ChangeTracker, PendingChange
from json_editor_core.config import EditorOptions, ValidationMode
from json_editor_core.controller import EditorController, EditorState
from json_editor_core.errors import (
    JsonEditorError,
    NodeNotFoundError,
    NotAnObjectError,
    RootRemovalError,
    SchemaError,
    SerializationError,
)
from json_editor_core.history import History
from json_editor_core.paths import JsonPath
from json_editor_core.tree import (
    JsonNode,
    NodeType,
    add_property,
    collapse_to,
    find_node,
    parse,
    remove_node,
    serialize,
    update_value,
)
from json_editor_core.validation import (
    ValidationError,
    ValidatorCache,
    infer_schema,
    validate,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "ChangeKind",
    "ChangeTracker",
    "EditorController",
    "EditorOptions",
    "EditorState",
    "History",
    "JsonEditorError",
    "JsonNode",
    "JsonPath",
    "NodeNotFoundError",
    "NodeType",
    "NotAnObjectError",
    "PendingChange",
    "RootRemovalError",
    "SchemaError",
    "SerializationError",
    "ValidationError",
    "ValidationMode",
    "ValidatorCache",
    "add_property",
    "collapse_to",
    "find_node",
    "infer_schema",
    "parse",
    "remove_node",
    "serialize",
    "update_value",
    "validate",
]
