"""Exception hierarchy for json-editor-core.

The tree model and the validation engine raise these; ``EditorController`` is
the only layer that catches them, converting each into a ``False`` result and
a retained ``last_error``.

Every concrete error also subclasses the closest builtin, so callers that
already handle ``LookupError`` or ``ValueError`` keep working.
"""

from __future__ import annotations

__all__ = [
    "JsonEditorError",
    "NodeNotFoundError",
    "NotAnObjectError",
    "RootRemovalError",
    "SchemaError",
    "SerializationError",
]


class JsonEditorError(Exception):
    """Base class for every error raised by json-editor-core."""


class NodeNotFoundError(JsonEditorError, LookupError):
    """A path does not resolve to an existing node."""


class NotAnObjectError(JsonEditorError, TypeError):
    """A property was added to a node that is not object-typed."""


class RootRemovalError(JsonEditorError, ValueError):
    """Removal was requested at the empty (root) path."""


class SchemaError(JsonEditorError, ValueError):
    """The schema handed to the validator is structurally invalid."""


class SerializationError(JsonEditorError, TypeError):
    """A value cannot be represented as a tree (cycle or non-JSON type)."""
