"""EditorController: the single owner of the current document tree and value.

Wires the tree model, the validation engine, the undo/redo ``History`` and the
``ChangeTracker`` into one synchronous edit cycle::

    Idle -> Mutating -> (Validating)? -> (HistoryRecord)? -> Idle

Every intent either commits completely or leaves the controller exactly as it
was.  A commit publishes a new frozen ``EditorState`` with one reference
assignment, so a reader holding ``controller.state`` (or any tree taken from
it) always sees a complete, never-changing snapshot and needs no lock.

Errors from the tree model and the validator stop here: intents return
``False`` and the error is kept on ``last_error``.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from json_editor_core.changes import ChangeKind, ChangeTracker, PendingChange
from json_editor_core.config import EditorOptions, ValidationMode
from json_editor_core.errors import JsonEditorError, NodeNotFoundError
from json_editor_core.history import History
from json_editor_core.paths import (
    JsonPath,
    format_value,
    normalize_path,
    path_to_pointer,
)
from json_editor_core.tree import model
from json_editor_core.tree.nodes import JsonNode
from json_editor_core.validation.cache import ValidatorCache
from json_editor_core.validation.validator import ValidationError, check_schema

__all__ = ["EditorController", "EditorState"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EditorState:
    """Observable snapshot handed to the rendering layer.

    Attributes:
        root:              Current tree, or None before ``initialize``.
        value:             Canonical document value serialized from ``root``.
        validation_errors: Errors from the most recent validation run.
        can_undo:          Whether ``undo()`` would succeed.
        can_redo:          Whether ``redo()`` would succeed.
    """

    root: JsonNode | None
    value: Any
    validation_errors: tuple[ValidationError, ...] = ()
    can_undo: bool = False
    can_redo: bool = False


class EditorController:
    """Orchestrates edits, validation and undo/redo for one JSON document.

    Example::

        editor = EditorController(options=EditorOptions(auto_save=True))
        editor.initialize({"a": 1, "b": [1, 2]})
        editor.update_value(["b", 1], 5)      # True
        editor.remove_node(["a"])             # True
        editor.undo()                         # True
        editor.value                          # {"a": 1, "b": [1, 5]}

    Args:
        value: Initial document.  When not None, ``initialize(value)`` runs at
            the end of construction; check ``last_error`` if it was rejected.
        schema: Optional Draft-07 schema used by ``validate_now``.  Checked
            eagerly: a malformed schema raises ``SchemaError`` here rather than
            failing later edits.
        options: Behaviour settings.  Defaults to ``EditorOptions()``.
        max_cache_size: Compiled-schema LRU size for this instance.
    """

    def __init__(
        self,
        value: Any = None,
        *,
        schema: Any = None,
        options: EditorOptions | None = None,
        max_cache_size: int = 32,
    ) -> None:
        if schema is not None:
            check_schema(schema)
        self._schema: Any = schema
        self._options = options if options is not None else EditorOptions()
        self._validators = ValidatorCache(max_size=max_cache_size)
        self._history = History(limit=self._options.history_limit)
        self._changes = ChangeTracker()
        self._state = EditorState(root=None, value=None)
        self._last_error: JsonEditorError | None = None
        if value is not None:
            self.initialize(value)

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def root(self) -> JsonNode | None:
        return self._state.root

    @property
    def value(self) -> Any:
        """Canonical document value.  Treat as read-only."""
        return self._state.value

    @property
    def validation_errors(self) -> list[ValidationError]:
        return list(self._state.validation_errors)

    @property
    def has_validation_errors(self) -> bool:
        return bool(self._state.validation_errors)

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def history(self) -> list[Any]:
        """Deep copies of the recorded snapshots, oldest first."""
        return self._history.snapshots()

    @property
    def history_index(self) -> int:
        return self._history.index

    @property
    def last_error(self) -> JsonEditorError | None:
        """Error that made the most recent intent fail; None after a success."""
        return self._last_error

    @property
    def pending_changes(self) -> tuple[PendingChange, ...]:
        return self._changes.pending

    @property
    def has_unsaved_changes(self) -> bool:
        return self._changes.has_unsaved_changes

    @property
    def options(self) -> EditorOptions:
        return self._options

    @property
    def schema(self) -> Any:
        return self._schema

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self, value: Any, options: EditorOptions | None = None) -> bool:
        """Load a new document, replacing the tree, history and pending changes.

        Builds the tree (ids restart at ``node_1``), applies ``collapse_depth``,
        seeds the history with ``value`` when ``auto_save`` is on, and
        validates when the mode is ON_CHANGE.
        """
        options = options if options is not None else self._options
        try:
            root = self._build_tree(value, options)
            document = model.serialize(root)
            errors = self._on_change_errors(document, options, ())
        except JsonEditorError as exc:
            return self._reject("initialize", (), exc)

        self._options = options
        self._history = History(limit=options.history_limit)
        self._changes.clear()
        if options.auto_save:
            self._history.record(document)
        self._commit(root, document, errors)
        self._last_error = None
        logger.debug("Initialized document %s", format_value(document))
        return True

    def set_schema(self, schema: Any) -> None:
        """Replace the schema (None removes it).

        In ON_CHANGE mode the document is revalidated at once; in the other
        modes the errors found under the old schema are cleared.

        Raises:
            SchemaError: If ``schema`` is malformed; the old schema is kept.
        """
        if schema is not None:
            check_schema(schema)
        self._schema = schema
        if self._state.root is not None:
            errors = self._on_change_errors(self._state.value, self._options, ())
            self._commit(self._state.root, self._state.value, errors)

    def mark_saved(self) -> None:
        """Forget pending changes, e.g. after the document was persisted."""
        self._changes.clear()

    def close(self) -> None:
        """Drop the document, history and caches."""
        self._history.clear()
        self._changes.clear()
        self._validators.clear()
        self._state = EditorState(root=None, value=None)
        self._last_error = None

    # ------------------------------------------------------------------
    # Edit intents
    # ------------------------------------------------------------------

    def update_value(self, path: Sequence[str | int], value: Any) -> bool:
        """Replace the value at ``path``.  Returns False if the edit was rejected."""
        return self._edit(
            "update",
            path,
            lambda root, target: model.update_value(root, target, value),
            lambda target: (target, ChangeKind.UPDATE, value),
        )

    def add_property(self, path: Sequence[str | int], key: str, value: Any) -> bool:
        """Add (or overwrite) property ``key`` on the object at ``path``."""
        return self._edit(
            "add_property",
            path,
            lambda root, target: model.add_property(root, target, key, value),
            lambda target: ((*target, key), ChangeKind.ADD, value),
        )

    def remove_node(self, path: Sequence[str | int]) -> bool:
        """Remove the node at ``path``.  The root cannot be removed."""
        return self._edit(
            "remove_node",
            path,
            model.remove_node,
            lambda target: (target, ChangeKind.DELETE, None),
        )

    def _edit(
        self,
        intent: str,
        path: Sequence[str | int],
        mutate: Callable[[JsonNode, JsonPath], JsonNode],
        describe: Callable[[JsonPath], tuple[JsonPath, ChangeKind, Any]],
    ) -> bool:
        state = self._state
        try:
            if state.root is None:
                msg = "No document loaded; call initialize() first"
                raise NodeNotFoundError(msg)
            target = normalize_path(path)
            root = mutate(state.root, target)
            document = model.serialize(root)
            errors = self._on_change_errors(
                document, self._options, state.validation_errors
            )
        except JsonEditorError as exc:
            return self._reject(intent, path, exc)

        change_path, kind, new_value = describe(target)
        previous = model.find_node(state.root, change_path)
        old_value = model.serialize(previous) if previous is not None else None
        self._changes.track(change_path, old_value, new_value, kind)
        if self._options.auto_save:
            self._history.record(document)
        self._commit(root, document, errors)
        self._last_error = None
        logger.debug("%s at %r committed", intent, path_to_pointer(target))
        return True

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_now(self) -> list[ValidationError]:
        """Validate the current document and store the result.

        With no schema, or with validation DISABLED, stored errors are cleared
        and ``[]`` is returned.  If the validator fails, the error is kept on
        ``last_error``, stored errors are left alone and ``[]`` is returned.
        """
        state = self._state
        try:
            errors = self._errors_for(state.value, self._options)
        except JsonEditorError as exc:
            self._reject("validate_now", (), exc)
            return []
        self._commit(state.root, state.value, errors)
        return list(errors)

    def _errors_for(
        self, document: Any, options: EditorOptions
    ) -> tuple[ValidationError, ...]:
        if self._schema is None or options.validation_mode is ValidationMode.DISABLED:
            return ()
        return tuple(self._validators.validate(document, self._schema))

    def _on_change_errors(
        self,
        document: Any,
        options: EditorOptions,
        fallback: tuple[ValidationError, ...],
    ) -> tuple[ValidationError, ...]:
        if options.validation_mode is ValidationMode.ON_CHANGE:
            return self._errors_for(document, options)
        return fallback

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def record_snapshot(self, value: Any) -> None:
        """Push a deep copy of ``value``, discarding any redo branch."""
        self._history.record(value)
        self._commit(self._state.root, self._state.value, self._state.validation_errors)

    def undo(self) -> bool:
        """Restore the previous snapshot.  False when there is none."""
        # a null document is a legal snapshot, so the boundary is checked first
        if not self._history.can_undo:
            return False
        self._restore(self._history.undo())
        return True

    def redo(self) -> bool:
        """Restore the next snapshot.  False when there is none."""
        if not self._history.can_redo:
            return False
        self._restore(self._history.redo())
        return True

    def _restore(self, snapshot: Any) -> None:
        # snapshots are always serialized trees; the schema was checked when set
        root = self._build_tree(snapshot, self._options)
        errors = self._on_change_errors(
            snapshot, self._options, self._state.validation_errors
        )
        self._commit(root, snapshot, errors)
        logger.debug("Restored snapshot %d", self._history.index)

    # ------------------------------------------------------------------
    # View helpers
    # ------------------------------------------------------------------

    def collapse_all(self) -> bool:
        """Collapse every node, the root included."""
        return self._set_collapse(0)

    def expand_all(self) -> bool:
        """Expand every node."""
        return self._set_collapse(math.inf)

    def _set_collapse(self, max_depth: float) -> bool:
        state = self._state
        if state.root is None:
            return False
        root = model.collapse_to(state.root, max_depth)
        self._commit(root, state.value, state.validation_errors)
        return True

    def to_json(self, indent: int | None = 2) -> str:
        """The current document as JSON text."""
        return json.dumps(self._state.value, indent=indent, ensure_ascii=False)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _build_tree(value: Any, options: EditorOptions) -> JsonNode:
        root = model.parse(value, editable=options.editable)
        if options.collapse_depth is not None:
            root = model.collapse_to(root, options.collapse_depth)
        return root

    def _commit(
        self,
        root: JsonNode | None,
        value: Any,
        errors: tuple[ValidationError, ...],
    ) -> None:
        self._state = EditorState(
            root=root,
            value=value,
            validation_errors=errors,
            can_undo=self._history.can_undo,
            can_redo=self._history.can_redo,
        )

    def _reject(
        self, intent: str, path: Sequence[str | int], exc: JsonEditorError
    ) -> bool:
        self._last_error = exc
        logger.warning("%s at %r rejected: %s", intent, list(path), exc)
        return False
