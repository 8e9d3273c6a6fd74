"""ChangeTracker: pending (unsaved) edits, coalesced per path.

A newer change at a path supersedes an older pending change at the identical
path: the old entry is removed and the new one appended, so the list holds
at most one entry per path, in order of each path's latest edit.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_editor_core.paths import JsonPath, normalize_path

__all__ = ["ChangeKind", "ChangeTracker", "PendingChange"]


class ChangeKind(StrEnum):
    """What a pending change did at its path."""

    UPDATE = auto()
    ADD = auto()
    DELETE = auto()


@dataclass(frozen=True, slots=True)
class PendingChange:
    """One tracked edit.

    Attributes:
        kind:      UPDATE, ADD or DELETE.
        path:      Where the edit happened.
        old_value: Value before the edit; None for ADD.
        new_value: Value after the edit; None for DELETE.
    """

    kind: ChangeKind
    path: JsonPath
    old_value: Any = None
    new_value: Any = None


class ChangeTracker:
    """Ordered collection of pending changes with per-path coalescing."""

    def __init__(self) -> None:
        self._pending: list[PendingChange] = []

    @property
    def pending(self) -> tuple[PendingChange, ...]:
        return tuple(self._pending)

    @property
    def has_unsaved_changes(self) -> bool:
        return bool(self._pending)

    def track(
        self,
        path: Sequence[str | int],
        old_value: Any,
        new_value: Any,
        kind: ChangeKind,
    ) -> PendingChange:
        """Record a change, replacing any pending change at the same path."""
        change = PendingChange(
            kind=ChangeKind(kind),
            path=normalize_path(path),
            old_value=old_value,
            new_value=new_value,
        )
        self._pending = [c for c in self._pending if c.path != change.path]
        self._pending.append(change)
        return change

    def clear(self) -> None:
        self._pending = []
