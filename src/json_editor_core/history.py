"""History: bounded, linear undo/redo stack of full document snapshots.

Snapshots are deep copies, so nothing the caller does to a value after
recording it can alter the history.  The history never branches: recording
after an undo discards every snapshot ahead of the cursor.
"""

from __future__ import annotations

import copy
from typing import Any

from json_editor_core.config import DEFAULT_HISTORY_LIMIT

__all__ = ["History"]


class History:
    """Linear snapshot stack with a cursor.

    ``index`` points at the snapshot matching the current document; it is -1
    while the history is empty.

    Args:
        limit: Maximum number of snapshots kept.  Defaults to 50.

    Example::

        history = History()
        history.record({"a": 1})
        history.record({"a": 2})
        history.undo()   # {"a": 1}
        history.redo()   # {"a": 2}
        history.redo()   # None (already at the newest snapshot)
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            msg = f"limit must be >= 1, got {limit}"
            raise ValueError(msg)
        self._limit = limit
        self._snapshots: list[Any] = []
        self._index = -1

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def index(self) -> int:
        return self._index

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._snapshots) - 1

    def snapshots(self) -> list[Any]:
        """Deep copies of every stored snapshot, oldest first."""
        return copy.deepcopy(self._snapshots)

    def record(self, value: Any) -> None:
        """Push a deep copy of ``value`` after the cursor, dropping any redo branch.

        When the stack grows past ``limit`` the oldest snapshot is evicted and
        the cursor moves down with it.
        """
        del self._snapshots[self._index + 1 :]
        self._snapshots.append(copy.deepcopy(value))
        self._index = len(self._snapshots) - 1
        if len(self._snapshots) > self._limit:
            del self._snapshots[0]
            self._index -= 1

    def undo(self) -> Any | None:
        """Step back and return a copy of that snapshot, or None at the oldest.

        A stored snapshot may itself be None (a JSON null document), so check
        ``can_undo`` first when the two cases must be told apart.
        """
        if not self.can_undo:
            return None
        self._index -= 1
        return copy.deepcopy(self._snapshots[self._index])

    def redo(self) -> Any | None:
        """Step forward and return a copy of that snapshot, or None at the newest.

        Check ``can_redo`` first when a None snapshot is possible.
        """
        if not self.can_redo:
            return None
        self._index += 1
        return copy.deepcopy(self._snapshots[self._index])

    def clear(self) -> None:
        self._snapshots.clear()
        self._index = -1
