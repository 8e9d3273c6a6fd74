"""Tests for the bounded linear History."""

from __future__ import annotations

import pytest

from json_editor_core.history import History


class TestRecord:
    def test_empty_history(self) -> None:
        history = History()
        assert len(history) == 0
        assert history.index == -1
        assert not history.can_undo
        assert not history.can_redo

    def test_record_advances_cursor(self) -> None:
        history = History()
        history.record({"a": 1})
        history.record({"a": 2})
        assert len(history) == 2
        assert history.index == 1

    def test_snapshots_are_deep_copies(self) -> None:
        history = History()
        value = {"a": [1]}
        history.record(value)
        value["a"].append(2)
        assert history.snapshots() == [{"a": [1]}]

    def test_invalid_limit(self) -> None:
        with pytest.raises(ValueError, match="limit"):
            History(limit=0)


class TestBound:
    def test_oldest_evicted(self) -> None:
        history = History(limit=50)
        for n in range(60):
            history.record(n)
        assert len(history) == 50
        assert history.index == 49
        assert history.snapshots()[0] == 10

    def test_fifty_undos_then_boundary(self) -> None:
        history = History(limit=50)
        for n in range(60):
            history.record(n)
        results = [history.undo() for _ in range(50)]
        assert results[:49] == list(range(58, 9, -1))
        assert results[49] is None
        assert history.undo() is None


class TestUndoRedo:
    def test_undo_then_redo(self) -> None:
        history = History()
        history.record("a")
        history.record("b")
        assert history.undo() == "a"
        assert history.redo() == "b"
        assert history.redo() is None

    def test_undo_at_oldest_returns_none(self) -> None:
        history = History()
        history.record("a")
        assert history.undo() is None
        assert history.index == 0

    def test_record_after_undo_discards_redo_branch(self) -> None:
        history = History()
        for value in ("a", "b", "c"):
            history.record(value)
        history.undo()
        history.undo()
        history.record("x")
        assert history.snapshots() == ["a", "x"]
        assert not history.can_redo
        assert history.redo() is None

    def test_restored_value_is_a_copy(self) -> None:
        history = History()
        history.record({"a": 1})
        history.record({"a": 2})
        restored = history.undo()
        restored["a"] = 99
        assert history.snapshots()[0] == {"a": 1}

    def test_clear(self) -> None:
        history = History()
        history.record(1)
        history.clear()
        assert len(history) == 0
        assert history.index == -1
