"""Tests for undo/redo history and CanvasSession."""

import itertools

import pytest

from form_layout.errors import TargetNotFound
from form_layout.factory import create_field
from form_layout.history import CanvasSession, History
from form_layout.layout.geometry import Rect
from form_layout.layout.manager import PointerEvent
from form_layout.schema.model import Canvas, Field


def _canvas(*ids):
    return Canvas(tuple(Field(i, "text_input") for i in ids))


def _session(canvas=None, limit=50):
    counter = itertools.count(1)
    return CanvasSession(
        canvas,
        factory=lambda ctype: create_field(ctype, field_id=f"new{next(counter)}"),
        history=History(limit),
    )


PALETTE = {"source": "palette", "componentType": "text_input"}


class TestHistory:
    def test_undo_redo_cycle(self):
        h = History()
        first, second = _canvas("a"), _canvas("a", "b")
        h.record(first)
        assert h.can_undo and not h.can_redo
        assert h.undo(second) is first
        assert h.can_redo
        assert h.redo(first) is second

    def test_record_clears_redo(self):
        h = History()
        h.record(_canvas("a"))
        h.undo(_canvas("b"))
        h.record(_canvas("c"))
        assert not h.can_redo

    def test_limit_drops_oldest(self):
        h = History(limit=3)
        snapshots = [_canvas(str(i)) for i in range(5)]
        for s in snapshots:
            h.record(s)
        assert len(h) == 3
        current = _canvas("now")
        undone = []
        while h.can_undo:
            current = h.undo(current)
            undone.append(current)
        assert undone == snapshots[:1:-1]

    def test_empty_raises(self):
        h = History()
        with pytest.raises(IndexError):
            h.undo(_canvas())
        with pytest.raises(IndexError):
            h.redo(_canvas())

    def test_limit_must_be_positive(self):
        with pytest.raises(ValueError):
            History(limit=0)


class TestCanvasSession:
    def test_drop_then_undo(self):
        session = _session()
        outcome = session.drop(PointerEvent(0, 0), None, PALETTE)
        assert outcome.ok
        assert [n.id for n in session.canvas.nodes] == ["new1"]
        assert session.undo()
        assert session.canvas == Canvas()
        assert session.redo()
        assert [n.id for n in session.canvas.nodes] == ["new1"]

    def test_rejected_drop_not_recorded(self):
        session = _session(_canvas("a"))
        outcome = session.drop(PointerEvent(999, 999, Rect(0, 0, 10, 10)), "a", PALETTE)
        assert not outcome.ok
        assert not session.history.can_undo

    def test_noop_move_not_recorded(self):
        session = _session(_canvas("a", "b"))
        box = Rect(0, 0, 100, 50)
        outcome = session.drop(PointerEvent(50, 45, box), "a", {"source": "canvas", "id": "b"})
        assert outcome.ok
        assert not session.history.can_undo

    def test_delete_and_undo(self):
        session = _session(_canvas("a", "b"))
        session.delete("a")
        assert [n.id for n in session.canvas.nodes] == ["b"]
        session.undo()
        assert [n.id for n in session.canvas.nodes] == ["a", "b"]

    def test_delete_missing_raises(self):
        session = _session(_canvas("a"))
        with pytest.raises(TargetNotFound):
            session.delete("zzz")

    def test_undo_with_empty_history(self):
        session = _session()
        assert session.undo() is False
        assert session.redo() is False
