"""Undo/redo history and a host-side session holding the current canvas.

Canvases are immutable values, so a history entry is just a reference to
the canvas as it was; nothing is copied.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from form_layout.factory import create_field
from form_layout.layout.engine import FieldFactory
from form_layout.layout.geometry import DEFAULT_ZONES, ZoneConfig
from form_layout.layout.manager import (
    DropOutcome,
    PointerEvent,
    handle_delete,
    handle_drop,
)
from form_layout.layout.source import Source
from form_layout.schema.model import Canvas

logger = logging.getLogger(__name__)

HISTORY_LIMIT: int = 50
"""Most undo steps kept; the oldest snapshot is dropped beyond this."""


class History:
    """Bounded undo/redo stacks of canvas snapshots."""

    def __init__(self, limit: int = HISTORY_LIMIT):
        if limit < 1:
            raise ValueError(f"History limit must be at least 1, got {limit}")
        self.limit = limit
        self._undo: list[Canvas] = []
        self._redo: list[Canvas] = []

    def record(self, previous: Canvas) -> None:
        """Remember the canvas as it was before a mutation."""
        self._undo.append(previous)
        if len(self._undo) > self.limit:
            del self._undo[0]
        self._redo.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo(self, current: Canvas) -> Canvas:
        """Step back one snapshot. Raises IndexError when there is none."""
        if not self._undo:
            raise IndexError("Nothing to undo")
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current: Canvas) -> Canvas:
        """Step forward one snapshot. Raises IndexError when there is none."""
        if not self._redo:
            raise IndexError("Nothing to redo")
        self._undo.append(current)
        return self._redo.pop()

    def __len__(self) -> int:
        return len(self._undo)


class CanvasSession:
    """Holds the current canvas and replaces it atomically after each edit."""

    def __init__(
        self,
        canvas: Canvas | None = None,
        factory: FieldFactory = create_field,
        zones: ZoneConfig = DEFAULT_ZONES,
        history: History | None = None,
    ):
        self.canvas = canvas if canvas is not None else Canvas()
        self.factory = factory
        self.zones = zones
        self.history = history if history is not None else History()

    def drop(
        self,
        pointer: PointerEvent,
        target_id: str | None,
        payload: Mapping[str, Any] | Source,
    ) -> DropOutcome:
        outcome = handle_drop(
            self.canvas, pointer, target_id, payload, self.factory, self.zones
        )
        if outcome.ok:
            self._replace(outcome.canvas)
        return outcome

    def delete(self, node_id: str) -> None:
        """Delete a node. Raises TargetNotFound when it is not on the canvas."""
        self._replace(handle_delete(self.canvas, node_id))

    def undo(self) -> bool:
        if not self.history.can_undo:
            return False
        self.canvas = self.history.undo(self.canvas)
        logger.debug("Undo: %d node(s) on canvas", len(self.canvas))
        return True

    def redo(self) -> bool:
        if not self.history.can_redo:
            return False
        self.canvas = self.history.redo(self.canvas)
        logger.debug("Redo: %d node(s) on canvas", len(self.canvas))
        return True

    def _replace(self, canvas: Canvas) -> None:
        if canvas == self.canvas:
            return
        self.history.record(self.canvas)
        self.canvas = canvas
