"""Canvas state manager: runs one drop from pointer event to final canvas.

Pipeline for :func:`handle_drop`:

1. Resolve the drag payload into a source.
2. Work out the intent: drops on empty canvas area append to the end,
   otherwise the pointer is classified against the target's bounds.
3. Apply the intent with the layout engine.
4. Run the dissolution pass on the candidate canvas.

The input canvas is never modified. Rejections come back as values for the
UI to display. Fatal errors (the caller's view of the canvas is out of date)
are logged and reported in the outcome, and the canvas is left as it was.
"""

from __future__ import annotations

__all__ = [
    "DropOutcome",
    "HoverFeedback",
    "PointerEvent",
    "drop_intent",
    "handle_delete",
    "handle_drop",
    "hover",
    "rejection_message",
]

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from form_layout.errors import LayoutError, RejectionReason
from form_layout.factory import create_field
from form_layout.layout.dissolve import dissolve
from form_layout.layout.engine import (
    FieldFactory,
    TargetKind,
    alternatives_for,
    apply,
    check,
    remove,
    target_kind,
)
from form_layout.layout.geometry import (
    DEFAULT_ZONES,
    Intent,
    Point,
    Rect,
    ZoneConfig,
    classify,
)
from form_layout.layout.source import Source, resolve
from form_layout.schema.model import Canvas

logger = logging.getLogger(__name__)

_MESSAGES: dict[RejectionReason, str | None] = {
    RejectionReason.CAPACITY_EXCEEDED: (
        "This row already holds 4 fields. Drop above or below the row instead."
    ),
    RejectionReason.NESTED_ROW_NOT_ALLOWED: (
        "Rows cannot be placed inside or beside other fields. "
        "Drop the row above or below instead."
    ),
    RejectionReason.CIRCULAR_REFERENCE: "An item cannot be dropped onto itself.",
    # Pointer left the target; silently ignored
    RejectionReason.INVALID_GEOMETRY: None,
}


@dataclass(frozen=True)
class PointerEvent:
    """Pointer position at drop time plus the target's rendered bounds."""

    x: float
    y: float
    bounds: Rect | None = None

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class DropOutcome:
    canvas: Canvas
    intent: Intent | None = None
    rejection: RejectionReason | None = None
    alternatives: tuple[Intent, ...] = ()
    fault: LayoutError | None = None
    placed_id: str | None = None

    @property
    def ok(self) -> bool:
        return self.rejection is None and self.fault is None

    @property
    def message(self) -> str | None:
        """User-facing text for a rejection, if there is one to show."""
        if self.rejection is None:
            return None
        return rejection_message(self.rejection)


@dataclass(frozen=True)
class HoverFeedback:
    """What a drop at the current pointer position would do."""

    intent: Intent
    rejection: RejectionReason | None = None
    alternatives: tuple[Intent, ...] = ()
    fault: LayoutError | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None and self.fault is None


def rejection_message(reason: RejectionReason) -> str | None:
    """Return the notification text for a rejection (None: show nothing)."""
    return _MESSAGES[reason]


def drop_intent(
    canvas: Canvas,
    pointer: PointerEvent,
    target_id: str | None,
    zones: ZoneConfig = DEFAULT_ZONES,
) -> Intent:
    """Work out the intent of a pointer over a target (or over empty canvas)."""
    if target_id is None:
        return Intent.APPEND_TO_END
    kind = target_kind(canvas, target_id)
    if pointer.bounds is None:
        return Intent.REJECT
    return classify(pointer.point, pointer.bounds, kind is TargetKind.ROW, zones)


def handle_drop(
    canvas: Canvas,
    pointer: PointerEvent,
    target_id: str | None,
    payload: Mapping[str, Any] | Source,
    factory: FieldFactory = create_field,
    zones: ZoneConfig = DEFAULT_ZONES,
) -> DropOutcome:
    """Run a complete drop and return the new canonical canvas."""
    try:
        source = resolve(payload, canvas)
        intent = drop_intent(canvas, pointer, target_id, zones)
        result = apply(canvas, intent, source, target_id, factory)
    except LayoutError as e:
        logger.error("Drop on '%s' aborted: %s", target_id, e)
        return DropOutcome(canvas, fault=e)

    if not result.ok:
        _log_rejection(result.rejection, intent, target_id)
        return DropOutcome(
            canvas,
            intent=intent,
            rejection=result.rejection,
            alternatives=result.alternatives,
        )

    final = dissolve(result.canvas)
    logger.info("Dropped '%s' (%s) on '%s'", result.placed_id, intent.value, target_id)
    return DropOutcome(final, intent=intent, placed_id=result.placed_id)


def hover(
    canvas: Canvas,
    pointer: PointerEvent,
    target_id: str | None,
    payload: Mapping[str, Any] | Source,
    zones: ZoneConfig = DEFAULT_ZONES,
) -> HoverFeedback:
    """Preview a drop for live feedback. Never creates fields or edits the canvas."""
    try:
        source = resolve(payload, canvas)
        intent = drop_intent(canvas, pointer, target_id, zones)
        reason = check(canvas, intent, source, target_id)
    except LayoutError as e:
        logger.error("Hover over '%s' failed: %s", target_id, e)
        return HoverFeedback(Intent.REJECT, fault=e)
    return HoverFeedback(intent, reason, alternatives_for(reason))


def handle_delete(canvas: Canvas, node_id: str) -> Canvas:
    """Delete a node and dissolve any row it leaves behind.

    Raises TargetNotFound when the node is not on the canvas.
    """
    return dissolve(remove(canvas, node_id))


def _log_rejection(
    reason: RejectionReason, intent: Intent, target_id: str | None
) -> None:
    if reason is RejectionReason.INVALID_GEOMETRY:
        logger.debug("Ignoring drop outside target '%s'", target_id)
        return
    logger.info("Rejected %s drop on '%s': %s", intent.value, target_id, reason.value)
