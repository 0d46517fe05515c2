"""Layout engine: turns (intent, source, target) into a new canvas.

The engine is a single dispatch over three things:

- the intent (BEFORE/AFTER, LEFT/RIGHT, INSERT_INTO_ROW, APPEND_TO_END),
- the source kind (new field, existing field, existing row group),
- the target kind (top-level field, field inside a row, row group).

Planning works on the input canvas and produces either a rejection or a
destination address. Execution then removes the dragged node (for moves),
compensates the destination for that removal, and inserts. Nothing here
mutates its input; row groups left with fewer than two children are handled
by the dissolution pass afterwards.
"""

from __future__ import annotations

__all__ = [
    "ApplyResult",
    "TargetKind",
    "alternatives_for",
    "apply",
    "check",
    "remove",
    "target_kind",
]

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from form_layout.errors import (
    DuplicateId,
    RejectionReason,
    SourceNotFound,
    TargetNotFound,
)
from form_layout.factory import create_field
from form_layout.layout.constants import MAX_ROW_CHILDREN
from form_layout.layout.geometry import Intent
from form_layout.layout.source import ExistingItem, NewItem, Source
from form_layout.schema.model import (
    Address,
    Canvas,
    Field,
    InRow,
    RowGroup,
    TopLevel,
)
from form_layout.schema.properties import ComponentType

logger = logging.getLogger(__name__)

FieldFactory = Callable[[ComponentType], Field]


class TargetKind(Enum):
    FIELD = "field"
    ROW_CHILD = "row_child"
    ROW = "row"


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of :func:`apply`.

    On rejection ``canvas`` is the untouched input and ``alternatives``
    lists the intents the caller can offer instead.
    """

    canvas: Canvas
    rejection: RejectionReason | None = None
    alternatives: tuple[Intent, ...] = ()
    placed_id: str | None = None

    @property
    def ok(self) -> bool:
        return self.rejection is None


@dataclass(frozen=True)
class _Plan:
    """Destination of a drop, in coordinates of the input canvas."""

    destination: Address
    # LEFT or RIGHT when a new row group is built around a top-level field
    combine: Intent | None = None


def target_kind(canvas: Canvas, target_id: str) -> TargetKind:
    """Return what kind of node ``target_id`` is.

    Raises TargetNotFound when the id is not on the canvas.
    """
    address = canvas.locate(target_id)
    if address is None:
        raise TargetNotFound(target_id)
    if isinstance(address, InRow):
        return TargetKind.ROW_CHILD
    if isinstance(canvas.node_at(address), RowGroup):
        return TargetKind.ROW
    return TargetKind.FIELD


def alternatives_for(reason: RejectionReason | None) -> tuple[Intent, ...]:
    """Intents that remain valid on the same target after a rejection."""
    if reason in (
        RejectionReason.CAPACITY_EXCEEDED,
        RejectionReason.NESTED_ROW_NOT_ALLOWED,
    ):
        return (Intent.BEFORE, Intent.AFTER)
    return ()


def check(
    canvas: Canvas,
    intent: Intent,
    source: Source,
    target_id: str | None,
) -> RejectionReason | None:
    """Validate a drop without performing it.

    Raises the same fatal errors as :func:`apply`.
    """
    plan = _plan(canvas, intent, source, target_id)
    if isinstance(plan, RejectionReason):
        return plan
    return None


def apply(
    canvas: Canvas,
    intent: Intent,
    source: Source,
    target_id: str | None,
    factory: FieldFactory = create_field,
) -> ApplyResult:
    """Apply a drop to a canvas and return the candidate canvas.

    The factory is called exactly once for a successful NewItem drop and
    never on rejection. Raises TargetNotFound if ``target_id`` is not on the
    canvas (or is None for an intent that needs a target), SourceNotFound
    if an existing item has vanished, and DuplicateId if the factory hands
    back an id that is already taken.
    """
    plan = _plan(canvas, intent, source, target_id)
    if isinstance(plan, RejectionReason):
        return ApplyResult(canvas, plan, alternatives_for(plan))

    destination = plan.destination
    if isinstance(source, NewItem):
        moved = factory(source.component_type)
        if canvas.locate(moved.id) is not None:
            raise DuplicateId(moved.id)
        working = canvas
    else:
        origin = canvas.locate(source.node_id)
        moved = canvas.node_at(origin)
        working = canvas.without(origin)
        destination = _compensate(destination, origin)

    if plan.combine is not None:
        target = working.node_at(destination)
        if plan.combine is Intent.LEFT:
            children = (moved, target)
        else:
            children = (target, moved)
        row = RowGroup(_new_row_id(canvas, target.id), children)
        result = working.replaced(destination, row)
        logger.debug("Combined '%s' %s of '%s' into row '%s'",
                     moved.id, plan.combine.value, target.id, row.id)
    else:
        result = working.inserted(destination, moved)
        logger.debug("Placed '%s' at %s", moved.id, destination)

    return ApplyResult(result, placed_id=moved.id)


def remove(canvas: Canvas, node_id: str) -> Canvas:
    """Delete a field or a whole row group.

    A row left with a single child is not dissolved here; run the
    dissolution pass on the result.
    """
    address = canvas.locate(node_id)
    if address is None:
        raise TargetNotFound(node_id)
    logger.debug("Removing '%s' at %s", node_id, address)
    return canvas.without(address)


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------


def _plan(
    canvas: Canvas,
    intent: Intent,
    source: Source,
    target_id: str | None,
) -> _Plan | RejectionReason:
    moved_at = _source_address(canvas, source)

    if intent is Intent.APPEND_TO_END:
        return _Plan(TopLevel(len(canvas.nodes)))

    if target_id is None:
        raise TargetNotFound(None)
    kind = target_kind(canvas, target_id)
    target_at = canvas.locate(target_id)

    if intent is Intent.REJECT:
        return RejectionReason.INVALID_GEOMETRY

    moving_row = isinstance(source, ExistingItem) and source.is_row
    if isinstance(source, ExistingItem):
        if source.node_id == target_id:
            return RejectionReason.CIRCULAR_REFERENCE
        if moving_row and isinstance(target_at, InRow) and target_at.row_id == source.node_id:
            return RejectionReason.CIRCULAR_REFERENCE

    # The center of a plain field means "right after it"
    if intent is Intent.INSERT_INTO_ROW and kind is TargetKind.FIELD:
        intent = Intent.AFTER

    # A row group only ever moves along the column
    if moving_row and not intent.is_vertical:
        return RejectionReason.NESTED_ROW_NOT_ALLOWED

    if intent.is_vertical:
        # Fields inside a row resolve to the row's own slot; rows never split
        anchor = canvas.top_index(target_at)
        offset = 1 if intent is Intent.AFTER else 0
        return _Plan(TopLevel(anchor + offset))

    if intent.is_horizontal:
        if kind is TargetKind.ROW:
            return RejectionReason.NESTED_ROW_NOT_ALLOWED
        if kind is TargetKind.FIELD:
            return _Plan(target_at, combine=intent)
        row = canvas.node_at(TopLevel(canvas.row_index(target_at.row_id)))
        if _row_is_full(row, moved_at):
            return RejectionReason.CAPACITY_EXCEEDED
        offset = 1 if intent is Intent.RIGHT else 0
        return _Plan(InRow(row.id, target_at.index + offset))

    if intent is Intent.INSERT_INTO_ROW:
        if kind is TargetKind.ROW:
            row = canvas.node_at(target_at)
        else:
            row = canvas.node_at(TopLevel(canvas.row_index(target_at.row_id)))
        if _row_is_full(row, moved_at):
            return RejectionReason.CAPACITY_EXCEEDED
        return _Plan(InRow(row.id, len(row.children)))

    raise ValueError(f"Unhandled intent {intent!r}")


def _source_address(canvas: Canvas, source: Source) -> Address | None:
    if isinstance(source, NewItem):
        return None
    address = canvas.locate(source.node_id)
    if address is None:
        raise SourceNotFound(source.node_id)
    return address


def _row_is_full(row: RowGroup, moved_at: Address | None) -> bool:
    count = len(row.children)
    # Reordering inside the same row does not add a child
    if isinstance(moved_at, InRow) and moved_at.row_id == row.id:
        count -= 1
    return count >= MAX_ROW_CHILDREN


def _compensate(destination: Address, removed: Address) -> Address:
    """Shift a destination left when the dragged node sat before it.

    Both addresses are in coordinates of the canvas before removal; only a
    removal from the same sequence, at a lower index, moves the slot.
    """
    if isinstance(destination, TopLevel) and isinstance(removed, TopLevel):
        if removed.index < destination.index:
            return TopLevel(destination.index - 1)
    elif isinstance(destination, InRow) and isinstance(removed, InRow):
        if removed.row_id == destination.row_id and removed.index < destination.index:
            return InRow(destination.row_id, destination.index - 1)
    return destination


def _new_row_id(canvas: Canvas, target_id: str) -> str:
    """Derive a row id from the field it was built around.

    The same canvas and target always yield the same id.
    """
    taken = set(canvas.ids())
    candidate = f"row_{target_id}"
    n = 2
    while candidate in taken:
        candidate = f"row_{target_id}_{n}"
        n += 1
    return candidate
