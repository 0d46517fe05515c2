"""Geometry classifier: pointer position over a target -> drop intent.

The target's bounding box is split into zones. Left/right bands win over
top/bottom bands, which win over the center, so a pointer in a corner always
resolves to the horizontal intent::

    +-----+-------------------+-----+
    |     |      BEFORE       |     |
    |     +-------------------+     |
    |LEFT |  CENTER (AFTER or |RIGHT|
    |     |  INSERT_INTO_ROW) |     |
    |     +-------------------+     |
    |     |       AFTER       |     |
    +-----+-------------------+-----+
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ZONES",
    "Intent",
    "Point",
    "Rect",
    "ZoneConfig",
    "classify",
    "relative_position",
]

from dataclasses import dataclass
from enum import Enum

from form_layout.layout.constants import EDGE_X, EDGE_Y, ROW_EDGE_Y


class Intent(str, Enum):
    """Symbolic meaning of a drop."""

    BEFORE = "before"
    AFTER = "after"
    LEFT = "left"
    RIGHT = "right"
    INSERT_INTO_ROW = "insert_into_row"
    REJECT = "reject"
    # Drop on empty canvas area; never produced by classify()
    APPEND_TO_END = "append_to_end"

    @property
    def is_vertical(self) -> bool:
        return self in (Intent.BEFORE, Intent.AFTER)

    @property
    def is_horizontal(self) -> bool:
        return self in (Intent.LEFT, Intent.RIGHT)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned bounding box in canvas pixels."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, point: Point) -> bool:
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom

    def point_at(self, x_pct: float, y_pct: float) -> Point:
        """Return the absolute point at fractional position inside the box."""
        return Point(self.x + x_pct * self.width, self.y + y_pct * self.height)


@dataclass(frozen=True)
class ZoneConfig:
    """Zone fractions for plain field targets and row group targets."""

    edge_x: float = EDGE_X
    edge_y: float = EDGE_Y
    row_edge_y: float = ROW_EDGE_Y

    def __post_init__(self) -> None:
        for name in ("edge_x", "edge_y", "row_edge_y"):
            value = getattr(self, name)
            if not 0.0 < value < 0.5:
                raise ValueError(f"{name} must be between 0 and 0.5, got {value}")


DEFAULT_ZONES = ZoneConfig()


def relative_position(pointer: Point, bounds: Rect) -> tuple[float, float] | None:
    """Normalize a pointer into target-relative fractions.

    Returns None when the box is degenerate or the pointer lies outside it.
    """
    if bounds.width <= 0 or bounds.height <= 0:
        return None
    x_pct = (pointer.x - bounds.x) / bounds.width
    y_pct = (pointer.y - bounds.y) / bounds.height
    if not (0.0 <= x_pct <= 1.0 and 0.0 <= y_pct <= 1.0):
        return None
    return x_pct, y_pct


def classify(
    pointer: Point,
    bounds: Rect,
    target_is_row: bool,
    zones: ZoneConfig = DEFAULT_ZONES,
) -> Intent:
    """Classify a pointer position over a target into a drop intent."""
    rel = relative_position(pointer, bounds)
    if rel is None:
        return Intent.REJECT
    x_pct, y_pct = rel

    h = zones.edge_x
    v = zones.row_edge_y if target_is_row else zones.edge_y

    if x_pct < h:
        return Intent.LEFT
    if x_pct > 1.0 - h:
        return Intent.RIGHT
    if y_pct < v:
        return Intent.BEFORE
    if y_pct > 1.0 - v:
        return Intent.AFTER

    # Center: rows accept the item, fields put it right after themselves
    return Intent.INSERT_INTO_ROW if target_is_row else Intent.AFTER
