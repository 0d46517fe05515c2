"""Wireframe geometry: bounding boxes for every node on a canvas.

Top-level nodes stack top to bottom at full width. A row group is a framed
band whose children share its inner width equally, left to right. The
renderer draws these boxes, and ``hit_test`` maps a pointer back to the
innermost node under it so the state manager can classify the drop.
"""

from __future__ import annotations

from form_layout.layout.constants import (
    CANVAS_WIDTH,
    COLUMN_GAP,
    FIELD_HEIGHT,
    ROW_CHILD_GAP,
    ROW_PADDING,
)
from form_layout.layout.geometry import Point, Rect
from form_layout.schema.model import Canvas, RowGroup


def compute_boxes(
    canvas: Canvas,
    width: float = CANVAS_WIDTH,
    x_offset: float = 0.0,
    y_offset: float = 0.0,
    field_height: float = FIELD_HEIGHT,
    column_gap: float = COLUMN_GAP,
    row_padding: float = ROW_PADDING,
    row_child_gap: float = ROW_CHILD_GAP,
) -> dict[str, Rect]:
    """Return a node id -> Rect map for every field and row group."""
    boxes: dict[str, Rect] = {}
    y = y_offset
    for node in canvas.nodes:
        if isinstance(node, RowGroup):
            row_h = field_height + 2 * row_padding
            boxes[node.id] = Rect(x_offset, y, width, row_h)
            n = len(node.children)
            if n:
                inner_w = width - 2 * row_padding
                child_w = (inner_w - (n - 1) * row_child_gap) / n
                cx = x_offset + row_padding
                for child in node.children:
                    boxes[child.id] = Rect(cx, y + row_padding, child_w, field_height)
                    cx += child_w + row_child_gap
            y += row_h + column_gap
        else:
            boxes[node.id] = Rect(x_offset, y, width, field_height)
            y += field_height + column_gap
    return boxes


def content_height(canvas: Canvas, boxes: dict[str, Rect], y_offset: float = 0.0) -> float:
    """Height from ``y_offset`` to the bottom of the last node."""
    if not canvas.nodes:
        return 0.0
    return boxes[canvas.nodes[-1].id].bottom - y_offset


def hit_test(
    canvas: Canvas, boxes: dict[str, Rect], point: Point
) -> tuple[str, Rect] | None:
    """Return the innermost node under ``point`` and its box.

    Fields inside a row win over the row itself; the row is hit only in its
    padding. Returns None over empty canvas area.
    """
    for node in canvas.nodes:
        box = boxes.get(node.id)
        if box is None or not box.contains(point):
            continue
        if isinstance(node, RowGroup):
            for child in node.children:
                child_box = boxes.get(child.id)
                if child_box is not None and child_box.contains(point):
                    return child.id, child_box
        return node.id, box
    return None
