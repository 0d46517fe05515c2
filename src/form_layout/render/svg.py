"""SVG wireframe generation for form canvases using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from form_layout.layout.boxes import compute_boxes, content_height
from form_layout.layout.constants import CANVAS_WIDTH
from form_layout.layout.geometry import Rect
from form_layout.render.constants import (
    CANVAS_PADDING,
    CHAR_WIDTH_RATIO,
    EMPTY_STATE_HEIGHT,
    EMPTY_STATE_TEXT,
    LABEL_INSET_X,
    LABEL_INSET_Y,
    TITLE_HEIGHT,
    TYPE_INSET_Y,
)
from form_layout.render.style import Theme
from form_layout.schema.model import Canvas, Field, RowGroup


def render_svg(
    canvas: Canvas,
    theme: Theme,
    width: float = CANVAS_WIDTH,
    title: str = "",
    padding: float = CANVAS_PADDING,
) -> str:
    """Render a canvas to an SVG wireframe string."""
    top = padding + (TITLE_HEIGHT if title else 0.0)
    boxes = compute_boxes(canvas, width=width, x_offset=padding, y_offset=top)

    body_h = content_height(canvas, boxes, top) if canvas.nodes else EMPTY_STATE_HEIGHT
    svg_width = int(width + padding * 2)
    svg_height = int(top + body_h + padding)

    d = draw.Drawing(svg_width, svg_height)
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    if title:
        d.append(draw.Text(
            title,
            theme.title_font_size,
            padding, padding + theme.title_font_size,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    if not canvas.nodes:
        _render_empty_state(d, Rect(padding, top, width, EMPTY_STATE_HEIGHT), theme)
        return d.as_svg()

    for node in canvas.nodes:
        if isinstance(node, RowGroup):
            _render_row(d, boxes[node.id], theme)
            for child in node.children:
                _render_field(d, child, boxes[child.id], theme)
        else:
            _render_field(d, node, boxes[node.id], theme)

    return d.as_svg()


def _render_row(d: draw.Drawing, box: Rect, theme: Theme) -> None:
    d.append(draw.Rectangle(
        box.x, box.y, box.width, box.height,
        rx=theme.corner_radius, ry=theme.corner_radius,
        fill=theme.row_fill,
        stroke=theme.row_stroke,
        stroke_width=1.0,
        stroke_dasharray=theme.row_dash,
    ))


def _render_field(d: draw.Drawing, field: Field, box: Rect, theme: Theme) -> None:
    group = draw.Group(id=field.id)
    group.append(draw.Rectangle(
        box.x, box.y, box.width, box.height,
        rx=theme.corner_radius, ry=theme.corner_radius,
        fill=theme.field_fill,
        stroke=theme.field_stroke,
        stroke_width=theme.field_stroke_width,
    ))

    max_chars = _max_chars(box.width - 2 * LABEL_INSET_X, theme.label_font_size)
    group.append(draw.Text(
        _truncate(field.label or field.id, max_chars),
        theme.label_font_size,
        box.x + LABEL_INSET_X, box.y + LABEL_INSET_Y,
        fill=theme.label_color,
        font_family=theme.label_font_family,
    ))

    max_chars = _max_chars(box.width - 2 * LABEL_INSET_X, theme.type_font_size)
    group.append(draw.Text(
        _truncate(field.component_type.value, max_chars),
        theme.type_font_size,
        box.x + LABEL_INSET_X, box.y + TYPE_INSET_Y,
        fill=theme.type_color,
        font_family=theme.label_font_family,
    ))
    d.append(group)


def _render_empty_state(d: draw.Drawing, box: Rect, theme: Theme) -> None:
    d.append(draw.Rectangle(
        box.x, box.y, box.width, box.height,
        rx=theme.corner_radius, ry=theme.corner_radius,
        fill="none",
        stroke=theme.field_stroke,
        stroke_width=1.0,
        stroke_dasharray=theme.row_dash,
    ))
    d.append(draw.Text(
        EMPTY_STATE_TEXT,
        theme.label_font_size,
        box.x + box.width / 2, box.y + box.height / 2,
        fill=theme.empty_text_color,
        font_family=theme.label_font_family,
        text_anchor="middle",
        dominant_baseline="central",
    ))


def _max_chars(width: float, font_size: float) -> int:
    return max(1, int(width / (font_size * CHAR_WIDTH_RATIO)))


def _truncate(text: str, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    if max_chars <= 1:
        return text[:max_chars]
    return text[: max_chars - 1] + "…"
