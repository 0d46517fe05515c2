"""Theme definition for canvas wireframe rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a canvas wireframe."""

    name: str
    background_color: str
    field_fill: str
    field_stroke: str
    field_stroke_width: float
    row_fill: str
    row_stroke: str
    label_color: str
    label_font_family: str
    label_font_size: float
    type_color: str
    type_font_size: float
    title_color: str
    title_font_size: float
    empty_text_color: str
    corner_radius: float = 6.0
    row_dash: str = "6,4"
