"""Light wireframe theme (default)."""

from form_layout.render.style import Theme

WIREFRAME_THEME = Theme(
    name="wireframe",
    background_color="#ffffff",
    field_fill="#f7f7f9",
    field_stroke="#9aa0a6",
    field_stroke_width=1.2,
    row_fill="rgba(66, 133, 244, 0.05)",
    row_stroke="#4285f4",
    label_color="#202124",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    type_color="#80868b",
    type_font_size=10.0,
    title_color="#111111",
    title_font_size=20.0,
    empty_text_color="#9aa0a6",
)
