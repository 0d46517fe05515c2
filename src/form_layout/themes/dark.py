"""Dark grey theme."""

from form_layout.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    field_fill="rgba(255, 255, 255, 0.06)",
    field_stroke="rgba(255, 255, 255, 0.3)",
    field_stroke_width=1.0,
    row_fill="rgba(255, 255, 255, 0.03)",
    row_stroke="#8ab4f8",
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    type_color="#aaaaaa",
    type_font_size=10.0,
    title_color="#ffffff",
    title_font_size=20.0,
    empty_text_color="#888888",
    corner_radius=4.0,
)
