"""SVG wireframe rendering."""

from form_layout.render.style import Theme
from form_layout.render.svg import render_svg

__all__ = ["Theme", "render_svg"]
