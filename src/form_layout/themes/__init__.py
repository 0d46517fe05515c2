"""Theme definitions for canvas wireframes."""

from form_layout.themes.dark import DARK_THEME
from form_layout.themes.wireframe import WIREFRAME_THEME

THEMES = {
    "wireframe": WIREFRAME_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "WIREFRAME_THEME", "DARK_THEME"]
