"""Render constants used by svg.py.

Theme-dependent values remain in style.py.
"""

CANVAS_PADDING: float = 24.0
"""Padding around the canvas column."""

TITLE_HEIGHT: float = 44.0
"""Vertical space reserved for the title when one is given."""

EMPTY_STATE_HEIGHT: float = 120.0
"""Height of the placeholder box drawn for an empty canvas."""

LABEL_INSET_X: float = 10.0
"""Horizontal inset of labels inside a field box."""

LABEL_INSET_Y: float = 20.0
"""Baseline offset of the label from the top of a field box."""

TYPE_INSET_Y: float = 40.0
"""Baseline offset of the component type caption."""

CHAR_WIDTH_RATIO: float = 0.55
"""Approximate character width as a fraction of font size (for truncation)."""

EMPTY_STATE_TEXT: str = "Drop components here"
"""Placeholder shown on an empty canvas."""
