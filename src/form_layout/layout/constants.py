"""Layout constants used across layout modules.

Centralizes the drop-zone fractions used by geometry.py and the wireframe
metrics used by boxes.py. Row capacity lives with the data model
(``form_layout.schema.model``) and is re-exported here.
"""

from form_layout.schema.model import MAX_ROW_CHILDREN, MIN_ROW_CHILDREN

# ---------------------------------------------------------------------------
# Drop zones (fractions of the target's bounding box)
# ---------------------------------------------------------------------------
EDGE_X: float = 0.20
"""Width of the left/right zones on any target."""

EDGE_Y: float = 0.30
"""Height of the top/bottom zones on a plain field target."""

ROW_EDGE_Y: float = 0.15
"""Height of the top/bottom zones on a row group target.

Smaller than EDGE_Y so the center of a row (insert into the row) is easy
to hit, while the thin top/bottom bands move the whole row.
"""

# ---------------------------------------------------------------------------
# Wireframe geometry (boxes.py)
# ---------------------------------------------------------------------------
CANVAS_WIDTH: float = 640.0
"""Default width of the canvas column."""

FIELD_HEIGHT: float = 56.0
"""Height of a single field box."""

ROW_PADDING: float = 8.0
"""Inset between a row group's frame and its children."""

COLUMN_GAP: float = 12.0
"""Vertical gap between stacked top-level nodes."""

ROW_CHILD_GAP: float = 10.0
"""Horizontal gap between fields in a row group."""

__all__ = [
    "CANVAS_WIDTH",
    "COLUMN_GAP",
    "EDGE_X",
    "EDGE_Y",
    "FIELD_HEIGHT",
    "MAX_ROW_CHILDREN",
    "MIN_ROW_CHILDREN",
    "ROW_CHILD_GAP",
    "ROW_EDGE_Y",
    "ROW_PADDING",
]
