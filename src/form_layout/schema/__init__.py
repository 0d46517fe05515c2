"""Canvas data model and JSON persistence."""

from form_layout.schema.model import (
    MAX_ROW_CHILDREN,
    MIN_ROW_CHILDREN,
    Address,
    Canvas,
    Field,
    InRow,
    Node,
    RowGroup,
    TopLevel,
    validate_canvas,
)
from form_layout.schema.properties import ComponentType
from form_layout.schema.document import dumps, load_canvas, loads, save_canvas

__all__ = [
    "Address",
    "Canvas",
    "ComponentType",
    "Field",
    "InRow",
    "MAX_ROW_CHILDREN",
    "MIN_ROW_CHILDREN",
    "Node",
    "RowGroup",
    "TopLevel",
    "dumps",
    "load_canvas",
    "loads",
    "save_canvas",
    "validate_canvas",
]
