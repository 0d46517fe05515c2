"""Rejections and fatal errors raised by the layout engine."""

from __future__ import annotations

from enum import Enum


class RejectionReason(str, Enum):
    """Why a drop was refused. Returned as a value, never raised."""

    CAPACITY_EXCEEDED = "capacity_exceeded"
    NESTED_ROW_NOT_ALLOWED = "nested_row_not_allowed"
    CIRCULAR_REFERENCE = "circular_reference"
    INVALID_GEOMETRY = "invalid_geometry"


class LayoutError(Exception):
    """Caller and canvas state disagree. Indicates a programming error."""


class TargetNotFound(LayoutError, LookupError):
    """The drop target id is not present in the canvas."""

    def __init__(self, target_id: str | None):
        self.target_id = target_id
        super().__init__(f"Drop target '{target_id}' is not on the canvas")


class SourceNotFound(LayoutError, LookupError):
    """An existing-item drag refers to a node that is no longer on the canvas."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Dragged node '{node_id}' is not on the canvas")


class InvalidPayload(LayoutError, ValueError):
    """A drag payload could not be classified."""
    pass


class DuplicateId(LayoutError, ValueError):
    """The field factory produced an id that is already on the canvas."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Field factory returned an id already in use: '{node_id}'")
