"""Drag source resolution: what is being dragged, and from where.

Payloads are the plain mappings a drag-and-drop layer carries around::

    {"source": "palette", "componentType": "text_input"}
    {"source": "canvas", "id": "field_3f2a"}

Resolution is read-only; it only looks the dragged node up in the canvas.
"""

from __future__ import annotations

__all__ = ["ExistingItem", "NewItem", "Source", "resolve"]

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from form_layout.errors import InvalidPayload, SourceNotFound
from form_layout.schema.model import Address, Canvas, RowGroup
from form_layout.schema.properties import ComponentType

PALETTE = "palette"
CANVAS = "canvas"


@dataclass(frozen=True)
class NewItem:
    """A palette item: a fresh field is created on drop."""

    component_type: ComponentType


@dataclass(frozen=True)
class ExistingItem:
    """A node already on the canvas; dropping moves it."""

    node_id: str
    origin: Address
    is_row: bool = False


Source = NewItem | ExistingItem


def resolve(payload: Mapping[str, Any] | Source, canvas: Canvas) -> Source:
    """Classify a drag payload as a new item or an existing one.

    Raises InvalidPayload for malformed payloads and SourceNotFound when a
    canvas drag names a node that is not on the canvas.
    """
    if isinstance(payload, NewItem):
        return payload
    if isinstance(payload, ExistingItem):
        return _existing(payload.node_id, canvas)
    if not isinstance(payload, Mapping):
        raise InvalidPayload(f"Drag payload must be a mapping, got {type(payload).__name__}")

    kind = payload.get("source")
    if kind == PALETTE:
        raw_type = payload.get("componentType")
        try:
            return NewItem(ComponentType(raw_type))
        except ValueError:
            raise InvalidPayload(f"Unknown component type {raw_type!r}") from None

    if kind == CANVAS:
        node_id = payload.get("id")
        if not isinstance(node_id, str) or not node_id:
            raise InvalidPayload("Canvas drag payload is missing its 'id'")
        return _existing(node_id, canvas)

    raise InvalidPayload(f"Unknown drag source {kind!r}")


def _existing(node_id: str, canvas: Canvas) -> ExistingItem:
    address = canvas.locate(node_id)
    if address is None:
        raise SourceNotFound(node_id)
    node = canvas.node_at(address)
    return ExistingItem(node_id, address, isinstance(node, RowGroup))
