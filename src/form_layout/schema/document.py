"""JSON persistence for canvases.

A document is a JSON array of nodes discriminated by a ``type`` tag::

    [
      {"type": "field", "id": "f1", "componentType": "text_input",
       "label": "Name", "properties": {"placeholder": "..."}},
      {"type": "row_group", "id": "r1", "children": [ ...fields... ]}
    ]

Loading validates property payloads against the field kind and checks the
canvas invariants, so a loaded canvas is always canonical.
"""

from __future__ import annotations

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from form_layout.schema.model import (
    Canvas,
    Field,
    Node,
    RowGroup,
    validate_canvas,
)
from form_layout.schema.properties import ComponentType, properties_class_for

FIELD_TAG = "field"
ROW_TAG = "row_group"


def canvas_to_data(canvas: Canvas) -> list[dict[str, Any]]:
    """Convert a canvas to plain JSON-compatible data."""
    return [_node_to_data(node) for node in canvas.nodes]


def _node_to_data(node: Node) -> dict[str, Any]:
    if isinstance(node, RowGroup):
        return {
            "type": ROW_TAG,
            "id": node.id,
            "children": [_node_to_data(child) for child in node.children],
        }
    props = asdict(node.properties)
    if "options" in props:
        props["options"] = list(props["options"])
    return {
        "type": FIELD_TAG,
        "id": node.id,
        "componentType": node.component_type.value,
        "label": node.label,
        "properties": props,
    }


def canvas_from_data(data: Any) -> Canvas:
    """Build a canvas from parsed JSON data.

    Raises ValueError describing the first malformed entry.
    """
    if not isinstance(data, list):
        raise ValueError("Canvas document must be a JSON array of nodes")

    nodes = [_node_from_data(item, f"[{i}]") for i, item in enumerate(data)]
    canvas = Canvas(tuple(nodes))

    errors = validate_canvas(canvas)
    if errors:
        raise ValueError("Invalid canvas: " + "; ".join(errors))
    return canvas


def _node_from_data(item: Any, path: str) -> Node:
    if not isinstance(item, dict):
        raise ValueError(f"{path}: expected an object, got {type(item).__name__}")

    tag = item.get("type")
    if tag == ROW_TAG:
        return _row_from_data(item, path)
    if tag == FIELD_TAG:
        return _field_from_data(item, path)
    raise ValueError(f"{path}: unknown node type {tag!r}")


def _row_from_data(item: dict[str, Any], path: str) -> RowGroup:
    node_id = _require_str(item, "id", path)
    raw_children = item.get("children")
    if not isinstance(raw_children, list):
        raise ValueError(f"{path}.children: expected an array")

    children = []
    for i, child in enumerate(raw_children):
        child_path = f"{path}.children[{i}]"
        if isinstance(child, dict) and child.get("type") == ROW_TAG:
            raise ValueError(f"{child_path}: row groups cannot be nested")
        children.append(_node_from_data(child, child_path))
    return RowGroup(node_id, tuple(children))


def _field_from_data(item: dict[str, Any], path: str) -> Field:
    node_id = _require_str(item, "id", path)
    raw_type = _require_str(item, "componentType", path)
    try:
        ctype = ComponentType(raw_type)
    except ValueError:
        raise ValueError(f"{path}: unknown componentType '{raw_type}'") from None

    label = item.get("label", "")
    if not isinstance(label, str):
        raise ValueError(f"{path}.label: expected a string")

    raw_props = item.get("properties", {})
    if not isinstance(raw_props, dict):
        raise ValueError(f"{path}.properties: expected an object")

    props_cls = properties_class_for(ctype)
    known = {f.name for f in fields(props_cls)}
    unknown = sorted(set(raw_props) - known)
    if unknown:
        raise ValueError(
            f"{path}.properties: unknown keys for {ctype.value}: {', '.join(unknown)}"
        )
    try:
        properties = props_cls(**raw_props)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{path}.properties: {e}") from e

    return Field(node_id, ctype, label, properties)


def _require_str(item: dict[str, Any], key: str, path: str) -> str:
    value = item.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"{path}.{key}: expected a non-empty string")
    return value


def dumps(canvas: Canvas, indent: int | None = 2) -> str:
    """Serialize a canvas to a JSON string."""
    return json.dumps(canvas_to_data(canvas), indent=indent)


def loads(text: str) -> Canvas:
    """Parse a canvas from a JSON string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Not valid JSON: {e}") from e
    return canvas_from_data(data)


def load_canvas(path: Path) -> Canvas:
    return loads(Path(path).read_text())


def save_canvas(canvas: Canvas, path: Path) -> None:
    Path(path).write_text(dumps(canvas) + "\n")
