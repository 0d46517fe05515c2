"""Data model for form canvases.

A canvas is a single vertical column of nodes. Each node is either a
``Field`` (a leaf form element) or a ``RowGroup`` laying 2-4 fields out
left to right. Every model type is frozen: mutations build new values, so
the host can keep old canvases around as undo snapshots.

Positions are expressed through addresses: a node lives either at
``TopLevel(index)`` in the canvas or at ``InRow(row_id, index)`` inside a
row group. The ``without``/``inserted``/``replaced`` helpers are the only
places that splice node sequences.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from form_layout.schema.properties import (
    ComponentType,
    FieldProperties,
    properties_class_for,
)

MIN_ROW_CHILDREN: int = 2
"""Fewest fields a row group may hold once a mutation completes."""

MAX_ROW_CHILDREN: int = 4
"""Most fields a row group may ever hold."""


@dataclass(frozen=True)
class Field:
    """A leaf form element."""

    id: str
    component_type: ComponentType
    label: str = ""
    properties: FieldProperties | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Field id must be a non-empty string")
        ctype = ComponentType(self.component_type)
        object.__setattr__(self, "component_type", ctype)
        expected = properties_class_for(ctype)
        if self.properties is None:
            object.__setattr__(self, "properties", expected())
        elif type(self.properties) is not expected:
            raise ValueError(
                f"Field '{self.id}' of type {ctype.value} needs "
                f"{expected.__name__}, got {type(self.properties).__name__}"
            )

    @property
    def is_row(self) -> bool:
        return False


@dataclass(frozen=True)
class RowGroup:
    """A horizontal container of fields. Row groups never nest."""

    id: str
    children: tuple[Field, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("RowGroup id must be a non-empty string")
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, Field):
                raise ValueError(
                    f"RowGroup '{self.id}' can only hold fields, "
                    f"got {type(child).__name__}"
                )
        object.__setattr__(self, "children", children)

    @property
    def is_row(self) -> bool:
        return True

    def index_of(self, field_id: str) -> int:
        """Return the position of a child field, or -1."""
        for i, child in enumerate(self.children):
            if child.id == field_id:
                return i
        return -1


Node = Field | RowGroup


@dataclass(frozen=True)
class TopLevel:
    """Address of a node in the canvas column."""

    index: int


@dataclass(frozen=True)
class InRow:
    """Address of a field inside a row group."""

    row_id: str
    index: int


Address = TopLevel | InRow


@dataclass(frozen=True)
class Canvas:
    """The top-level ordered column of nodes."""

    nodes: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        nodes = tuple(self.nodes)
        for node in nodes:
            if not isinstance(node, (Field, RowGroup)):
                raise ValueError(
                    f"Canvas nodes must be fields or row groups, "
                    f"got {type(node).__name__}"
                )
        object.__setattr__(self, "nodes", nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    # -- lookup -----------------------------------------------------------

    def locate(self, node_id: str) -> Address | None:
        """Return the address of a field or row group, or None."""
        for i, node in enumerate(self.nodes):
            if node.id == node_id:
                return TopLevel(i)
            if isinstance(node, RowGroup):
                j = node.index_of(node_id)
                if j != -1:
                    return InRow(node.id, j)
        return None

    def row_index(self, row_id: str) -> int:
        """Return the top-level index of a row group.

        Raises KeyError when no row group has that id.
        """
        for i, node in enumerate(self.nodes):
            if node.id == row_id and isinstance(node, RowGroup):
                return i
        raise KeyError(row_id)

    def top_index(self, address: Address) -> int:
        """Return the index of the top-level node that contains an address."""
        if isinstance(address, TopLevel):
            return address.index
        return self.row_index(address.row_id)

    def node_at(self, address: Address) -> Node:
        if isinstance(address, TopLevel):
            return self.nodes[address.index]
        row = self.nodes[self.row_index(address.row_id)]
        return row.children[address.index]

    def get(self, node_id: str) -> Node | None:
        address = self.locate(node_id)
        if address is None:
            return None
        return self.node_at(address)

    def parent_row(self, node_id: str) -> RowGroup | None:
        """Return the row group holding a field, or None for top-level nodes."""
        address = self.locate(node_id)
        if isinstance(address, InRow):
            return self.nodes[self.row_index(address.row_id)]
        return None

    def fields(self) -> list[Field]:
        """Return every field in visual order (rows read left to right)."""
        result: list[Field] = []
        for node in self.nodes:
            if isinstance(node, RowGroup):
                result.extend(node.children)
            else:
                result.append(node)
        return result

    def field_count(self) -> int:
        return len(self.fields())

    def row_groups(self) -> list[RowGroup]:
        return [n for n in self.nodes if isinstance(n, RowGroup)]

    def ids(self) -> list[str]:
        """Return every node id (rows before their children)."""
        result: list[str] = []
        for node in self.nodes:
            result.append(node.id)
            if isinstance(node, RowGroup):
                result.extend(child.id for child in node.children)
        return result

    # -- address-based mutation ---------------------------------------------

    def with_nodes(self, nodes: Iterable[Node]) -> Canvas:
        """Return a new canvas holding ``nodes``; this canvas is unchanged."""
        return Canvas(tuple(nodes))

    def without(self, address: Address) -> Canvas:
        """Return a canvas with the node at ``address`` removed.

        Removing from a row can leave it with fewer than two children; the
        dissolution pass cleans that up.
        """
        nodes = list(self.nodes)
        if isinstance(address, TopLevel):
            del nodes[address.index]
            return self.with_nodes(nodes)
        ri = self.row_index(address.row_id)
        row = nodes[ri]
        children = list(row.children)
        del children[address.index]
        nodes[ri] = RowGroup(row.id, tuple(children))
        return self.with_nodes(nodes)

    def inserted(self, address: Address, node: Node) -> Canvas:
        """Return a canvas with ``node`` inserted so that it ends up at ``address``."""
        nodes = list(self.nodes)
        if isinstance(address, TopLevel):
            nodes.insert(address.index, node)
            return self.with_nodes(nodes)
        if not isinstance(node, Field):
            raise ValueError(f"Cannot place row group '{node.id}' inside a row")
        ri = self.row_index(address.row_id)
        row = nodes[ri]
        children = list(row.children)
        children.insert(address.index, node)
        nodes[ri] = RowGroup(row.id, tuple(children))
        return self.with_nodes(nodes)

    def replaced(self, address: Address, node: Node) -> Canvas:
        """Return a canvas with the node at ``address`` swapped for ``node``."""
        return self.without(address).inserted(address, node)


def validate_canvas(canvas: Canvas) -> list[str]:
    """Check the structural invariants of a canvas.

    Returns a list of human-readable problems; an empty list means the
    canvas is canonical.
    """
    errors: list[str] = []

    seen: set[str] = set()
    for node_id in canvas.ids():
        if node_id in seen:
            errors.append(f"Duplicate id '{node_id}'")
        seen.add(node_id)

    for i, node in enumerate(canvas.nodes):
        if not isinstance(node, RowGroup):
            continue
        n = len(node.children)
        if n < MIN_ROW_CHILDREN:
            errors.append(
                f"Row group '{node.id}' at index {i} has {n} "
                f"child{'ren' if n != 1 else ''} (minimum {MIN_ROW_CHILDREN})"
            )
        elif n > MAX_ROW_CHILDREN:
            errors.append(
                f"Row group '{node.id}' at index {i} has {n} children "
                f"(maximum {MAX_ROW_CHILDREN})"
            )

    return errors
