"""Dissolution pass: collapse row groups that fell below two children."""

from __future__ import annotations

__all__ = ["dissolve"]

import logging

from form_layout.schema.model import Canvas, Node, RowGroup

logger = logging.getLogger(__name__)


def dissolve(canvas: Canvas) -> Canvas:
    """Remove empty row groups and promote the child of single-child rows.

    A promoted child takes the row's place in the column and keeps its id
    and properties. Rows with two or more children and all other nodes are
    left where they are. Returns ``canvas`` itself when nothing changes.
    """
    nodes: list[Node] = []
    changed = False
    for node in canvas.nodes:
        if isinstance(node, RowGroup) and len(node.children) <= 1:
            changed = True
            if node.children:
                child = node.children[0]
                logger.debug("Dissolving row '%s', promoting '%s'", node.id, child.id)
                nodes.append(child)
            else:
                logger.debug("Dropping empty row '%s'", node.id)
            continue
        nodes.append(node)

    if not changed:
        return canvas
    return canvas.with_nodes(nodes)
