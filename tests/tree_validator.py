"""Tree validator: programmatic checks for canvas invariants.

Runs a suite of checks against a canvas and returns a list of Violation
objects describing any problems found. Used by the invariant sweep tests to
check every canvas the engine can reach.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from form_layout.schema.model import (
    MAX_ROW_CHILDREN,
    MIN_ROW_CHILDREN,
    Canvas,
    Field,
    RowGroup,
)


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Violation:
    check: str
    severity: Severity
    message: str
    context: dict = field(default_factory=dict)


def validate_tree(canvas: Canvas) -> list[Violation]:
    """Run all tree checks and return violations."""
    violations: list[Violation] = []
    violations.extend(check_row_capacity(canvas))
    violations.extend(check_no_nesting(canvas))
    violations.extend(check_unique_ids(canvas))
    return violations


def check_row_capacity(canvas: Canvas) -> list[Violation]:
    """Every row group holds between 2 and 4 fields."""
    violations: list[Violation] = []
    for i, node in enumerate(canvas.nodes):
        if not isinstance(node, RowGroup):
            continue
        n = len(node.children)
        if not MIN_ROW_CHILDREN <= n <= MAX_ROW_CHILDREN:
            violations.append(
                Violation(
                    check="row_capacity",
                    severity=Severity.ERROR,
                    message=f"Row '{node.id}' at index {i} has {n} children",
                    context={"row": node.id, "children": n},
                )
            )
    return violations


def check_no_nesting(canvas: Canvas) -> list[Violation]:
    """Row groups only ever contain fields."""
    violations: list[Violation] = []
    for node in canvas.nodes:
        if not isinstance(node, RowGroup):
            continue
        for child in node.children:
            if not isinstance(child, Field):
                violations.append(
                    Violation(
                        check="no_nesting",
                        severity=Severity.ERROR,
                        message=f"Row '{node.id}' contains non-field '{child.id}'",
                        context={"row": node.id, "child": child.id},
                    )
                )
    return violations


def check_unique_ids(canvas: Canvas) -> list[Violation]:
    """No id appears twice anywhere in the tree."""
    violations: list[Violation] = []
    seen: set[str] = set()
    for node_id in canvas.ids():
        if node_id in seen:
            violations.append(
                Violation(
                    check="unique_ids",
                    severity=Severity.ERROR,
                    message=f"Id '{node_id}' appears more than once",
                    context={"id": node_id},
                )
            )
        seen.add(node_id)
    return violations


def field_ids(canvas: Canvas) -> list[str]:
    """Sorted field ids, for conservation checks."""
    return sorted(f.id for f in canvas.fields())
