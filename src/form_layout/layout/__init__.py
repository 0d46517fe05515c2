"""Drop layout engine.

Public API:
- classify: pointer geometry -> Intent
- resolve: drag payload -> NewItem / ExistingItem
- apply / check / remove: the layout engine
- dissolve: row group dissolution pass
- handle_drop / hover / handle_delete: end-to-end orchestration
"""

from form_layout.layout.dissolve import dissolve
from form_layout.layout.engine import ApplyResult, apply, check, remove
from form_layout.layout.geometry import Intent, Point, Rect, ZoneConfig, classify
from form_layout.layout.manager import (
    DropOutcome,
    HoverFeedback,
    PointerEvent,
    handle_delete,
    handle_drop,
    hover,
)
from form_layout.layout.source import ExistingItem, NewItem, resolve

__all__ = [
    "ApplyResult",
    "DropOutcome",
    "ExistingItem",
    "HoverFeedback",
    "Intent",
    "NewItem",
    "Point",
    "PointerEvent",
    "Rect",
    "ZoneConfig",
    "apply",
    "check",
    "classify",
    "dissolve",
    "handle_delete",
    "handle_drop",
    "hover",
    "remove",
    "resolve",
]
