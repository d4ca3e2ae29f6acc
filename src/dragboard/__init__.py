"""Ordering and placeholder engine for drag-and-drop kanban boards."""

from dragboard.model import (
    BoardController,
    Group,
    GroupController,
    Item,
    Outcome,
    PlaceholderItem,
)

__all__ = [
    "BoardController",
    "Group",
    "GroupController",
    "Item",
    "Outcome",
    "PlaceholderItem",
]
