"""Ordered board model: groups of items, controllers and placeholder coordination."""

from dragboard.model.board import BoardController
from dragboard.model.coordinator import PlaceholderCoordinator, ReorderDataSource
from dragboard.model.group import GroupController
from dragboard.model.item import Group, Item, PlaceholderItem
from dragboard.model.notifier import ChangeNotifier
from dragboard.model.outcome import (
    BoardError,
    DisposedError,
    DuplicateGroupError,
    DuplicateItemError,
    GroupNotFoundError,
    InvalidIndexError,
    Outcome,
    PlaceholderError,
)

__all__ = [
    "BoardController",
    "BoardError",
    "ChangeNotifier",
    "DisposedError",
    "DuplicateGroupError",
    "DuplicateItemError",
    "Group",
    "GroupController",
    "GroupNotFoundError",
    "InvalidIndexError",
    "Item",
    "Outcome",
    "PlaceholderCoordinator",
    "PlaceholderError",
    "PlaceholderItem",
    "ReorderDataSource",
]
