"""Textual UI for dragboard."""

from dragboard.ui.app import DragboardApp
from dragboard.ui.board import BoardScreen
from dragboard.ui.column import GroupWidget

__all__ = [
    "BoardScreen",
    "DragboardApp",
    "GroupWidget",
]
