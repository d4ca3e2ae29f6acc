"""Fixtures for UI tests."""

import pytest

from dragboard.model.board import BoardController
from dragboard.model.item import Group, Item


@pytest.fixture
def moves():
    """Cross-group and in-group moves committed by the UI."""
    return []


@pytest.fixture
def board(moves):
    """Board with A:[1,2,3], B:[4,5], C:[] recording committed moves."""
    board = BoardController(
        on_move_group_item=lambda *args: moves.append(("item", args)),
        on_move_group_item_to_group=lambda *args: moves.append(("to_group", args)),
        on_move_group=lambda *args: moves.append(("group", args)),
    )
    board.set_groups(
        [
            Group("A", name="Backlog", items=[Item("1", payload={"title": "First"}), Item("2"), Item("3")]),
            Group("B", name="Doing", items=[Item("4"), Item("5")]),
            Group("C", name="Done"),
        ]
    )
    return board
