"""Shared test helpers for model tests."""

import pytest

from dragboard.model.board import BoardController
from dragboard.model.item import Group, Item


def _make_group(group_id, item_ids=(), name=""):
    """Helper to build a Group with bare items."""
    return Group(id=group_id, name=name, items=[Item(id=str(i)) for i in item_ids])


def _make_board(groups, **callbacks):
    """Helper to build a board from (group_id, item_ids) pairs."""
    board = BoardController(**callbacks)
    board.set_groups([_make_group(group_id, ids) for group_id, ids in groups])
    return board


def _watch_count(notifier):
    """Watch a notifier and return the list its notifications append to."""
    events = []
    notifier.watch(lambda n: events.append(n))
    return events


@pytest.fixture
def calls():
    """Record every board callback as (name, args)."""
    return []


@pytest.fixture
def board(calls):
    """Board with A:[1,2,3], B:[4,5] and every callback recorded."""

    def record(name):
        return lambda *args: calls.append((name, args))

    return _make_board(
        [("A", [1, 2, 3]), ("B", [4, 5])],
        on_move_group=record("move_group"),
        on_move_group_item=record("move_group_item"),
        on_move_group_item_to_group=record("move_group_item_to_group"),
        on_start_dragging_card=record("start_dragging_card"),
    )
