"""Tests for placeholder coordination and the cross-group commit."""

import logging

import pytest

from dragboard.model.coordinator import PlaceholderCoordinator, ReorderDataSource
from dragboard.model.item import Item, PlaceholderItem
from dragboard.model.outcome import (
    BoardError,
    DuplicateItemError,
    GroupNotFoundError,
    InvalidIndexError,
    Outcome,
    PlaceholderError,
)

from .conftest import _make_board, _watch_count


def test_board_implements_protocols(board):
    assert isinstance(board, PlaceholderCoordinator)
    assert isinstance(board, ReorderDataSource)


# --- insert / remove / update ---


def test_insert_placeholder(board):
    events = _watch_count(board.controller("B"))
    assert board.insert_placeholder("B", 0, PlaceholderItem()) is Outcome.OK
    assert board.snapshot()["B"] == [None, "4", "5"]
    assert board.placeholder_count == 1
    assert len(events) == 1


def test_insert_placeholder_default_item(board):
    board.insert_placeholder("A", 3)
    assert board.controller("A").placeholder_index == 3


def test_insert_placeholder_unknown_group(board, caplog):
    with caplog.at_level(logging.WARNING):
        assert board.insert_placeholder("Z", 0) is Outcome.NOT_FOUND
    assert board.placeholder_count == 0


def test_only_one_placeholder_on_board(board):
    board.insert_placeholder("A", 0)
    with pytest.raises(PlaceholderError):
        board.insert_placeholder("B", 0)
    assert board.placeholder_count == 1
    assert board.snapshot()["B"] == ["4", "5"]


def test_insert_placeholder_rejects_regular_item(board):
    with pytest.raises(PlaceholderError):
        board.insert_placeholder("A", 0, Item("x"))


def test_insert_placeholder_out_of_range(board):
    with pytest.raises(InvalidIndexError):
        board.insert_placeholder("B", 3)


def test_remove_placeholder(board):
    board.insert_placeholder("B", 1)
    assert board.remove_placeholder("B") is True
    assert board.snapshot()["B"] == ["4", "5"]
    assert board.placeholder_count == 0


def test_remove_placeholder_when_absent(board):
    events = _watch_count(board.controller("B"))
    assert board.remove_placeholder("B") is False
    assert events == []


def test_remove_placeholder_unknown_group(board):
    assert board.remove_placeholder("Z") is False


def test_update_placeholder_notifies_once(board):
    board.insert_placeholder("A", 0)
    events = _watch_count(board.controller("A"))
    assert board.update_placeholder("A", 2) is Outcome.OK
    assert board.snapshot()["A"] == ["1", "2", None, "3"]
    assert len(events) == 1


def test_update_placeholder_same_index_is_noop(board):
    board.insert_placeholder("A", 1)
    events = _watch_count(board.controller("A"))
    assert board.update_placeholder("A", 1) is Outcome.UNCHANGED
    assert events == []


def test_update_placeholder_without_placeholder(board):
    assert board.update_placeholder("A", 1) is Outcome.UNCHANGED
    assert board.snapshot()["A"] == ["1", "2", "3"]


def test_update_placeholder_clamps_to_end(board):
    board.insert_placeholder("B", 0)
    board.update_placeholder("B", 10)
    assert board.snapshot()["B"] == ["4", "5", None]


def test_update_placeholder_unknown_group(board):
    assert board.update_placeholder("Z", 0) is Outcome.NOT_FOUND


def test_cancelled_drag_restores_board(board):
    before = board.snapshot()
    board.insert_placeholder("B", 0)
    board.update_placeholder("B", 2)
    board.remove_placeholder("B")
    assert board.snapshot() == before


# --- cross-group commit ---


def test_move_to_another_group(board, calls):
    board.insert_placeholder("B", 0, PlaceholderItem())
    assert board.snapshot()["B"] == [None, "4", "5"]
    assert board.move_group_item_to_another_group("A", 0, "B", 0) is Outcome.OK
    assert board.snapshot() == {"A": ["2", "3"], "B": ["1", "4", "5"]}
    assert calls == [("move_group_item_to_group", ("A", 0, "B", 0))]
    assert board.placeholder_count == 0


def test_move_to_another_group_keeps_item_object(board):
    item = board.controller("A").items[1]
    board.insert_placeholder("B", 2)
    board.move_group_item_to_another_group("A", 1, "B", 2)
    assert board.controller("B").items[2] is item


def test_move_to_another_group_notifies_both_groups(board):
    board.insert_placeholder("B", 1)
    source_events = _watch_count(board.controller("A"))
    target_events = _watch_count(board.controller("B"))
    board.move_group_item_to_another_group("A", 2, "B", 1)
    assert len(source_events) == 1
    assert len(target_events) == 1


def test_move_to_non_placeholder_slot_is_not_partial(board, calls):
    with pytest.raises(PlaceholderError):
        board.move_group_item_to_another_group("A", 0, "B", 0)
    assert board.snapshot() == {"A": ["1", "2", "3"], "B": ["4", "5"]}
    assert calls == []


def test_move_to_out_of_range_slot_is_not_partial(board):
    board.insert_placeholder("B", 0)
    with pytest.raises(InvalidIndexError):
        board.move_group_item_to_another_group("A", 0, "B", 5)
    assert board.snapshot() == {"A": ["1", "2", "3"], "B": [None, "4", "5"]}


def test_move_to_another_group_duplicate_id_is_not_partial():
    board = _make_board([("A", [1, 2]), ("B", [1])])
    board.insert_placeholder("B", 0)
    with pytest.raises(DuplicateItemError):
        board.move_group_item_to_another_group("A", 0, "B", 0)
    assert board.snapshot() == {"A": ["1", "2"], "B": [None, "1"]}


def test_move_from_empty_slot_aborts_silently(board, calls):
    board.insert_placeholder("B", 0)
    assert board.move_group_item_to_another_group("A", 7, "B", 0) is Outcome.NOT_FOUND
    assert board.snapshot() == {"A": ["1", "2", "3"], "B": [None, "4", "5"]}
    assert calls == []


def test_move_with_unknown_group_raises(board):
    with pytest.raises(GroupNotFoundError):
        board.move_group_item_to_another_group("A", 0, "Z", 0)
    with pytest.raises(KeyError):
        board.move_group_item_to_another_group("Z", 0, "A", 0)


def test_move_within_same_group_is_rejected(board):
    board.insert_placeholder("A", 0)
    with pytest.raises(BoardError):
        board.move_group_item_to_another_group("A", 1, "A", 0)


def test_moves_preserve_total_item_count(board):
    def total():
        return sum(len([i for i in ids if i is not None]) for ids in board.snapshot().values())

    start = total()
    board.move_group_item("A", 0, 2)
    assert total() == start
    board.move_group(0, 1)
    assert total() == start
    board.insert_placeholder("A", 1)
    board.move_group_item_to_another_group("B", 0, "A", 1)
    assert total() == start


def test_at_most_one_placeholder_across_a_drag(board):
    board.insert_placeholder("A", 0)
    assert board.placeholder_count == 1
    board.remove_placeholder("A")
    board.insert_placeholder("B", 1)
    assert board.placeholder_count == 1
    board.update_placeholder("B", 0)
    assert board.placeholder_count == 1
    board.move_group_item_to_another_group("A", 0, "B", 0)
    assert board.placeholder_count == 0


def test_placeholder_survives_group_reorder():
    board = _make_board([("A", [1]), ("B", [2])])
    board.insert_placeholder("B", 1)
    board.move_group(1, 0)
    assert board.snapshot() == {"B": ["2", None], "A": ["1"]}


def test_update_placeholder_already_last_is_noop(board):
    board.insert_placeholder("B", 2)
    events = _watch_count(board.controller("B"))
    assert board.update_placeholder("B", 9) is Outcome.UNCHANGED
    assert events == []


def test_placeholder_id_does_not_clash_with_real_item():
    board = _make_board([("A", [1]), ("B", ["placeholder"])])
    assert board.insert_placeholder("B", 0) is Outcome.OK
    assert board.snapshot()["B"] == [None, "placeholder"]
    assert board.controller("B").index_of("placeholder") == 1

    assert board.remove_group_item("B", "placeholder") is Outcome.OK
    assert board.snapshot()["B"] == [None]
    board.move_group_item_to_another_group("A", 0, "B", 0)
    assert board.snapshot() == {"A": [], "B": ["1"]}


def test_real_item_named_placeholder_can_be_dragged_in():
    board = _make_board([("A", ["placeholder"]), ("B", [2])])
    board.insert_placeholder("B", 1)
    assert board.move_group_item_to_another_group("A", 0, "B", 1) is Outcome.OK
    assert board.snapshot() == {"A": [], "B": ["2", "placeholder"]}
