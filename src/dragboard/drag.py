"""Drag lifecycle managers for board elements.

These translate start / update / finish / cancel events from whatever
detects the gesture into placeholder and commit calls on the board. They
only depend on the coordinator protocols.
"""

from __future__ import annotations

import logging
from typing import Protocol

from dragboard.model.coordinator import PlaceholderCoordinator, ReorderDataSource
from dragboard.model.item import PlaceholderItem
from dragboard.model.outcome import BoardError, Outcome

logger = logging.getLogger(__name__)


class Board(PlaceholderCoordinator, ReorderDataSource, Protocol):
    """What the drag managers need from a board."""


class CardDragManager:
    """Manages card drag-and-drop state and operations.

    While the pointer is over the source group the dragged card marks its
    own landing spot. Over any other group a placeholder is shown there.
    """

    def __init__(self, board: Board):
        self.board = board
        self.source_group_id: str | None = None
        self.source_index: int | None = None
        self.target_group_id: str | None = None
        self.target_index: int | None = None
        self._placeholder_group_id: str | None = None

    @property
    def active(self) -> bool:
        return self.source_group_id is not None

    def start(self, group_id: str, index: int) -> bool:
        """Pick up the card at index. Returns False if the drag cannot start."""
        if self.active:
            self.cancel()
        controller = self.board.controller(group_id)
        if controller is None or not controller.is_draggable:
            return False
        if not 0 <= index < len(controller) or controller.items[index].is_placeholder:
            return False

        self.source_group_id = group_id
        self.source_index = index
        self.target_group_id = group_id
        self.target_index = index
        self.board.start_dragging_card(group_id, index)
        return True

    def update_position(self, group_id: str, index: int) -> None:
        """Target index among the group's cards, not counting the dragged one."""
        if not self.active:
            return
        controller = self.board.controller(group_id)
        if controller is None or not controller.is_draggable:
            return

        if group_id == self.source_group_id:
            self._remove_placeholder()
            self.target_group_id = group_id
            self.target_index = max(0, min(index, len(controller) - 1))
            return

        if self._placeholder_group_id != group_id:
            self._remove_placeholder()
            index = max(0, min(index, len(controller)))
            if not self.board.insert_placeholder(group_id, index, PlaceholderItem()):
                return
            self._placeholder_group_id = group_id
        else:
            index = max(0, min(index, len(controller) - 1))
            self.board.update_placeholder(group_id, index)

        self.target_group_id = group_id
        self.target_index = index

    def _remove_placeholder(self) -> None:
        if self._placeholder_group_id is not None:
            self.board.remove_placeholder(self._placeholder_group_id)
            self._placeholder_group_id = None

    def finish(self) -> Outcome:
        """Drop the card where it was last targeted."""
        if not self.active or self.target_group_id is None:
            self.cancel()
            return Outcome.UNCHANGED

        source_group_id, source_index = self.source_group_id, self.source_index
        target_group_id = self.target_group_id
        if target_group_id == source_group_id:
            target_index = self.target_index
            self._cleanup()
            if target_index == source_index:
                return Outcome.UNCHANGED
            return self.board.move_group_item(source_group_id, source_index, target_index)

        controller = self.board.controller(target_group_id)
        slot = controller.placeholder_index if controller is not None else None
        if slot is None or self.board.controller(source_group_id) is None:
            logger.warning("drag from %r to %r lost its group or placeholder, cancelled", source_group_id, target_group_id)
            self.cancel()
            return Outcome.NOT_FOUND
        try:
            return self.board.move_group_item_to_another_group(source_group_id, source_index, target_group_id, slot)
        except BoardError:
            self._remove_placeholder()
            raise
        finally:
            self._cleanup()

    def cancel(self) -> None:
        if not self.active:
            return
        self._remove_placeholder()
        self._cleanup()

    def _cleanup(self) -> None:
        self.source_group_id = None
        self.source_index = None
        self.target_group_id = None
        self.target_index = None
        self._placeholder_group_id = None


class GroupDragManager:
    """Manages group (column) drag-and-drop state and operations."""

    def __init__(self, board: Board):
        self.board = board
        self.source_index: int | None = None
        self.target_index: int | None = None

    @property
    def active(self) -> bool:
        return self.source_index is not None

    def start(self, index: int) -> bool:
        if not 0 <= index < len(self.board.items):
            return False
        self.source_index = index
        self.target_index = index
        return True

    def update_position(self, index: int) -> None:
        if not self.active:
            return
        self.target_index = max(0, min(index, len(self.board.items) - 1))

    def finish(self) -> Outcome:
        if not self.active:
            return Outcome.UNCHANGED
        source_index, target_index = self.source_index, self.target_index
        self._cleanup()
        if source_index == target_index:
            return Outcome.UNCHANGED
        self.board.move_group(source_index, target_index)
        return Outcome.OK

    def cancel(self) -> None:
        self._cleanup()

    def _cleanup(self) -> None:
        self.source_index = None
        self.target_index = None
