"""Board controller: ordered groups, their controllers and cross-group moves."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable

from dragboard.model.group import GroupController, unique_items
from dragboard.model.item import Group, Item, PlaceholderItem
from dragboard.model.notifier import ChangeNotifier
from dragboard.model.outcome import (
    BoardError,
    DuplicateGroupError,
    GroupNotFoundError,
    InvalidIndexError,
    Outcome,
    PlaceholderError,
)

logger = logging.getLogger(__name__)

OnMoveGroup = Callable[[str, int, str, int], None]
OnMoveGroupItem = Callable[[str, int, int], None]
OnMoveGroupItemToGroup = Callable[[str, int, str, int], None]
OnStartDraggingCard = Callable[[str, int], None]


class BoardController(ChangeNotifier):
    """Authoritative ordered model of a board's groups and items.

    Owns the group sequence and one GroupController per group. Group-level
    changes notify this controller's listeners; item-level changes notify
    the affected group's listeners.

    Callbacks fire synchronously when a move commits:

    - ``on_move_group(from_group_id, from_index, to_group_id, to_index)``
    - ``on_move_group_item(group_id, from_index, to_index)``
    - ``on_move_group_item_to_group(from_group_id, from_index, to_group_id, to_index)``
    - ``on_start_dragging_card(group_id, index)``

    Implements both the ReorderDataSource and PlaceholderCoordinator protocols.
    """

    def __init__(
        self,
        *,
        on_move_group: OnMoveGroup | None = None,
        on_move_group_item: OnMoveGroupItem | None = None,
        on_move_group_item_to_group: OnMoveGroupItemToGroup | None = None,
        on_start_dragging_card: OnStartDraggingCard | None = None,
    ) -> None:
        super().__init__()
        self.on_move_group = on_move_group
        self.on_move_group_item = on_move_group_item
        self.on_move_group_item_to_group = on_move_group_item_to_group
        self.on_start_dragging_card = on_start_dragging_card
        self._groups: list[Group] = []
        self._controllers: dict[str, GroupController] = {}

    # -- Read accessors --

    @property
    def groups(self) -> tuple[Group, ...]:
        return tuple(self._groups)

    @property
    def group_ids(self) -> list[str]:
        return [group.id for group in self._groups]

    @property
    def identifier(self) -> str:
        return type(self).__name__

    @property
    def items(self) -> tuple[Group, ...]:
        """The groups, as reorderable items for a drag layer."""
        return self.groups

    @property
    def placeholder_count(self) -> int:
        return sum(1 for c in self._controllers.values() for item in c.group.items if item.is_placeholder)

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, group_id: str) -> bool:
        return group_id in self._controllers

    def controller(self, group_id: str) -> GroupController | None:
        return self._controllers.get(group_id)

    def get_group_controller(self, group_id: str) -> GroupController | None:
        """Return the group's controller, logging a warning if it is missing."""
        controller = self._controllers.get(group_id)
        if controller is None:
            logger.warning("group %r has no controller", group_id)
        return controller

    def _require(self, group_id: str) -> GroupController:
        controller = self._controllers.get(group_id)
        if controller is None:
            raise GroupNotFoundError(group_id)
        return controller

    def snapshot(self) -> dict[str, list[str | None]]:
        """Ordered mapping of group id to item ids. Placeholders show as None."""
        return {
            group.id: [None if item.is_placeholder else item.id for item in group.items]
            for group in self._groups
        }

    def _changed(self, notify: bool) -> None:
        if notify:
            self.notify_listeners()

    # -- Group operations --

    def _attach(self, index: int, group: Group) -> None:
        group = replace(group, items=unique_items(group.items, group.id))
        self._groups.insert(index, group)
        self._controllers[group.id] = GroupController(group)

    def _detach(self, group_id: str) -> None:
        self._groups = [g for g in self._groups if g.id != group_id]
        self._controllers.pop(group_id).dispose()

    def add_group(self, group: Group, notify: bool = True) -> Outcome:
        """Append a group. A group whose id is already present is ignored."""
        return self.insert_group(len(self._groups), group, notify=notify)

    def insert_group(self, index: int, group: Group, notify: bool = True) -> Outcome:
        """Insert a group at index, where 0 <= index <= len."""
        self._check_alive()
        if group.id in self._controllers:
            return Outcome.UNCHANGED
        if not 0 <= index <= len(self._groups):
            raise InvalidIndexError(index, len(self._groups), inclusive=True)
        self._attach(index, group)
        self._changed(notify)
        return Outcome.OK

    def add_groups(self, groups: Iterable[Group], notify: bool = True) -> Outcome:
        self._check_alive()
        groups = list(groups)
        for group in groups:
            unique_items(group.items, group.id)
        added = [self.add_group(group, notify=False) for group in groups]
        if not any(added):
            return Outcome.UNCHANGED
        self._changed(notify)
        return Outcome.OK

    def remove_group(self, group_id: str, notify: bool = True) -> Outcome:
        """Remove a group and dispose its controller."""
        self._check_alive()
        if group_id not in self._controllers:
            logger.warning("cannot remove group %r: it does not exist", group_id)
            return Outcome.NOT_FOUND
        self._detach(group_id)
        self._changed(notify)
        return Outcome.OK

    def remove_groups(self, group_ids: Iterable[str], notify: bool = True) -> Outcome:
        self._check_alive()
        removed = [self.remove_group(group_id, notify=False) for group_id in group_ids]
        if not any(removed):
            return Outcome.UNCHANGED
        self._changed(notify)
        return Outcome.OK

    def clear(self, notify: bool = True) -> None:
        """Remove every group, disposing all group controllers."""
        self._check_alive()
        had_groups = bool(self._groups)
        for controller in self._controllers.values():
            controller.dispose()
        self._controllers.clear()
        self._groups.clear()
        if had_groups:
            self._changed(notify)

    def set_groups(self, groups: Iterable[Group], notify: bool = True) -> Outcome:
        """Reconcile the whole board against groups.

        Groups absent from the new list are removed, new ones appended and
        existing ones reconciled item by item; then the board is reordered
        to match. Notifies once, and only if something changed.
        """
        self._check_alive()
        incoming = list(groups)
        new_ids = [group.id for group in incoming]
        if len(set(new_ids)) != len(new_ids):
            raise DuplicateGroupError(f"duplicate group ids in {new_ids}")
        for group in incoming:
            unique_items(group.items, group.id)

        changed = len(self._groups) != len(incoming)

        wanted = set(new_ids)
        for group_id in [g.id for g in self._groups if g.id not in wanted]:
            self._detach(group_id)
            changed = True

        for group in incoming:
            controller = self._controllers.get(group.id)
            if controller is None:
                self._attach(len(self._groups), group)
                changed = True
                continue
            if controller.group.name != group.name:
                controller.group.name = group.name
                changed = True
            if controller.replace_or_insert_all(group.items):
                changed = True

        if self.group_ids != new_ids:
            position = {group_id: i for i, group_id in enumerate(new_ids)}
            self._groups.sort(key=lambda g: position[g.id])
            self._controllers = {g.id: self._controllers[g.id] for g in self._groups}
            changed = True

        if not changed:
            return Outcome.UNCHANGED
        self._changed(notify)
        return Outcome.OK

    def move_group(self, from_index: int, to_index: int, notify: bool = True) -> None:
        """Move the group at from_index to to_index."""
        self._check_alive()
        for index in (from_index, to_index):
            if not 0 <= index < len(self._groups):
                raise InvalidIndexError(index, len(self._groups))
        to_group = self._groups[to_index]
        from_group = self._groups.pop(from_index)
        self._groups.insert(to_index, from_group)
        if self.on_move_group:
            self.on_move_group(from_group.id, from_index, to_group.id, to_index)
        self._changed(notify)

    def enable_group_dragging(self, enabled: bool) -> None:
        for controller in self._controllers.values():
            controller.enable_dragging(enabled)

    # -- Item pass-throughs --

    def add_group_item(self, group_id: str, item: Item, notify: bool = True) -> Outcome:
        controller = self.get_group_controller(group_id)
        if controller is None:
            return Outcome.NOT_FOUND
        controller.add(item, notify=notify)
        return Outcome.OK

    def insert_group_item(self, group_id: str, index: int, item: Item, notify: bool = True) -> Outcome:
        controller = self.get_group_controller(group_id)
        if controller is None:
            return Outcome.NOT_FOUND
        controller.insert(index, item, notify=notify)
        return Outcome.OK

    def remove_group_item(self, group_id: str, item_id: str, notify: bool = True) -> Outcome:
        controller = self.get_group_controller(group_id)
        if controller is None:
            return Outcome.NOT_FOUND
        removed = controller.remove_where(lambda item: not item.is_placeholder and item.id == item_id, notify=notify)
        if removed is None:
            logger.warning("cannot remove item %r: not in group %r", item_id, group_id)
            return Outcome.NOT_FOUND
        return Outcome.OK

    def update_group_item(self, group_id: str, item: Item, notify: bool = True) -> Outcome:
        """Replace the item with the same id in place, or append it."""
        controller = self.get_group_controller(group_id)
        if controller is None:
            return Outcome.NOT_FOUND
        if controller.replace_or_insert_item(item, notify=notify):
            return Outcome.OK
        return Outcome.UNCHANGED

    def move_group_item(self, group_id: str, from_index: int, to_index: int, notify: bool = True) -> Outcome:
        """Move an item within its group, firing on_move_group_item on success."""
        controller = self.get_group_controller(group_id)
        if controller is None:
            return Outcome.NOT_FOUND
        if not controller.move(from_index, to_index, notify=notify):
            logger.warning("cannot move item in group %r from %d to %d", group_id, from_index, to_index)
            return Outcome.INVALID
        if self.on_move_group_item:
            self.on_move_group_item(group_id, from_index, to_index)
        return Outcome.OK

    def start_dragging_card(self, group_id: str, index: int) -> None:
        if self.on_start_dragging_card:
            self.on_start_dragging_card(group_id, index)

    # -- Placeholder coordination --

    def move_group_item_to_another_group(
        self,
        from_group_id: str,
        from_index: int,
        to_group_id: str,
        to_index: int,
    ) -> Outcome:
        """Commit a cross-group move onto the placeholder at to_index.

        Both groups must exist and the destination slot must hold the
        placeholder; otherwise an error is raised and nothing changes.
        Returns NOT_FOUND if the source slot is already empty.
        """
        from_controller = self._require(from_group_id)
        to_controller = self._require(to_group_id)
        if from_controller is to_controller:
            raise BoardError("use move_group_item to move within a group")

        if not 0 <= from_index < len(from_controller):
            logger.debug("source slot %s:%d is empty, move dropped", from_group_id, from_index)
            return Outcome.NOT_FOUND
        item = from_controller.items[from_index]
        to_controller.check_replace(to_index, item)

        from_controller.remove_at(from_index)
        to_controller.replace(to_index, item)
        if self.on_move_group_item_to_group:
            self.on_move_group_item_to_group(from_group_id, from_index, to_group_id, to_index)
        return Outcome.OK

    def insert_placeholder(self, group_id: str, index: int, item: PlaceholderItem | None = None) -> Outcome:
        """Insert the board's single placeholder at index in the group."""
        controller = self.get_group_controller(group_id)
        if controller is None:
            return Outcome.NOT_FOUND
        if item is None:
            item = PlaceholderItem()
        if not item.is_placeholder:
            raise PlaceholderError(f"{item!r} is not a placeholder")
        if self.placeholder_count:
            raise PlaceholderError("a placeholder is already on the board")
        controller.insert(index, item)
        logger.debug("group %r: placeholder inserted at %d", group_id, index)
        return Outcome.OK

    def remove_placeholder(self, group_id: str) -> bool:
        controller = self.get_group_controller(group_id)
        if controller is None:
            return False
        index = controller.placeholder_index
        if index is None:
            return False
        controller.remove_at(index)
        logger.debug("group %r: placeholder removed, %d items left", group_id, len(controller))
        return True

    def update_placeholder(self, group_id: str, new_index: int) -> Outcome:
        """Move the group's placeholder to new_index with one notification."""
        controller = self.get_group_controller(group_id)
        if controller is None:
            return Outcome.NOT_FOUND
        index = controller.placeholder_index
        if index is None:
            return Outcome.UNCHANGED
        new_index = max(0, min(new_index, len(controller) - 1))
        if index == new_index:
            return Outcome.UNCHANGED
        logger.debug("group %r: placeholder %d -> %d", group_id, index, new_index)
        with controller.batch():
            item = controller.remove_at(index)
            controller.insert(new_index, item)
        return Outcome.OK

    def dispose(self) -> None:
        for controller in self._controllers.values():
            controller.dispose()
        self._controllers.clear()
        self._groups.clear()
        super().dispose()

    def __repr__(self) -> str:
        return f"<BoardController [{', '.join(self.group_ids)}]>"
