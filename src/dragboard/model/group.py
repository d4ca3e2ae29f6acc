"""Controller owning one group's ordered items."""

from __future__ import annotations

from typing import Callable, Iterable

from dragboard.model.item import Group, Item
from dragboard.model.notifier import ChangeNotifier
from dragboard.model.outcome import DuplicateItemError, InvalidIndexError, PlaceholderError


def unique_items(items: Iterable[Item], group_id: str) -> list[Item]:
    """Regular items from items, in order. Raises on a repeated id."""
    result: list[Item] = []
    seen: set[str] = set()
    for item in items:
        if item.is_placeholder:
            continue
        if item.id in seen:
            raise DuplicateItemError(f"item {item.id!r} listed twice for group {group_id!r}")
        seen.add(item.id)
        result.append(item)
    return result


class GroupController(ChangeNotifier):
    """Sole mutator of a group's item order.

    Every successful mutation notifies listeners unless ``notify=False``
    is passed, so callers can batch several steps and notify once.
    At most one placeholder may be in the group at a time.
    """

    def __init__(self, group: Group) -> None:
        super().__init__()
        self.group = group
        self._is_draggable = group.draggable

    @property
    def id(self) -> str:
        return self.group.id

    @property
    def items(self) -> tuple[Item, ...]:
        """Read-only snapshot of the current order."""
        return tuple(self.group.items)

    @property
    def is_draggable(self) -> bool:
        return self._is_draggable

    @property
    def placeholder_index(self) -> int | None:
        for i, item in enumerate(self.group.items):
            if item.is_placeholder:
                return i
        return None

    def __len__(self) -> int:
        return len(self.group.items)

    def index_of(self, item_id: str) -> int | None:
        """Index of the regular item with item_id, or None."""
        for i, item in enumerate(self.group.items):
            if not item.is_placeholder and item.id == item_id:
                return i
        return None

    def _changed(self, notify: bool) -> None:
        if notify:
            self.notify_listeners()

    def move(self, from_index: int, to_index: int, notify: bool = True) -> bool:
        """Move the item at from_index to to_index.

        Returns False if either index is out of range. Moving an item onto
        itself succeeds without notifying.
        """
        self._check_alive()
        items = self.group.items
        if not (0 <= from_index < len(items) and 0 <= to_index < len(items)):
            return False
        if from_index == to_index:
            return True
        items.insert(to_index, items.pop(from_index))
        self._changed(notify)
        return True

    def add(self, item: Item, notify: bool = True) -> None:
        self.insert(len(self.group.items), item, notify=notify)

    def insert(self, index: int, item: Item, notify: bool = True) -> None:
        """Insert item at index, where 0 <= index <= len."""
        self._check_alive()
        items = self.group.items
        if not 0 <= index <= len(items):
            raise InvalidIndexError(index, len(items), inclusive=True)
        if item.is_placeholder and self.placeholder_index is not None:
            raise PlaceholderError(f"group {self.id!r} already holds a placeholder")
        if not item.is_placeholder and self.index_of(item.id) is not None:
            raise DuplicateItemError(f"item {item.id!r} already in group {self.id!r}")
        items.insert(index, item)
        self._changed(notify)

    def remove_at(self, index: int, notify: bool = True) -> Item | None:
        """Remove and return the item at index, or None if index is invalid."""
        self._check_alive()
        items = self.group.items
        if not 0 <= index < len(items):
            return None
        item = items.pop(index)
        self._changed(notify)
        return item

    def remove_where(self, predicate: Callable[[Item], bool], notify: bool = True) -> Item | None:
        """Remove the first item matching predicate. Returns it, or None."""
        self._check_alive()
        for i, item in enumerate(self.group.items):
            if predicate(item):
                return self.remove_at(i, notify=notify)
        return None

    def check_replace(self, index: int, item: Item) -> None:
        """Raise unless replace(index, item) would succeed."""
        items = self.group.items
        if not 0 <= index < len(items):
            raise InvalidIndexError(index, len(items))
        if not items[index].is_placeholder:
            raise PlaceholderError(f"slot {index} of group {self.id!r} does not hold a placeholder")
        if item.is_placeholder:
            raise PlaceholderError("cannot replace a placeholder with another placeholder")
        if self.index_of(item.id) is not None:
            raise DuplicateItemError(f"item {item.id!r} already in group {self.id!r}")

    def replace(self, index: int, item: Item, notify: bool = True) -> None:
        """Turn the placeholder at index into item."""
        self._check_alive()
        self.check_replace(index, item)
        self.group.items[index] = item
        self._changed(notify)

    def replace_or_insert_item(self, item: Item, notify: bool = True) -> bool:
        """Replace the item with the same id in place, or append it.

        Returns True if the group's content changed.
        """
        self._check_alive()
        index = self.index_of(item.id)
        if index is None:
            self.add(item, notify=notify)
            return True
        if self.group.items[index] == item:
            return False
        self.group.items[index] = item
        self._changed(notify)
        return True

    def replace_or_insert_all(self, items: Iterable[Item], notify: bool = True) -> bool:
        """Reconcile the group against a fresh item list.

        Items whose id is absent from the incoming list are dropped, items
        whose content changed are replaced in place, unchanged items keep
        their identity and new items are appended in incoming order. A live
        placeholder is left where it is. Returns True if anything changed.
        """
        self._check_alive()
        incoming = {item.id: item for item in unique_items(items, self.id)}

        current = self.group.items
        result: list[Item] = []
        seen: set[str] = set()
        for old in current:
            if old.is_placeholder:
                result.append(old)
                continue
            new = incoming.get(old.id)
            if new is None:
                continue
            seen.add(old.id)
            result.append(old if old == new else new)
        result.extend(item for item_id, item in incoming.items() if item_id not in seen)

        if len(result) == len(current) and all(a is b for a, b in zip(result, current)):
            return False
        current[:] = result
        self._changed(notify)
        return True

    def enable_dragging(self, enabled: bool, notify: bool = True) -> None:
        """Toggle whether the drag layer may pick up this group's items."""
        self._check_alive()
        if self._is_draggable == enabled:
            return
        self._is_draggable = enabled
        self.group.draggable = enabled
        self._changed(notify)

    def __repr__(self) -> str:
        ids = ", ".join("<placeholder>" if i.is_placeholder else i.id for i in self.group.items)
        return f"<GroupController({self.id}) [{ids}]>"
