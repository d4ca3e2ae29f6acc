"""Interfaces a drag layer depends on while a drag is in flight.

A drag layer only needs these protocols, never the concrete board. The
board moves a single placeholder between groups as the pointer travels
and commits the move when the drag ends.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from dragboard.model.group import GroupController
    from dragboard.model.item import Group, Item, PlaceholderItem
    from dragboard.model.outcome import Outcome


@runtime_checkable
class ReorderDataSource(Protocol):
    """Read side: the ordered groups and their controllers."""

    @property
    def identifier(self) -> str: ...

    @property
    def items(self) -> Sequence[Group]: ...

    def controller(self, group_id: str) -> GroupController | None: ...


@runtime_checkable
class PlaceholderCoordinator(Protocol):
    """Write side: placeholder bookkeeping and the cross-group commit."""

    def insert_placeholder(self, group_id: str, index: int, item: PlaceholderItem | None = None) -> Outcome:
        """Insert a placeholder at index in the group the pointer entered."""
        ...

    def remove_placeholder(self, group_id: str) -> bool:
        """Remove the group's placeholder. Returns whether one was removed."""
        ...

    def update_placeholder(self, group_id: str, new_index: int) -> Outcome:
        """Move the group's placeholder to new_index as one change."""
        ...

    def move_group_item_to_another_group(
        self,
        from_group_id: str,
        from_index: int,
        to_group_id: str,
        to_index: int,
    ) -> Outcome:
        """Commit: turn the placeholder at to_index into the dragged item."""
        ...

    def start_dragging_card(self, group_id: str, index: int) -> None: ...

    def move_group_item(self, group_id: str, from_index: int, to_index: int) -> Outcome: ...

    def move_group(self, from_index: int, to_index: int, notify: bool = True) -> None: ...
