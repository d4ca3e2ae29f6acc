"""Board data entities: items (cards) and groups (columns)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

PLACEHOLDER_ID = "placeholder"


@dataclass
class Item:
    """A card on the board.

    The payload is opaque to the board and owned by the caller.
    """

    id: str
    payload: Any = None

    @property
    def is_placeholder(self) -> bool:
        return False


@dataclass
class PlaceholderItem(Item):
    """Marker for where a dragged card would land. Carries no payload."""

    id: str = PLACEHOLDER_ID
    payload: Any = field(default=None, init=False, repr=False)

    @property
    def is_placeholder(self) -> bool:
        return True


@dataclass
class Group:
    """A column: an id, a display name and its ordered items."""

    id: str
    name: str = ""
    items: list[Item] = field(default_factory=list)
    draggable: bool = True

    def __post_init__(self) -> None:
        self.items = list(self.items)

    @property
    def title(self) -> str:
        return self.name or self.id
