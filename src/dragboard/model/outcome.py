"""Operation outcomes and the errors raised for caller bugs."""

from __future__ import annotations

from enum import Enum


class Outcome(Enum):
    """Result of a lookup-dependent board operation.

    Only ``OK`` is truthy, so callers can write ``if board.move_group_item(...)``.
    """

    OK = "ok"
    UNCHANGED = "unchanged"
    NOT_FOUND = "not_found"
    INVALID = "invalid"

    def __bool__(self) -> bool:
        return self is Outcome.OK


class BoardError(Exception):
    """Base class for misuse of the board model."""


class InvalidIndexError(BoardError, IndexError):
    """An index is outside the range an operation accepts."""

    def __init__(self, index: int, length: int, inclusive: bool = False) -> None:
        upper = length if inclusive else length - 1
        super().__init__(f"index {index} out of range [0, {upper}]")
        self.index = index
        self.length = length


class PlaceholderError(BoardError, ValueError):
    """A placeholder precondition was violated."""


class DuplicateItemError(BoardError, ValueError):
    """An item id is already present in the group."""


class GroupNotFoundError(BoardError, KeyError):
    """A group id required by the operation is not on the board."""

    def __str__(self) -> str:
        return f"group {self.args[0]!r} not found"


class DisposedError(BoardError, RuntimeError):
    """A disposed controller was used."""


class DuplicateGroupError(BoardError, ValueError):
    """A group id appears more than once in a board description."""
