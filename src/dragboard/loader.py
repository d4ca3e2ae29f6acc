"""Build board groups from a YAML description."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from dragboard.model.board import BoardController
from dragboard.model.item import Group, Item


class LoaderError(ValueError):
    """The board description is malformed."""


def _parse_item(raw: Any, group_id: str) -> Item:
    """An item is a bare id or a mapping with an ``id`` key; other keys form the payload."""
    if isinstance(raw, (str, int)):
        return Item(id=str(raw))
    if not isinstance(raw, dict) or "id" not in raw:
        raise LoaderError(f"group {group_id!r}: item must be an id or a mapping with 'id', got {raw!r}")
    payload = {k: v for k, v in raw.items() if k != "id"}
    return Item(id=str(raw["id"]), payload=payload or None)


def _parse_group(raw: Any) -> Group:
    if not isinstance(raw, dict) or "id" not in raw:
        raise LoaderError(f"group must be a mapping with 'id', got {raw!r}")
    group_id = str(raw["id"])
    raw_items = raw.get("items") or []
    if not isinstance(raw_items, list):
        raise LoaderError(f"group {group_id!r}: 'items' must be a list")
    items = [_parse_item(r, group_id) for r in raw_items]
    ids = [item.id for item in items]
    if len(set(ids)) != len(ids):
        raise LoaderError(f"group {group_id!r}: duplicate item ids")
    return Group(
        id=group_id,
        name=str(raw.get("name") or ""),
        items=items,
        draggable=bool(raw.get("draggable", True)),
    )


def parse_groups(text: str) -> list[Group]:
    """Parse a YAML document with a top-level ``groups`` list."""
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise LoaderError(f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise LoaderError("board description must be a mapping")
    raw_groups = data.get("groups") or []
    if not isinstance(raw_groups, list):
        raise LoaderError("'groups' must be a list")

    groups = [_parse_group(r) for r in raw_groups]
    ids = [g.id for g in groups]
    if len(set(ids)) != len(ids):
        raise LoaderError("duplicate group ids")
    return groups


def load_groups(path: str | Path) -> list[Group]:
    """Read and parse a board description file."""
    return parse_groups(Path(path).read_text())


def load_board(path: str | Path, **callbacks) -> BoardController:
    """Build a BoardController from a description file.

    Keyword arguments are passed through as BoardController callbacks.
    """
    board = BoardController(**callbacks)
    board.set_groups(load_groups(path))
    return board
