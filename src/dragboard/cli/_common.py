"""Shared helpers for CLI command handlers."""

import json
import sys

from dragboard.loader import LoaderError, load_board
from dragboard.model.board import BoardController


def load_board_or_die(path: str, json_mode: bool, **callbacks) -> BoardController:
    """Load a board description. Exit 1 with message if it can't be read."""
    try:
        return load_board(path, **callbacks)
    except (OSError, LoaderError) as e:
        error(str(e), json_mode)


def parse_position(text: str, json_mode: bool) -> tuple[str, int]:
    """Split a GROUP:INDEX argument. Exit 1 if malformed."""
    group_id, sep, index = text.rpartition(":")
    if not sep or not group_id:
        error(f"expected GROUP:INDEX, got '{text}'", json_mode)
    try:
        return group_id, int(index)
    except ValueError:
        error(f"index must be an integer in '{text}'", json_mode)


def build_group_summaries(board: BoardController) -> list[dict]:
    """Build group summary dicts from board."""
    return [
        {
            "id": group.id,
            "name": group.title,
            "items": [item.id for item in group.items],
            "draggable": group.draggable,
        }
        for group in board.groups
    ]


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
