"""CLI argument parser and dispatch for dragboard."""

import argparse

from dragboard.cli.board import board_move, board_summary
from dragboard.cli.view import board_view


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Log board bookkeeping to stderr")

    parser = argparse.ArgumentParser(
        prog="dragboard",
        description="Drag-and-drop kanban board model",
        parents=[common],
    )

    commands = parser.add_subparsers(dest="command")

    summary_p = commands.add_parser("summary", help="Show groups and items", parents=[common])
    summary_p.add_argument("file", help="Board description (YAML)")
    summary_p.set_defaults(func=board_summary)

    move_p = commands.add_parser("move", help="Replay dragging one item", parents=[common])
    move_p.add_argument("file", help="Board description (YAML)")
    move_p.add_argument("--from", dest="source", required=True, metavar="GROUP:INDEX", help="Item to pick up")
    move_p.add_argument("--to", dest="target", required=True, metavar="GROUP:INDEX", help="Where to drop it")
    move_p.set_defaults(func=board_move)

    view_p = commands.add_parser("view", help="Open the board in the terminal UI", parents=[common])
    view_p.add_argument("file", help="Board description (YAML)")
    view_p.set_defaults(func=board_view)

    return parser
