"""Handler for 'dragboard view'."""

from dragboard.cli._common import load_board_or_die


def board_view(args) -> int:
    """Open the board in the terminal UI."""
    from dragboard.ui import DragboardApp

    board = load_board_or_die(args.file, False)
    DragboardApp(board).run()
    return 0
