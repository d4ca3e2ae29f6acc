"""Main Textual application for dragboard."""

from textual.app import App

from dragboard.model.board import BoardController
from dragboard.ui.board import BoardScreen


class DragboardApp(App):
    """Terminal viewer for a board, with keyboard drag and drop."""

    CSS = """
    #columns {
        height: 1fr;
    }
    """

    TITLE = "dragboard"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, board: BoardController):
        super().__init__()
        self.board = board

    def on_mount(self) -> None:
        self.push_screen(BoardScreen(self.board))
