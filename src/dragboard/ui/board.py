"""Board screen showing groups and their cards."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer

from dragboard.drag import CardDragManager, GroupDragManager
from dragboard.model.board import BoardController
from dragboard.ui.column import GroupWidget


class BoardScreen(Screen):
    """Main board screen. Cards are dragged with the keyboard."""

    BINDINGS = [
        Binding("left", "cursor(-1, 0)", "Left", show=False),
        Binding("right", "cursor(1, 0)", "Right", show=False),
        Binding("up", "cursor(0, -1)", "Up", show=False),
        Binding("down", "cursor(0, 1)", "Down", show=False),
        Binding("space", "pick_up", "Pick up"),
        Binding("enter", "drop", "Drop"),
        Binding("escape", "cancel_drag", "Cancel drag", show=False),
        Binding("left_square_bracket", "move_group(-1)", "Group left"),
        Binding("right_square_bracket", "move_group(1)", "Group right"),
    ]

    def __init__(self, board: BoardController):
        super().__init__()
        self.board = board
        self.card_drag = CardDragManager(board)
        self.group_drag = GroupDragManager(board)
        self.group_index = 0
        self.card_index = 0
        self._unwatch = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="columns"):
            for group in self.board.groups:
                yield GroupWidget(self.board.controller(group.id))
        yield Footer()

    def on_mount(self) -> None:
        self._unwatch = self.board.watch(self._on_board_changed)
        self._refresh_cursor()

    def on_unmount(self) -> None:
        if self._unwatch is not None:
            self._unwatch()
            self._unwatch = None

    def _on_board_changed(self, board: BoardController) -> None:
        self.call_later(self._rebuild_columns)

    async def _rebuild_columns(self) -> None:
        """Remount one widget per group, in board order."""
        columns = self.query_one("#columns", Horizontal)
        await columns.remove_children()
        await columns.mount_all([GroupWidget(self.board.controller(g.id)) for g in self.board.groups])
        self.group_index = max(0, min(self.group_index, len(self.board) - 1))
        self._refresh_cursor()

    @property
    def current_group_id(self) -> str | None:
        ids = self.board.group_ids
        return ids[self.group_index] if ids else None

    def _highlight_index(self) -> int:
        if self.card_drag.active and self.card_drag.target_group_id != self.card_drag.source_group_id:
            controller = self.board.controller(self.card_drag.target_group_id)
            if controller is not None and controller.placeholder_index is not None:
                return controller.placeholder_index
        return self.card_index

    def _refresh_cursor(self) -> None:
        current = self.current_group_id
        for widget in self.query(GroupWidget):
            group_id = widget.controller.id
            widget.selected = self._highlight_index() if group_id == current else None
            if self.card_drag.active and group_id == self.card_drag.source_group_id:
                widget.dragging = self.card_drag.source_index
            else:
                widget.dragging = None
            widget.refresh_lines()

    # -- Actions --

    def action_cursor(self, dx: int, dy: int) -> None:
        if not len(self.board):
            return
        self.group_index = max(0, min(self.group_index + dx, len(self.board) - 1))
        group_id = self.current_group_id
        self.card_index = max(0, self.card_index + dy)

        if self.card_drag.active:
            self.card_drag.update_position(group_id, self.card_index)
            # Locked groups don't take the drop; stay where the drag is.
            self.group_index = self.board.group_ids.index(self.card_drag.target_group_id)
            self.card_index = self.card_drag.target_index
        else:
            count = len(self.board.controller(group_id))
            self.card_index = min(self.card_index, max(count - 1, 0))
        self._refresh_cursor()

    def action_pick_up(self) -> None:
        group_id = self.current_group_id
        if self.card_drag.active or group_id is None:
            return
        if self.card_drag.start(group_id, self.card_index):
            self._refresh_cursor()

    def action_drop(self) -> None:
        if not self.card_drag.active:
            return
        target_group_id = self.card_drag.target_group_id
        landing = self._highlight_index()
        self.card_drag.finish()
        self.group_index = self.board.group_ids.index(target_group_id)
        self.card_index = landing
        self._refresh_cursor()

    def action_cancel_drag(self) -> None:
        if not self.card_drag.active:
            return
        source_group_id, source_index = self.card_drag.source_group_id, self.card_drag.source_index
        self.card_drag.cancel()
        self.group_index = self.board.group_ids.index(source_group_id)
        self.card_index = source_index
        self._refresh_cursor()

    def action_move_group(self, direction: int) -> None:
        if self.card_drag.active or not self.group_drag.start(self.group_index):
            return
        self.group_drag.update_position(self.group_index + direction)
        target = self.group_drag.target_index
        if self.group_drag.finish():
            self.group_index = target
