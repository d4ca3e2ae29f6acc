"""Group (column) widget for the dragboard UI."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from dragboard.model.group import GroupController
from dragboard.model.item import Item

PLACEHOLDER_LINE = "┄┄┄┄┄┄┄┄┄┄┄┄┄┄"


def card_label(item: Item) -> str:
    """One-line label: the id, plus the payload title when there is one."""
    payload = item.payload
    if isinstance(payload, dict) and payload.get("title"):
        return f"{item.id}  {payload['title']}"
    return item.id


class GroupWidget(Static):
    """A single column, re-rendered whenever its controller notifies."""

    DEFAULT_CSS = """
    GroupWidget {
        width: 1fr;
        min-width: 25;
        max-width: 30;
        height: 100%;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    GroupWidget.-locked {
        color: $text-muted;
    }
    """

    def __init__(self, controller: GroupController):
        super().__init__()
        self.controller = controller
        self.selected: int | None = None
        self.dragging: int | None = None
        self.lines: list[str] = []
        self._unwatch = None

    def on_mount(self) -> None:
        self._unwatch = self.controller.watch(self._on_group_changed)
        self.refresh_lines()

    def on_unmount(self) -> None:
        if self._unwatch is not None:
            self._unwatch()
            self._unwatch = None

    def _on_group_changed(self, controller: GroupController) -> None:
        self.refresh_lines()

    def build_lines(self) -> list[str]:
        return [PLACEHOLDER_LINE if item.is_placeholder else card_label(item) for item in self.controller.items]

    def refresh_lines(self) -> None:
        """Rebuild the text from the controller's current snapshot."""
        self.lines = self.build_lines()
        self.set_class(not self.controller.is_draggable, "-locked")

        text = Text()
        text.append(self.controller.group.title, style="bold")
        text.append("\n")
        for i, line in enumerate(self.lines):
            styles = []
            if i == self.dragging:
                styles.append("dim")
            if i == self.selected:
                styles.append("reverse")
            text.append(line, style=" ".join(styles))
            text.append("\n")
        self.update(text)
