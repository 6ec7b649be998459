"""Text area widget bound to a single notebook cell."""

from textual import events
from textual.message import Message
from textual.widgets import TextArea

from ..notebook import Cell


class CellEditor(TextArea):
    """Editor for one cell that reports where the user is working."""

    class CellFocused(Message):
        """Message emitted when focus lands on a line of this cell."""

        def __init__(self, cell_id: str, line: int) -> None:
            super().__init__()
            self.cell_id = cell_id
            self.line = line

    class SourceChanged(Message):
        """Message emitted when the cell text is edited."""

        def __init__(self, cell_id: str, source: str) -> None:
            super().__init__()
            self.cell_id = cell_id
            self.source = source

    DEFAULT_CSS = """
    CellEditor {
        height: auto;
        min-height: 3;
        max-height: 20;
        border: round $panel;
        margin: 0 0 1 0;
    }

    CellEditor:focus {
        border: round $accent;
    }

    CellEditor.code {
        background: $boost;
    }
    """

    def __init__(self, cell: Cell) -> None:
        super().__init__(cell.source, id=f"editor-{cell.id}", classes=cell.kind)
        self.cell_id = cell.id
        if cell.kind == "code":
            self.border_title = cell.language or "code"
        self._last_row: int | None = None

    @property
    def current_line(self) -> int:
        return self.cursor_location[0]

    def jump_to(self, line: int) -> None:
        """Move the cursor to line (clamped to the document) and focus."""
        last_line = max(0, self.document.line_count - 1)
        row = min(max(0, line), last_line)
        self.move_cursor((row, 0))
        self._last_row = row
        self.focus()

    def on_focus(self, event: events.Focus) -> None:
        # Focus may already have moved on by the time the event is handled
        if self.app.focused is not self:
            return
        self._last_row = self.current_line
        self.post_message(self.CellFocused(self.cell_id, self.current_line))

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        if self.app.focused is not self:
            return
        row = self.current_line
        if row != self._last_row:
            self._last_row = row
            self.post_message(self.CellFocused(self.cell_id, row))

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self.post_message(self.SourceChanged(self.cell_id, self.text))
