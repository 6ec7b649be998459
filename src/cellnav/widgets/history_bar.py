"""Status line showing the navigation history position."""

from textual.widgets import Static

from ..history import History


class HistoryBar(Static):
    """One-line summary of the back navigation history."""

    DEFAULT_CSS = """
    HistoryBar {
        height: 1;
        background: $primary-background;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def refresh_from(self, history: History, cell_count: int) -> None:
        """Update the status text from the current history state."""
        self.update(format_status(history, cell_count))


def format_status(history: History, cell_count: int) -> str:
    """Build the status text, e.g. "3 cells | history 2/5 | back: ctrl+o"."""
    cells = f"{cell_count} cell" + ("" if cell_count == 1 else "s")
    if history.cursor is None:
        return f"{cells} | history empty"
    position = f"history {history.cursor + 1}/{len(history)}"
    back = "back: ctrl+o" if history.can_go_back() else "back: -"
    return f"{cells} | {position} | {back}"
