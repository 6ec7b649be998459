"""Main Textual application for cellnav."""

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header

from .actions import CellActionsMixin, NavigationActionsMixin
from .config import Config
from .history import History
from .notebook import Notebook
from .widgets import HistoryBar


class CellNavApp(NavigationActionsMixin, CellActionsMixin, App):
    """cellnav - Notebook editor with back navigation between cells."""

    TITLE = "cellnav"
    SUB_TITLE = "Notebook Editor"

    CSS = """
    #cells {
        height: 1fr;
        padding: 0 1;
    }
    """

    # Priority bindings so the focused text area does not consume them
    BINDINGS = [
        Binding("ctrl+o", "go_back", "Back", priority=True),
        Binding("ctrl+n", "new_cell", "New", priority=True),
        Binding("ctrl+k", "new_code_cell", "New Code", priority=True),
        Binding("ctrl+d", "delete_cell", "Delete", priority=True),
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+r", "reload", "Reload", priority=True),
        Binding("f1", "help", "Help"),
    ]

    def __init__(self, config: Config, notebook_path: Path | None = None) -> None:
        super().__init__()
        self.config = config
        self.notebook_path = notebook_path or config.notebook
        self.notebook = Notebook()
        self.history = History(capacity=config.history.capacity)
        self.dirty = False
        self._reload_armed = False

    def compose(self) -> ComposeResult:
        yield Header()
        yield VerticalScroll(id="cells")
        yield HistoryBar(id="history-bar")
        yield Footer()

    async def on_mount(self) -> None:
        """Load the notebook and focus the first cell."""
        self.sub_title = str(self.notebook_path)
        await self._load_notebook()

    def _refresh_status(self) -> None:
        """Update the status line from the history."""
        bar = self.query_one("#history-bar", HistoryBar)
        bar.refresh_from(self.history, len(self.notebook))


def run_app(config: Config, notebook_path: Path | None = None) -> None:
    """Run the cellnav application."""
    app = CellNavApp(config, notebook_path)
    app.run()
