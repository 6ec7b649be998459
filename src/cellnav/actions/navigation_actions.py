"""Navigation action handlers for CellNavApp."""

from __future__ import annotations

import logging

from textual.css.query import NoMatches

from ..history import Entry
from ..widgets import CellEditor

logger = logging.getLogger(__name__)


class NavigationActionsMixin:
    """Mixin providing history recording and back navigation."""

    def _get_editor(self, cell_id: str) -> CellEditor | None:
        """Get the editor widget for a cell id."""
        try:
            return self.query_one(f"#editor-{cell_id}", CellEditor)
        except NoMatches:
            return None

    def _focused_cell_id(self) -> str | None:
        """Get the id of the cell whose editor has focus."""
        focused = self.focused
        if isinstance(focused, CellEditor):
            return focused.cell_id
        return None

    def _jump_to_entry(self, entry: Entry) -> None:
        """Focus the cell and line an entry points at."""
        editor = self._get_editor(entry.cell_id)
        if editor is None:
            logger.warning("History entry for missing cell %s", entry.cell_id)
            self.notify(f"Cell {entry.cell_id} is no longer in the notebook", severity="warning")
            return
        editor.jump_to(entry.line)
        editor.scroll_visible()

    def on_cell_editor_cell_focused(self, event: CellEditor.CellFocused) -> None:
        """Record every focus change in the navigation history."""
        self.history.record(event.cell_id, event.line)
        self._refresh_status()

    def action_go_back(self) -> None:
        """Go back to the previously visited cell and line."""
        entry = self.history.go_back()
        if entry is None:
            self.notify("No earlier location", severity="warning")
            return
        logger.debug("Back to %s:%d", entry.cell_id, entry.line)
        self._jump_to_entry(entry)
        self._refresh_status()

    def action_help(self) -> None:
        """Show help information."""
        self.notify(
            "ctrl+o=Back, ctrl+n=New, ctrl+k=New code, ctrl+d=Delete, ctrl+s=Save, ctrl+r=Reload, ctrl+q=Quit",
            timeout=5,
        )
