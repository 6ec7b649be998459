"""Cell operation action handlers for CellNavApp."""

from __future__ import annotations

import logging

from textual.containers import VerticalScroll

from ..notebook import CellKind, Notebook, read_notebook
from ..widgets import CellEditor

logger = logging.getLogger(__name__)


class CellActionsMixin:
    """Mixin providing cell actions (new, delete, save, reload)."""

    async def _insert_cell(self, kind: CellKind) -> None:
        """Insert a cell after the focused one and focus it."""
        after = self._focused_cell_id()
        cell = self.notebook.insert_after(after, kind=kind)
        editor = CellEditor(cell)
        cells_view = self.query_one("#cells", VerticalScroll)
        anchor = self._get_editor(after) if after is not None else None
        if anchor is not None:
            await cells_view.mount(editor, after=anchor)
        else:
            await cells_view.mount(editor)
        self.dirty = True
        self._reload_armed = False
        editor.focus()
        self._refresh_status()

    async def action_new_cell(self) -> None:
        """Insert a markdown cell."""
        await self._insert_cell("markdown")

    async def action_new_code_cell(self) -> None:
        """Insert a code cell."""
        await self._insert_cell("code")

    async def action_delete_cell(self) -> None:
        """Delete the focused cell and drop it from the history."""
        cell_id = self._focused_cell_id()
        if cell_id is None:
            self.notify("No cell selected", severity="warning")
            return

        self.notebook.delete(cell_id)
        self.history.forget(cell_id)
        self.dirty = True
        self._reload_armed = False
        logger.info("Deleted cell %s", cell_id)

        # Move focus off the editor before removing it so focus does not
        # fall through to an arbitrary sibling
        entry = self.history.current
        target = self._get_editor(entry.cell_id) if entry is not None else None
        if target is not None:
            target.jump_to(entry.line)
            self.screen.set_focus(target)

        editor = self._get_editor(cell_id)
        if editor is not None:
            await editor.remove()
        self._refresh_status()

    def on_cell_editor_source_changed(self, event: CellEditor.SourceChanged) -> None:
        """Keep the document in sync with edits."""
        cell = self.notebook.get(event.cell_id)
        if cell is None or cell.source == event.source:
            return
        cell.source = event.source
        self.dirty = True
        self._reload_armed = False

    def action_save(self) -> None:
        """Write the notebook to disk."""
        try:
            self.notebook.save(self.notebook_path)
        except OSError as e:
            logger.warning("Failed to save %s: %s", self.notebook_path, e)
            self.notify(f"Save failed: {e}", severity="error")
            return
        self.dirty = False
        self.notify(f"Saved {self.notebook_path.name}")

    async def action_reload(self) -> None:
        """Re-read the notebook from disk and start a fresh history.

        With unsaved changes the first press only warns; a second press
        discards the changes.
        """
        if self.dirty and not self._reload_armed:
            self._reload_armed = True
            self.notify(
                "Unsaved changes: press ctrl+r again to discard them, or ctrl+s to save",
                severity="warning",
            )
            return
        await self._load_notebook()
        self.notify(f"Reloaded {self.notebook_path.name}")

    async def _load_notebook(self) -> None:
        """Load the notebook file, rebuild all cell editors and focus the first."""
        if self.notebook_path.exists():
            cells, error = read_notebook(self.notebook_path)
            if error:
                self.notify(error, severity="error")
            self.notebook = Notebook(cells or [])
        else:
            self.notebook = Notebook()

        if not self.notebook.cells:
            self.notebook.insert_after(None)

        self.history.reset()
        self.dirty = False
        self._reload_armed = False

        cells_view = self.query_one("#cells", VerticalScroll)
        await cells_view.remove_children()
        editors = [CellEditor(cell) for cell in self.notebook.cells]
        await cells_view.mount_all(editors)
        editors[0].focus()
        self._refresh_status()
