"""Notebook document: an ordered list of markdown and code cells."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

logger = logging.getLogger(__name__)

CellKind = Literal["markdown", "code"]

# Opening or closing fence of a code cell, e.g. ```python
FENCE_PATTERN = re.compile(r"^```\s*([\w+#.-]*)\s*$")


@dataclass
class Cell:
    """A single editable cell."""

    id: str
    kind: CellKind = "markdown"
    source: str = ""
    language: str = ""  # code cells only; empty = unspecified


def parse_notebook(text: str, start: int = 1) -> list[Cell]:
    """Split markdown text into cells.

    Fenced code blocks become code cells; the markdown between them becomes
    one markdown cell when it is not blank. An unterminated fence runs to the
    end of the text. Ids are assigned in order as "cell-<n>" from start.
    """
    chunks: list[tuple[CellKind, str, str]] = []
    prose: list[str] = []
    code: list[str] | None = None
    language = ""

    def flush_prose() -> None:
        body = "\n".join(prose).strip("\n")
        if body.strip():
            chunks.append(("markdown", body, ""))
        prose.clear()

    for line in text.splitlines():
        match = FENCE_PATTERN.match(line.strip())
        if code is None:
            if match:
                flush_prose()
                code = []
                language = match.group(1)
            else:
                prose.append(line)
        elif match and not match.group(1):
            chunks.append(("code", "\n".join(code), language))
            code = None
            language = ""
        else:
            code.append(line)

    if code is not None:
        chunks.append(("code", "\n".join(code), language))
    flush_prose()

    return [
        Cell(id=f"cell-{n}", kind=kind, source=source, language=lang)
        for n, (kind, source, lang) in enumerate(chunks, start=start)
    ]


def render_notebook(cells: list[Cell]) -> str:
    """Render cells back to markdown text."""
    parts = []
    for cell in cells:
        if cell.kind == "code":
            parts.append(f"```{cell.language}\n{cell.source}\n```")
        else:
            parts.append(cell.source)
    return "\n\n".join(parts) + "\n" if parts else ""


def read_notebook(path: Path) -> tuple[list[Cell] | None, str | None]:
    """Read and parse a notebook file.

    Returns:
        Tuple of (cells, error_message). On failure cells is None and
        error_message describes the problem.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read notebook %s: %s", path, e)
        return (None, f"Error reading {path.name}: {e}")
    cells = parse_notebook(text)
    logger.info("Loaded %d cells from %s", len(cells), path)
    return (cells, None)


class Notebook:
    """Ordered cells with stable, never-reused ids."""

    def __init__(self, cells: list[Cell] | None = None) -> None:
        self.cells: list[Cell] = list(cells or [])
        self._next_id = self._first_free_id()

    @classmethod
    def from_text(cls, text: str) -> "Notebook":
        return cls(parse_notebook(text))

    def _first_free_id(self) -> int:
        highest = 0
        for cell in self.cells:
            prefix, _, number = cell.id.rpartition("-")
            if prefix == "cell" and number.isdigit():
                highest = max(highest, int(number))
        return highest + 1

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, cell_id: object) -> bool:
        return any(cell.id == cell_id for cell in self.cells)

    def get(self, cell_id: str) -> Cell | None:
        """Get a cell by id, or None if it is not in the notebook."""
        for cell in self.cells:
            if cell.id == cell_id:
                return cell
        return None

    def index_of(self, cell_id: str) -> int:
        """Position of a cell. Raises KeyError for unknown ids."""
        for index, cell in enumerate(self.cells):
            if cell.id == cell_id:
                return index
        raise KeyError(cell_id)

    def insert_after(
        self,
        cell_id: str | None,
        kind: CellKind = "markdown",
        source: str = "",
        language: str = "",
    ) -> Cell:
        """Insert a new cell after cell_id, or at the end when cell_id is None."""
        position = len(self.cells) if cell_id is None else self.index_of(cell_id) + 1
        cell = Cell(id=f"cell-{self._next_id}", kind=kind, source=source, language=language)
        self._next_id += 1
        self.cells.insert(position, cell)
        return cell

    def delete(self, cell_id: str) -> Cell:
        """Remove and return a cell. Raises KeyError for unknown ids."""
        return self.cells.pop(self.index_of(cell_id))

    def update_source(self, cell_id: str, source: str) -> None:
        cell = self.get(cell_id)
        if cell is None:
            raise KeyError(cell_id)
        cell.source = source

    def to_text(self) -> str:
        return render_notebook(self.cells)

    def save(self, path: Path) -> None:
        """Write the notebook to path as markdown."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_text(), encoding="utf-8")
        logger.info("Saved %d cells to %s", len(self.cells), path)
