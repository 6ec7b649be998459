"""Bounded history of focused cell locations for back navigation."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Maximum number of locations kept before the oldest is evicted
DEFAULT_CAPACITY = 20

BACKWARD = -1


@dataclass(frozen=True)
class Entry:
    """One visited location: a cell id and the focused line within it."""

    cell_id: Hashable
    line: int


class History:
    """Capacity-bounded log of visited locations with a current-position cursor.

    Recording from a point in the past drops everything after the cursor, so
    there is no redo once a new branch starts. The cursor is None while the
    history holds no current position.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = max(1, capacity)
        self._entries: list[Entry] = []
        self._cursor: int | None = None

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Snapshot of recorded entries, oldest first."""
        return tuple(self._entries)

    @property
    def cursor(self) -> int | None:
        return self._cursor

    @property
    def current(self) -> Entry | None:
        """Entry at the cursor, or None."""
        if self._cursor is None:
            return None
        return self._entries[self._cursor]

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, cell_id: Hashable, line: int) -> None:
        """Record a visit to (cell_id, line) and make it the current entry."""
        if self._is_current(cell_id, line):
            return

        if self._cursor is not None and self._cursor + 1 < len(self._entries):
            dropped = len(self._entries) - self._cursor - 1
            del self._entries[self._cursor + 1 :]
            logger.debug("Dropped %d forward entries", dropped)

        self._entries.append(Entry(cell_id, line))
        self._cursor = len(self._entries) - 1

        overflow = len(self._entries) - self.capacity
        if overflow > 0:
            self._drop_front(overflow)

    def reset(self) -> None:
        """Clear all entries and the cursor."""
        self._entries.clear()
        self._cursor = None

    def forget(self, cell_id: Hashable) -> None:
        """Remove every entry for cell_id, keeping the cursor on a survivor.

        The cursor moves to the nearest entry at or before it that belongs to
        another cell. When every entry from the cursor back to the start belongs
        to cell_id, it moves to the oldest surviving entry instead, or to None
        when nothing survives.
        """
        if self._cursor is None:
            return

        anchor_index = self._cursor
        while anchor_index >= 0 and self._entries[anchor_index].cell_id == cell_id:
            anchor_index -= 1
        anchor = self._entries[anchor_index] if anchor_index >= 0 else None

        kept = [entry for entry in self._entries if entry.cell_id != cell_id]
        removed = len(self._entries) - len(kept)
        if removed == 0:
            return
        self._entries = kept

        if anchor is not None:
            # Match by identity: equal entries may be recorded more than once.
            self._cursor = max(i for i, entry in enumerate(kept) if entry is anchor)
        elif kept:
            self._cursor = 0
        else:
            self._cursor = None
        logger.debug("Forgot %d entries for cell %r", removed, cell_id)

    def can_go_back(self) -> bool:
        return self._can_move(BACKWARD)

    def go_back(self) -> Entry | None:
        """Step the cursor back and return the entry there, or None.

        The cursor clamps at the oldest entry, so repeated calls there keep
        returning it.
        """
        return self._move(BACKWARD)

    def _can_move(self, direction: int) -> bool:
        if self._cursor is None:
            return False
        if not self._entries:
            return False
        return max(0, self._cursor + direction) < len(self._entries)

    def _move(self, direction: int) -> Entry | None:
        if not self._can_move(direction):
            return None
        self._cursor = max(0, self._cursor + direction)
        return self._entries[self._cursor]

    def _drop_front(self, count: int) -> None:
        """Evict the oldest count entries and shift the cursor with them."""
        del self._entries[:count]
        if self._cursor is not None:
            self._cursor -= count
            if self._cursor < 0:
                self._cursor = 0 if self._entries else None
        logger.debug("Evicted %d oldest entries", count)

    def _is_current(self, cell_id: Hashable, line: int) -> bool:
        current = self.current
        return current is not None and current.cell_id == cell_id and current.line == line
