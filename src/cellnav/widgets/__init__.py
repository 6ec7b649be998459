"""cellnav widgets."""

from .cell_editor import CellEditor
from .history_bar import HistoryBar

__all__ = [
    "CellEditor",
    "HistoryBar",
]
