"""Action handler mixins for CellNavApp."""

from .cell_actions import CellActionsMixin
from .navigation_actions import NavigationActionsMixin

__all__ = [
    "CellActionsMixin",
    "NavigationActionsMixin",
]
