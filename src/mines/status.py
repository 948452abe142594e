"""
Win and loss detection.
"""
from enum import Enum, auto

from .grid import Grid


class GameStatus(Enum):
    """Possible states of the game."""

    ACTIVE = auto()
    WON = auto()
    LOST = auto()


def found_all(grid: Grid) -> bool:
    """
    Check if the field has been solved.

    True when exactly the mines remain covered (flagged or hidden) and
    no flag sits on a safe cell.
    """
    if grid.flag_count + grid.hidden_count != grid.mine_count:
        return False
    return not any(cell.is_flagged and not cell.is_mine for cell in grid.cells())


def game_status(grid: Grid) -> GameStatus:
    """Derive the status from the cells and counters."""
    if any(cell.is_exploded for cell in grid.cells()):
        return GameStatus.LOST
    if found_all(grid):
        return GameStatus.WON
    return GameStatus.ACTIVE
