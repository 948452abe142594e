"""
Mapping of cells to the single-character symbols shown to a player.

Glyphs and colours are left to whatever prints the field; this module
only decides which symbol a cell stands for.
"""
from enum import Enum

from .cell import Cell, Visibility


class DisplayMode(Enum):
    """What to show for each cell."""

    FIELD = "field"
    SOLUTION = "solution"
    CHECK = "check"


def content_symbol(cell: Cell) -> str:
    """Symbol for what lies underneath a cell."""
    if cell.is_mine:
        return "*"
    if cell.adjacent_mines == 0:
        return " "
    return str(cell.adjacent_mines)


def symbol_for(cell: Cell, mode: DisplayMode = DisplayMode.FIELD) -> str:
    """
    Pick the symbol for a cell.

    FIELD shows what the player can see, SOLUTION shows every cell's
    content, and CHECK shows the content with mistakes marked: an
    exploded mine as "X" and a flag on a safe cell as "f".
    """
    if mode == DisplayMode.SOLUTION:
        return content_symbol(cell)

    if cell.visibility == Visibility.EXPLODED:
        return "X"

    if mode == DisplayMode.CHECK:
        if cell.is_flagged and not cell.is_mine:
            return "f"
        return content_symbol(cell)

    if cell.visibility == Visibility.HIDDEN:
        return "."
    if cell.visibility == Visibility.FLAGGED:
        return "F"
    return content_symbol(cell)
