"""
Cell module for the mines engine.

Represents individual squares of the mine field with their content
(mine or adjacent count) and visibility (hidden/flagged/revealed).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class Visibility(Enum):
    """Possible visibility states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()
    EXPLODED = auto()


class Content(Enum):
    """What lies underneath a cell."""

    EMPTY = auto()
    COUNT = auto()
    MINE = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single square of the mine field.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        visibility: Current visibility state.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    visibility: Visibility = Visibility.HIDDEN

    @property
    def content(self) -> Content:
        """Tagged content of the cell."""
        if self.is_mine:
            return Content.MINE
        if self.adjacent_mines == 0:
            return Content.EMPTY
        return Content.COUNT

    @property
    def is_hidden(self) -> bool:
        """Check if cell is covered (hidden or flagged)."""
        return self.visibility in (Visibility.HIDDEN, Visibility.FLAGGED)

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.visibility == Visibility.FLAGGED

    @property
    def is_shown(self) -> bool:
        """Check if cell has been stepped on."""
        return self.visibility in (Visibility.REVEALED, Visibility.EXPLODED)

    @property
    def is_exploded(self) -> bool:
        """Check if this is a mine that was stepped on."""
        return self.visibility == Visibility.EXPLODED

    def explode(self) -> None:
        """Mark a stepped-on mine."""
        if not self.is_mine:
            raise ValueError("Only a mine can explode")
        self.visibility = Visibility.EXPLODED

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Exploded mine
        """
        if self.visibility == Visibility.HIDDEN:
            return -1
        if self.visibility == Visibility.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
