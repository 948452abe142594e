"""
Grid module for the mines engine.

Owns the 2D array of cells together with the counters derived from
their visibility. Coordinates are given as (col, row) everywhere.
"""
from typing import Iterator, List, Set, Tuple

import numpy as np

from .cell import Cell, Visibility


Coord = Tuple[int, int]


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Rectangular mine field.

    Keeps mine_count fixed, and flag_count / hidden_count in step with
    cell visibility. hidden_count counts covered cells without a flag,
    so flag_count + hidden_count is the number of covered cells. The
    reveal engine and the save-file decoder are the only writers of
    the counters.
    """

    def __init__(self, width: int, height: int, mine_count: int = 0) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be positive")
        if mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        self.width = width
        self.height = height
        self.mine_count = mine_count
        self.flag_count = 0
        self.hidden_count = width * height
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(width)] for _ in range(height)
        ]

    @classmethod
    def create(cls, width: int, height: int, mine_count: int = 0) -> "Grid":
        """Build an all-hidden, mine-free grid."""
        return cls(width, height, mine_count)

    def __repr__(self) -> str:
        return (
            f"Grid(width={self.width}, height={self.height}, "
            f"mine_count={self.mine_count}, flag_count={self.flag_count}, "
            f"hidden_count={self.hidden_count})"
        )

    # ========================================================================
    # Coordinate Utilities (Low-level)
    # ========================================================================

    def clamp(self, col: int, row: int) -> Coord:
        """Pull a coordinate onto the nearest edge of the grid."""
        col = min(max(col, 0), self.width - 1)
        row = min(max(row, 0), self.height - 1)
        return col, row

    def in_bounds(self, col: int, row: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= col < self.width and 0 <= row < self.height

    def coordinates(self) -> Iterator[Coord]:
        """Iterate every (col, row) of the grid, column by column."""
        for col in range(self.width):
            for row in range(self.height):
                yield col, row

    def neighbors_of(self, col: int, row: int) -> Set[Coord]:
        """
        Get the in-bounds neighbours of a position.

        Args:
            col: Column of the center cell (clamped).
            row: Row of the center cell (clamped).

        Returns:
            Set of up to eight (col, row) tuples, center excluded.
        """
        col, row = self.clamp(col, row)
        neighbors = set()
        for delta_col in (-1, 0, 1):
            for delta_row in (-1, 0, 1):
                if delta_col == 0 and delta_row == 0:
                    continue
                new_col = col + delta_col
                new_row = row + delta_row
                if self.in_bounds(new_col, new_row):
                    neighbors.add((new_col, new_row))
        return neighbors

    # ========================================================================
    # Cell Access
    # ========================================================================

    def cell_at(self, col: int, row: int) -> Cell:
        """Get the cell at a position; out-of-range input is clamped."""
        col, row = self.clamp(col, row)
        return self._grid[row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate every cell."""
        for col, row in self.coordinates():
            yield self._grid[row][col]

    def mine_positions(self) -> Set[Coord]:
        """Positions currently holding a mine."""
        return {
            (col, row)
            for col, row in self.coordinates()
            if self._grid[row][col].is_mine
        }

    # ========================================================================
    # Consistency
    # ========================================================================

    def count_visibility(self, *states: Visibility) -> int:
        """Count cells whose visibility is one of the given states."""
        return sum(1 for cell in self.cells() if cell.visibility in states)

    def check_counters(self) -> bool:
        """Recompute the cached counters by full scan and compare."""
        flagged = self.count_visibility(Visibility.FLAGGED)
        hidden = self.count_visibility(Visibility.HIDDEN)
        return self.flag_count == flagged and self.hidden_count == hidden

    def to_observation(self) -> np.ndarray:
        """
        Get visible grid state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = exploded mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for row in range(self.height):
            for col in range(self.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs
