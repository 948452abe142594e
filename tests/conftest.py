"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mines import Cell, Game, Grid, BoardConfig, fill_count


def build_grid(
    width: int, height: int, mines: Iterable[Tuple[int, int]]
) -> Grid:
    """Grid with mines at fixed (col, row) positions and counts filled."""
    positions = list(mines)
    grid = Grid(width, height, len(positions))
    for col, row in positions:
        grid.cell_at(col, row).is_mine = True
        grid.cell_at(col, row).adjacent_mines = 0
        fill_count(grid, col, row)
    return grid


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def make_grid() -> Callable[..., Grid]:
    """Factory for grids with hand-placed mines."""
    return build_grid


@pytest.fixture
def corner_grid() -> Grid:
    """
    5x5 grid with a single mine in the bottom-right corner.

    Everything except the mine and its three neighbours is blank.
    """
    return build_grid(5, 5, [(4, 4)])


@pytest.fixture
def walled_grid() -> Grid:
    """
    5x3 grid split by a column of mines at col 2.

        col: 0 1 2 3 4
        row0 . . * . .
        row1 . . * . .
        row2 . . * . .
    """
    return build_grid(5, 3, [(2, 0), (2, 1), (2, 2)])


@pytest.fixture
def tiny_grid() -> Grid:
    """2x2 grid with one mine at (0, 0)."""
    return build_grid(2, 2, [(0, 0)])


@pytest.fixture
def empty_grid() -> Grid:
    """5x5 grid with no mines for cascade testing."""
    return Grid(5, 5, 0)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def small_game(rng: random.Random) -> Game:
    """8x8 game with 10 mines, corner (0, 0) kept clear."""
    game = Game.from_config(BoardConfig(8, 8, 10))
    game.place_mines((0, 0), rng=rng)
    return game


@pytest.fixture
def tiny_game() -> Game:
    """Running 2x2 game with one mine, forced to (0, 0)."""
    game = Game(2, 2, 1)
    game.place_mines((1, 0), (0, 1), (1, 1))
    return game


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)
