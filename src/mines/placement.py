"""
Random mine placement.
"""
import logging
import random
from typing import Iterable, Optional

from .errors import PlacementError
from .grid import Coord, Grid

logger = logging.getLogger(__name__)


def fill_count(grid: Grid, col: int, row: int) -> None:
    """Add one to the adjacent count of every non-mine neighbour."""
    for neighbor_col, neighbor_row in grid.neighbors_of(col, row):
        neighbor = grid.cell_at(neighbor_col, neighbor_row)
        if not neighbor.is_mine:
            neighbor.adjacent_mines += 1


def place_mines(
    grid: Grid,
    protected: Iterable[Coord] = (),
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> None:
    """
    Scatter grid.mine_count mines at random.

    A drawn position is rejected when it already holds a mine or is
    protected. Visibility is left alone.

    Args:
        grid: Grid to fill.
        protected: Positions that must stay mine-free.
        rng: Random source, defaults to the module-level generator.
        max_attempts: Cap on draws, defaults to 1000 per cell.

    Raises:
        PlacementError: Too few free cells, or draws exhausted.
    """
    rng = rng or random.Random()
    keep_clear = {tuple(pos) for pos in protected}

    free = sum(
        1
        for col, row in grid.coordinates()
        if (col, row) not in keep_clear and not grid.cell_at(col, row).is_mine
    )
    if grid.mine_count > free:
        raise PlacementError(
            f"Cannot place {grid.mine_count} mines in {free} free cells"
        )

    if max_attempts is None:
        max_attempts = 1000 * grid.width * grid.height

    attempts = 0
    placed = 0
    while placed < grid.mine_count:
        if attempts >= max_attempts:
            raise PlacementError(
                f"Gave up after {attempts} draws with {placed} mines placed"
            )
        attempts += 1
        col = rng.randrange(grid.width)
        row = rng.randrange(grid.height)
        cell = grid.cell_at(col, row)
        if cell.is_mine or (col, row) in keep_clear:
            continue
        cell.is_mine = True
        cell.adjacent_mines = 0
        fill_count(grid, col, row)
        placed += 1

    logger.debug("placed %d mines in %d draws", placed, attempts)
