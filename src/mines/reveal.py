"""
Reveal engine: stepping on cells and planting flags.

These functions are the only place where cell visibility changes
during play, and they keep the grid counters in step with it.
"""
from typing import List

from .cell import Cell, Visibility
from .grid import Coord, Grid
from .status import GameStatus, game_status


def _uncover(grid: Grid, cell: Cell) -> None:
    """Take a covered cell out of the counters before it is shown."""
    if cell.is_flagged:
        grid.flag_count -= 1
    else:
        grid.hidden_count -= 1


def step(grid: Grid, col: int, row: int) -> GameStatus:
    """
    Step on a cell, exposing what is underneath.

    Stepping on a mine explodes it. Stepping on a cell with no
    adjacent mines also steps on every neighbour, spreading through
    the connected blank region and its numbered border. Flags do not
    protect a cell.

    Args:
        grid: Grid to play on.
        col: Column index (clamped).
        row: Row index (clamped).

    Returns:
        Status of the game after the step.
    """
    col, row = grid.clamp(col, row)
    cell = grid.cell_at(col, row)
    if cell.is_shown:
        return game_status(grid)

    if cell.is_mine:
        _uncover(grid, cell)
        cell.explode()
        return GameStatus.LOST

    pending: List[Coord] = [(col, row)]
    while pending:
        current_col, current_row = pending.pop()
        current = grid.cell_at(current_col, current_row)
        if current.is_shown:
            continue
        _uncover(grid, current)
        current.visibility = Visibility.REVEALED
        if current.adjacent_mines == 0:
            for neighbor in sorted(grid.neighbors_of(current_col, current_row)):
                if not grid.cell_at(*neighbor).is_shown:
                    pending.append(neighbor)

    return game_status(grid)


def flag(grid: Grid, col: int, row: int) -> bool:
    """
    Plant a flag on a hidden cell.

    Returns:
        True if the flag was placed, False if the cell was already
        flagged or shown.
    """
    cell = grid.cell_at(col, row)
    if cell.visibility != Visibility.HIDDEN:
        return False
    cell.visibility = Visibility.FLAGGED
    grid.flag_count += 1
    grid.hidden_count -= 1
    return True


def unflag(grid: Grid, col: int, row: int) -> bool:
    """
    Remove a flag.

    Returns:
        True if a flag was removed, False otherwise.
    """
    cell = grid.cell_at(col, row)
    if not cell.is_flagged:
        return False
    cell.visibility = Visibility.HIDDEN
    grid.flag_count -= 1
    grid.hidden_count += 1
    return True
