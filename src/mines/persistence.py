"""
Saved game files.

A store is a plain text file holding any number of games, each in a
section of the form::

    Game <id>
    <width>x<height>
    <one line of <height> characters per column>
    <blank line>

Every cell is written as one character combining what is underneath
with what the player sees. Adjacent counts are not stored; they are
rebuilt from the mines when a game is read back.
"""
import logging
import os
import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .cell import Cell, Visibility
from .errors import DecodeError
from .grid import Grid
from .placement import fill_count

logger = logging.getLogger(__name__)

StorePath = Union[str, "os.PathLike[str]"]

_HEADER = re.compile(r"^\s*(\d+)x(\d+)")
_ANY_SECTION = re.compile(r"^Game\s+\d+\s*$")

# (is_mine, visibility) -> character
_ENCODE: Dict[Tuple[bool, Visibility], str] = {
    (False, Visibility.HIDDEN): ".",
    (False, Visibility.FLAGGED): "f",
    (False, Visibility.REVEALED): " ",
    (True, Visibility.HIDDEN): ":",
    (True, Visibility.FLAGGED): "F",
    (True, Visibility.EXPLODED): "X",
}

# character -> (is_mine, visibility); digits and "*" are read for
# files written by older versions
_DECODE: Dict[str, Tuple[bool, Visibility]] = {
    char: key for key, char in _ENCODE.items()
}
_DECODE.update({str(n): (False, Visibility.REVEALED) for n in range(1, 9)})
_DECODE["*"] = (True, Visibility.EXPLODED)


def _section_pattern(game_id: int) -> "re.Pattern[str]":
    return re.compile(rf"^Game\s+{int(game_id)}\s*$")


# ============================================================================
# Cell Codec
# ============================================================================

def encode_cell(cell: Cell) -> str:
    """Character for a cell."""
    try:
        return _ENCODE[(cell.is_mine, cell.visibility)]
    except KeyError:
        raise ValueError(
            f"Cannot encode {cell.visibility.name} cell "
            f"({'mine' if cell.is_mine else 'safe'})"
        ) from None


def decode_char(char: str) -> Tuple[bool, Visibility]:
    """(is_mine, visibility) for a character."""
    try:
        return _DECODE[char]
    except KeyError:
        raise DecodeError(f"Don't know how to interpret {char!r}") from None


# ============================================================================
# Grid Codec
# ============================================================================

def encode_grid(grid: Grid) -> List[str]:
    """One string per column, each one character per row."""
    return [
        "".join(encode_cell(grid.cell_at(col, row)) for row in range(grid.height))
        for col in range(grid.width)
    ]


def decode_grid(
    columns: Sequence[str],
    width: int,
    height: int,
    first_line: Optional[int] = None,
) -> Grid:
    """
    Rebuild a grid from encoded columns.

    Mine count is taken from the mines found. Counters are updated as
    each cell is read, and adjacent counts are filled in around every
    mine. Column lengths are checked before the grid is built.

    Args:
        columns: One string per column.
        width: Number of columns.
        height: Cells per column.
        first_line: File line number of the first column, used in
            error messages.

    Raises:
        DecodeError: Missing or short column, or unknown character.
    """
    def line_of(col: int) -> Optional[int]:
        return None if first_line is None else first_line + col

    if len(columns) < width:
        raise DecodeError(
            f"Expected {width} columns, found {len(columns)}",
            line=line_of(len(columns)),
        )
    for col in range(width):
        if len(columns[col]) < height:
            raise DecodeError(
                f"Column {col} has {len(columns[col])} cells, expected {height}",
                line=line_of(col),
            )

    grid = Grid(width, height)
    for col in range(width):
        line = columns[col]
        for row in range(height):
            try:
                is_mine, visibility = decode_char(line[row])
            except DecodeError as exc:
                raise DecodeError(exc.reason, line=line_of(col)) from None
            cell = grid.cell_at(col, row)
            cell.visibility = visibility
            if visibility == Visibility.FLAGGED:
                grid.flag_count += 1
            if visibility != Visibility.HIDDEN:
                grid.hidden_count -= 1
            if is_mine:
                cell.is_mine = True
                cell.adjacent_mines = 0
                fill_count(grid, col, row)

    grid.mine_count = len(grid.mine_positions())
    return grid


# ============================================================================
# Store Access
# ============================================================================

def _find_section(lines: Sequence[str], game_id: int) -> Optional[int]:
    pattern = _section_pattern(game_id)
    for index, line in enumerate(lines):
        if pattern.match(line.rstrip("\r\n")):
            return index
    return None


def _section_end(lines: Sequence[str], start: int) -> int:
    """Index of the next section header after start, or len(lines)."""
    for index in range(start + 1, len(lines)):
        if _ANY_SECTION.match(lines[index].rstrip("\r\n")):
            return index
    return len(lines)


# Bytes that are not UTF-8 are carried through unchanged.
_ERRORS = "surrogateescape"


def _read_lines(path: Path) -> List[str]:
    with path.open("r", encoding="utf-8", errors=_ERRORS, newline="") as handle:
        return handle.readlines()


def _write_lines(path: Path, lines: Sequence[str]) -> None:
    with path.open("w", encoding="utf-8", errors=_ERRORS, newline="") as handle:
        handle.writelines(lines)


def format_section(game_id: int, grid: Grid) -> List[str]:
    """Lines of a saved game section, newline-terminated."""
    if int(game_id) < 1:
        raise ValueError("Game number must be positive")
    lines = [f"Game {int(game_id)}\n", f"{grid.width}x{grid.height}\n"]
    lines.extend(column + "\n" for column in encode_grid(grid))
    lines.append("\n")
    return lines


def save_game(store: StorePath, game_id: int, grid: Grid) -> bool:
    """
    Write a game into a store.

    An existing section with the same id is replaced in place, any
    other section is kept as it was; a new id is appended. Output goes
    to a temporary file that replaces the store only once fully
    written, so a failure leaves the store untouched.

    Args:
        store: Path of the save file. A missing file counts as empty.
        game_id: Positive game number.
        grid: Grid to save.

    Returns:
        True if the store was updated, False on an I/O failure.
    """
    path = Path(store)
    try:
        lines = _read_lines(path)
    except FileNotFoundError:
        lines = []
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("can't open file %s for saving: %s", path, exc)
        return False

    section = format_section(game_id, grid)
    start = _find_section(lines, game_id)
    if start is None:
        if lines and not lines[-1].endswith("\n"):
            lines[-1] += "\n"
        output = lines + section
    else:
        output = lines[:start] + section + lines[_section_end(lines, start):]

    working = path.with_name(path.name + ".working")
    try:
        _write_lines(working, output)
        os.replace(working, path)
    except OSError as exc:
        logger.warning("can't write game %s to %s: %s", game_id, path, exc)
        return False
    finally:
        if working.exists():
            working.unlink()

    logger.debug("saved game %s to %s", game_id, path)
    return True


def load_game(store: StorePath, game_id: int) -> Optional[Grid]:
    """
    Read a game from a store.

    Returns:
        A new grid, or None if the store can't be opened or holds no
        section for game_id.

    Raises:
        DecodeError: The section exists but can't be interpreted.
    """
    path = Path(store)
    try:
        lines = _read_lines(path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("can't open save file %s: %s", path, exc)
        return None

    start = _find_section(lines, game_id)
    if start is None:
        logger.debug("no game %s in %s", game_id, path)
        return None

    if start + 1 >= len(lines):
        raise DecodeError("Missing size line", game_id, start + 2)
    match = _HEADER.match(lines[start + 1])
    if match is None:
        raise DecodeError(
            f"Bad size line {lines[start + 1].rstrip()!r}", game_id, start + 2
        )
    width, height = int(match.group(1)), int(match.group(2))
    if width < 1 or height < 1:
        raise DecodeError(f"Bad size {width}x{height}", game_id, start + 2)

    first = start + 2
    columns = [line.rstrip("\r\n") for line in lines[first:first + width]]
    try:
        grid = decode_grid(columns, width, height, first_line=first + 1)
    except DecodeError as exc:
        raise DecodeError(exc.reason, game_id, exc.line) from exc

    logger.debug("loaded game %s (%dx%d) from %s", game_id, width, height, path)
    return grid
