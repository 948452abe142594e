"""
Game session.

Wraps a Grid with the running flag and status text a player interface
needs, and exposes the moves, the symbols to draw, and saving and
loading of games in progress.
"""
import logging
import random
from typing import List, Optional

from . import reveal
from .config import BoardConfig, StatusText
from .display import DisplayMode, symbol_for
from .errors import MinesError
from .grid import Coord, Grid
from .persistence import StorePath, load_game, save_game
from .placement import place_mines
from .status import GameStatus, found_all, game_status

logger = logging.getLogger(__name__)


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single game of mines.

    The game is not running until mines are placed (or a game is
    loaded), and stops for good once a mine explodes or every mine has
    been found.
    """

    def __init__(
        self,
        width: int,
        height: int,
        mine_count: int,
        text: Optional[StatusText] = None,
    ) -> None:
        """
        Initialize the game.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_count: Mines to place.
            text: Status messages, defaults to StatusText().
        """
        self.text = text or StatusText()
        self.game_number = 1
        self.grid = Grid.create(width, height, mine_count)
        self.started = False
        self._running = False
        self._why = self.text.not_started

    @classmethod
    def from_config(
        cls, config: BoardConfig, text: Optional[StatusText] = None
    ) -> "Game":
        """Create a game sized by a BoardConfig."""
        return cls(config.width, config.height, config.num_mines, text)

    # ========================================================================
    # Setup
    # ========================================================================

    def place_mines(
        self, *protected: Coord, rng: Optional[random.Random] = None
    ) -> None:
        """
        Fill the field with mines and start play.

        Args:
            protected: Positions that must stay mine-free.
            rng: Random source for reproducible fields.

        Raises:
            MinesError: Mines were already placed in this game.
        """
        if self.started:
            raise MinesError("Mines already placed")
        place_mines(self.grid, protected, rng=rng)
        self.started = True
        self._running = True
        self._why = self.text.running

    def new_game(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        mine_count: Optional[int] = None,
    ) -> None:
        """Replace the field with a fresh one, keeping omitted sizes."""
        self.grid = Grid.create(
            width if width is not None else self.grid.width,
            height if height is not None else self.grid.height,
            mine_count if mine_count is not None else self.grid.mine_count,
        )
        self.started = False
        self._running = False
        self._why = self.text.not_started

    # ========================================================================
    # Moves
    # ========================================================================

    def step(self, col: int, row: int) -> GameStatus:
        """
        Step on a cell.

        Ignored once the game is not running.

        Returns:
            Status of the game after the move.
        """
        if not self._running:
            return self.status
        status = reveal.step(self.grid, col, row)
        if status == GameStatus.LOST:
            self._running = False
            self._why = self.text.lose
        elif status == GameStatus.WON:
            self.found_all()
        return status

    def flag(self, col: int, row: int) -> bool:
        """Flag a hidden cell while the game is running."""
        if not self._running:
            return False
        return reveal.flag(self.grid, col, row)

    def unflag(self, col: int, row: int) -> bool:
        """Remove a flag while the game is running."""
        if not self._running:
            return False
        return reveal.unflag(self.grid, col, row)

    # ========================================================================
    # State Accessors
    # ========================================================================

    def found_all(self) -> bool:
        """
        Check if every mine has been found.

        A running game that is found solved stops and reports the win.
        """
        solved = found_all(self.grid)
        if solved and self._running:
            self._running = False
            self._why = self.text.win
            logger.debug("game %s solved", self.game_number)
        return solved

    def is_running(self) -> bool:
        """Check if moves are still possible."""
        self.found_all()
        return self._running

    def status_message(self) -> str:
        """Text describing where the game stands."""
        return self._why

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return game_status(self.grid)

    @property
    def mines_left(self) -> int:
        """Mines not yet accounted for by a flag."""
        return self.grid.mine_count - self.grid.flag_count

    # ========================================================================
    # Rendering Surface
    # ========================================================================

    def symbol_at(
        self, col: int, row: int, mode: DisplayMode = DisplayMode.FIELD
    ) -> str:
        """Symbol for a position in the given display mode."""
        return symbol_for(self.grid.cell_at(col, row), mode)

    def visible_symbol_at(self, col: int, row: int) -> str:
        """Symbol the player sees at a position."""
        return self.symbol_at(col, row, DisplayMode.FIELD)

    def is_hidden(self, col: int, row: int) -> bool:
        """True if the cell is still covered, flagged or not."""
        return self.grid.cell_at(col, row).is_hidden

    def is_flagged(self, col: int, row: int) -> bool:
        """True if the cell carries a flag."""
        return self.grid.cell_at(col, row).is_flagged

    def rows(self, mode: DisplayMode = DisplayMode.FIELD) -> List[str]:
        """One string of symbols per row, top to bottom."""
        return [
            "".join(
                symbol_for(self.grid.cell_at(col, row), mode)
                for col in range(self.grid.width)
            )
            for row in range(self.grid.height)
        ]

    # ========================================================================
    # Saving and Loading
    # ========================================================================

    def save(self, store: StorePath, game_id: Optional[int] = None) -> bool:
        """
        Save the game into a store.

        Args:
            store: Path of the save file.
            game_id: Game number, defaults to this game's number.

        Returns:
            True on success, False if the store could not be written.
        """
        return save_game(store, game_id or self.game_number, self.grid)

    def load(self, store: StorePath, game_id: Optional[int] = None) -> bool:
        """
        Replace this game with a saved one.

        The current game is left as it is when the store can't be
        opened, holds no such game, or the saved game can't be decoded
        (DecodeError is raised in that case).

        Returns:
            True if a game was loaded.
        """
        game_id = game_id or self.game_number
        grid = load_game(store, game_id)
        if grid is None:
            return False

        self.grid = grid
        self.game_number = game_id
        self.started = True
        status = game_status(grid)
        if status == GameStatus.LOST:
            self._running = False
            self._why = self.text.lose
        elif status == GameStatus.WON:
            self._running = False
            self._why = self.text.win
        else:
            self._running = True
            self._why = self.text.running
        return True
