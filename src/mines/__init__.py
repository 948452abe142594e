"""
Mines game engine.

Provides the mine field, mine placement, the reveal engine, win
detection, saved game files and a game session tying them together.
"""
from .cell import Cell, Content, Visibility
from .config import BoardConfig, StatusText, SMALL, MEDIUM, LARGE, default_config
from .display import DisplayMode, symbol_for
from .errors import MinesError, PlacementError, DecodeError
from .grid import Grid
from .placement import place_mines, fill_count
from .reveal import step, flag, unflag
from .status import GameStatus, found_all, game_status
from .persistence import save_game, load_game, encode_grid, decode_grid
from .game import Game
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "Content",
    "Visibility",
    "BoardConfig",
    "StatusText",
    "SMALL",
    "MEDIUM",
    "LARGE",
    "default_config",
    "DisplayMode",
    "symbol_for",
    "MinesError",
    "PlacementError",
    "DecodeError",
    "Grid",
    "place_mines",
    "fill_count",
    "step",
    "flag",
    "unflag",
    "GameStatus",
    "found_all",
    "game_status",
    "save_game",
    "load_game",
    "encode_grid",
    "decode_grid",
    "Game",
    "MinesweeperEnv",
]
