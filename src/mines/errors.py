"""
Exceptions raised by the mines engine.
"""
from typing import Optional


class MinesError(Exception):
    """Base class for engine errors."""


class PlacementError(MinesError):
    """Not enough free cells to place the requested mines."""


class DecodeError(MinesError, ValueError):
    """A saved game could not be interpreted."""

    def __init__(
        self,
        message: str,
        game_id: Optional[int] = None,
        line: Optional[int] = None,
    ) -> None:
        self.reason = message
        self.game_id = game_id
        self.line = line
        if game_id is not None:
            message = f"{message} in Game {game_id}"
        if line is not None:
            message = f"{message} at line {line}"
        super().__init__(message)
