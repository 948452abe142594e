"""
Configuration for mine fields and game sessions.

Holds field dimensions, the classic size presets and the status
messages shown to the player.
"""
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Field Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a mine field.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 8
    height: int = 8
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")


# Preset field sizes
SMALL = BoardConfig(8, 8, 10)
MEDIUM = BoardConfig(16, 16, 40)
LARGE = BoardConfig(30, 16, 99)


def default_config(
    small: bool = False,
    medium: bool = False,
    large: bool = False,
    width: Optional[int] = None,
    height: Optional[int] = None,
    mines: Optional[int] = None,
) -> BoardConfig:
    """
    Pick a preset and apply explicit overrides.

    The first true preset flag wins, falling back to LARGE. Width and
    height override the preset only when greater than one, mines only
    when positive.

    Returns:
        A validated BoardConfig.
    """
    preset = LARGE
    if small:
        preset = SMALL
    elif medium:
        preset = MEDIUM
    elif large:
        preset = LARGE

    result_width, result_height, result_mines = (
        preset.width, preset.height, preset.num_mines
    )
    if width is not None and width > 1:
        result_width = width
    if height is not None and height > 1:
        result_height = height
    if mines is not None and mines > 0:
        result_mines = mines
    return BoardConfig(result_width, result_height, result_mines)


# ============================================================================
# Status Messages
# ============================================================================

@dataclass(frozen=True)
class StatusText:
    """Messages describing where a game stands."""

    not_started: str = "not started"
    running: str = "Running"
    win: str = "You Win!!!"
    lose: str = "KABOOOOOM!!!"
