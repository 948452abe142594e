"""
Gymnasium environment wrapper for the mines engine.

Lets agents play a Game through the standard RL interface.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import BoardConfig
from .display import DisplayMode
from .game import Game
from .status import GameStatus


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment over a Game.

    Observation:
        2D int8 array of shape (height, width) where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = exploded mine

    Actions:
        Discrete action space of size width * height.
        Action i steps on the cell at column i % width, row i // width.
        Mines are placed on the first action, keeping that cell clear.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for stepping on a cell that is not hidden
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Field configuration (default: 8x8 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.game = Game.from_config(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            self.config.height * self.config.width
        )

        self._steps = 0
        self._rng = random.Random()

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for the mine layout.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng = random.Random(seed)
        self.game.new_game()
        self._steps = 0
        return self.game.grid.to_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Step on the cell chosen by action.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        col, row = self._action_to_position(int(action))
        self._steps += 1

        if not self.game.started:
            self.game.place_mines((col, row), rng=self._rng)

        reward = self._calculate_reward(col, row)
        observation = self.game.grid.to_observation()
        terminated = not self.game.is_running()

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (col, row) position."""
        return action % self.config.width, action // self.config.width

    def _calculate_reward(self, col: int, row: int) -> float:
        """Play the move and score its outcome."""
        if not self.game.grid.cell_at(col, row).is_hidden:
            return -0.1

        status = self.game.step(col, row)
        if status == GameStatus.WON:
            return 10.0
        if status == GameStatus.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        grid = self.game.grid
        return {
            "steps": self._steps,
            "covered": grid.flag_count + grid.hidden_count,
            "total_safe": grid.width * grid.height - grid.mine_count,
            "game_state": self.game.status.name,
            "message": self.game.status_message(),
        }

    def render(self) -> Optional[str]:
        """Render the current field."""
        if self.render_mode == "ansi":
            return "\n".join(self.game.rows(DisplayMode.FIELD))
        if self.render_mode == "human":
            print("\n".join(self.game.rows(DisplayMode.FIELD)))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden, unflagged cell.
        """
        return (self.game.grid.to_observation() == -1).flatten()
