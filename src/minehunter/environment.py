"""
Gymnasium environment wrapper for Minehunter.

Provides a standard RL interface for programmatic play.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, GameState


# ============================================================================
# Minehunter Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minehunter.

    Observation:
        2D array where:
        - -1 = covered field
        - -2 = flagged field
        - 0-8 = revealed field with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the field at (x, y) = (i % width, i // width).
        Mines are placed on the first action of an episode.

    Rewards:
        - +1 for revealing a safe field
        - +10 for winning the round
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed or flagged, or
          any action after the round is over)
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
            config: Board configuration (default: 16x16 with 40 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board.from_config(self.config)
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

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board.reset()
        self._steps = 0
        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Field index to reveal (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)
        terminated = self.board.game_state in (GameState.WON, GameState.LOST)

        return (
            self.board.get_observation(),
            reward,
            terminated,
            False,
            self._get_info(),
        )

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return int(action) % self.config.width, int(action) // self.config.width

    def _random_source(self, bound: int) -> int:
        """Pick a mine coordinate from the seeded generator."""
        return int(self.np_random.integers(bound))

    def _calculate_reward(self, x: int, y: int) -> float:
        """Reveal a field and score the outcome."""
        if self.board.game_state in (GameState.WON, GameState.LOST):
            return -0.1

        field = self.board.field_at(x, y)
        if not field.covered or field.flagged:
            return -0.1

        if not self.board.mines_placed:
            self.board.place_mines(x, y, self._random_source)

        if self.board.reveal(x, y):
            return -10.0
        if self.board.is_cleared():
            return 10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "safe_remaining": self.board.unmarked_safe_fields_remaining,
            "flags_remaining": self.board.flags_remaining,
            "game_state": self.board.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        # No cursor: place it outside the grid
        return self.board.render(-1, -1)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = covered field without a flag.
        """
        return (self.board.get_observation() == -1).flatten()
