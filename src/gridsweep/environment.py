"""
Gymnasium environment wrapper for GridSweep.

Drives a Game session through the standard Gymnasium interface so that
scripted or learning players can play it.
"""
import logging
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import FLAGGED_VALUE, MINE_VALUE
from .config import BoardConfig
from .game import Game
from .reveal import is_satisfied


logger = logging.getLogger(__name__)


class ActionKind(IntEnum):
    """Kinds of player action, in the order they tile the action space."""

    REVEAL = 0
    FLAG = 1
    CHORD = 2


# ============================================================================
# GridSweep Environment
# ============================================================================

class GridSweepEnv(gym.Env):
    """
    Gymnasium environment for GridSweep.

    Observation:
        2D int8 array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 3 * rows * cols.
        Action i decodes to kind = i // (rows * cols) (reveal, flag, chord)
        and cell index i % (rows * cols) = row * cols + col.

    Rewards:
        - +1 for a reveal or chord that opens safe cells
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the GridSweep environment.

        Args:
            config: Board configuration (default: 5x5 with 4 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.game = Game(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=FLAGGED_VALUE,
            high=MINE_VALUE,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        self._cells = self.config.rows * self.config.cols
        self.action_space = spaces.Discrete(self._cells * len(ActionKind))

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
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.game.rng = self.np_random
        self.game.reset()
        self._steps = 0

        return self.game.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Encoded (kind, row, col) action.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        kind, row, col = self.decode_action(action)
        self._steps += 1

        reward = self._perform(kind, row, col)

        observation = self.game.get_observation()
        terminated = not self.game.is_playing
        truncated = False

        if self.render_mode == "human":
            self.render()

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[ActionKind, int, int]:
        """Convert flat action index to (kind, row, col)."""
        kind, index = divmod(int(action), self._cells)
        row, col = divmod(index, self.config.cols)
        return ActionKind(kind), row, col

    def encode_action(self, kind: ActionKind, row: int, col: int) -> int:
        """Convert (kind, row, col) to a flat action index."""
        return int(kind) * self._cells + row * self.config.cols + col

    def _perform(self, kind: ActionKind, row: int, col: int) -> float:
        """
        Apply an action to the game and score it.

        Returns:
            Reward value.
        """
        if kind == ActionKind.FLAG:
            return 0.0 if self.game.toggle_flag(row, col) else -0.1

        if kind == ActionKind.CHORD:
            result = self.game.chord(row, col)
        else:
            result = self.game.reveal(row, col)

        if not result:
            return -0.1
        if self.game.is_won:
            logger.debug("Episode won after %d steps", self._steps)
            return 10.0
        if self.game.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.game.board.count_revealed(),
            "total_safe": self.config.total_cells - self.config.num_mines,
            "flags": self.game.flags,
            "game_state": self.game.state.name,
            "burst": sorted(self.game.last_burst),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the game.

        Returns:
            int8 array where 1 = useful action, usable as the mask
            argument of action_space.sample.
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if not self.game.is_playing:
            return mask
        board = self.game.board
        for row, col in board.positions():
            cell = board[row, col]
            if cell.is_hidden:
                mask[self.encode_action(ActionKind.REVEAL, row, col)] = 1
            if not cell.is_revealed:
                mask[self.encode_action(ActionKind.FLAG, row, col)] = 1
            elif is_satisfied(board, row, col) and any(
                board[pos].is_hidden for pos in board.neighbors(row, col)
            ):
                mask[self.encode_action(ActionKind.CHORD, row, col)] = 1
        return mask
