"""
Game session for GridSweep.

Owns one board and its game state, and applies player actions to them:
first-click mine placement, reveal, chord, flag toggling and reset.
"""
import logging
from typing import List, Optional, Set, Tuple

import numpy as np

from .board import Board, make_empty_board
from .cell import Cell
from .clusters import burst_positions
from .config import BoardConfig
from .geometry import Position
from .placement import place_mines_first_safe
from .reveal import EMPTY_RESULT, RevealResult, chord_from, reveal_from
from .rules import GameState, is_won, next_state


logger = logging.getLogger(__name__)


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    Single-player GridSweep session.

    Every action runs to completion and returns a RevealResult (or a bool
    for flags). Once the game is won or lost, actions do nothing.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize a new session.

        Args:
            config: Board configuration (default: 5x5 with 4 mines).
            rng: Random generator used for mine placement.
        """
        self.config = config or BoardConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self._new_board()

    def _new_board(self) -> None:
        self.board: Board = make_empty_board(self.config.rows, self.config.cols)
        self.state = GameState.READY
        self.mines_placed = False
        self.placed_mine_count = 0
        self.flags = 0
        self.last_burst: Set[Position] = set()

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell at the given position.

        On the first reveal, places mines so this cell and its neighbors
        are safe.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            The cells revealed by this action.
        """
        if not self._can_act(row, col):
            return EMPTY_RESULT

        if not self.mines_placed:
            self._handle_first_click(row, col)

        return self._apply(reveal_from(self.board, row, col))

    def chord(self, row: int, col: int) -> RevealResult:
        """
        Chord action: reveal all unflagged neighbors if the flag count matches.

        Args:
            row: Row index of a revealed numbered cell.
            col: Column index of a revealed numbered cell.

        Returns:
            The cells revealed by this action.
        """
        if not self._can_act(row, col) or not self.mines_placed:
            return EMPTY_RESULT
        return self._apply(chord_from(self.board, row, col))

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if not self._can_act(row, col):
            return False
        cell = self.board[row, col]
        if not cell.toggle_flag():
            return False
        self.flags += 1 if cell.is_flagged else -1
        return True

    def reset(self, config: Optional[BoardConfig] = None) -> None:
        """
        Start a new game on a fresh board.

        Args:
            config: New configuration; the current one is kept if omitted.
        """
        if config is not None:
            self.config = config
        self._new_board()
        logger.debug(
            "New game: %dx%d with %d mines",
            self.config.rows, self.config.cols, self.config.num_mines,
        )

    def _can_act(self, row: int, col: int) -> bool:
        """Check the game is still live and the position is on the board."""
        if self.state.is_terminal:
            return False
        return self.board.in_bounds(row, col)

    def _handle_first_click(self, row: int, col: int) -> None:
        """Handle first click: place mines around a safe zone."""
        self.placed_mine_count = place_mines_first_safe(
            self.board, self.config.num_mines, row, col, rng=self.rng
        )
        self.mines_placed = True

    def _apply(self, result: RevealResult) -> RevealResult:
        """Update state and the cluster hint after a reveal or chord."""
        if not result:
            return result

        self.last_burst = burst_positions(result.changed, self.board)

        previous = self.state
        won = not result.hit_mine and is_won(self.board, self.placed_mine_count)
        self.state = next_state(previous, result, won)
        if self.state != previous:
            logger.debug("Game state %s -> %s", previous.name, self.state.name)
        return result

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_playing(self) -> bool:
        """Check if the game still accepts actions."""
        return not self.state.is_terminal

    @property
    def is_won(self) -> bool:
        return self.state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self.state == GameState.LOST

    @property
    def mines_left(self) -> int:
        """Mine counter shown to the player: mines minus flags, never negative."""
        return max(0, self.config.num_mines - self.flags)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        return self.board.get_cell(row, col)

    def get_observation(self) -> np.ndarray:
        """Player-visible board as an int8 array (see Board.to_array)."""
        return self.board.to_array()

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions of hidden, unflagged cells.
        """
        if self.state.is_terminal:
            return []
        return [pos for pos in self.board.positions() if self.board[pos].is_hidden]

    def render(self) -> str:
        """Render the board with a status line."""
        status = (
            f"{self.state.name}  mines left: {self.mines_left}  "
            f"revealed: {self.board.count_revealed()}"
        )
        return f"{self.board.render()}\n{status}"
