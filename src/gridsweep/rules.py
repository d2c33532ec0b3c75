"""
Win evaluation and game state transitions for GridSweep.
"""
from enum import Enum, auto

from .board import Board
from .reveal import RevealResult


class GameState(Enum):
    """Possible states of the game."""

    READY = auto()
    RUNNING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.WON, GameState.LOST)


def is_won(board: Board, mine_count: int) -> bool:
    """Check if every non-mine cell is revealed."""
    return board.count_revealed() == board.total_cells - mine_count


def next_state(state: GameState, result: RevealResult, won: bool) -> GameState:
    """
    Compute the state after a reveal or chord.

    Args:
        state: State before the action.
        result: What the action changed.
        won: Whether the board satisfies the win condition afterwards.

    Returns:
        The new state. Terminal states and no-op actions keep the
        current state.
    """
    if state.is_terminal or not result:
        return state
    if result.hit_mine:
        return GameState.LOST
    if won:
        return GameState.WON
    return GameState.RUNNING
