"""
GridSweep game module.

Provides the rules core (board, mine placement, reveal, chord, win
detection, cluster grouping) plus a game session and a Gymnasium
environment built on it.
"""
from .geometry import in_bounds, neighbors, orthogonal_neighbors
from .cell import Cell, CellState
from .config import (
    BoardConfig,
    clamp_mines,
    max_mines,
    DEFAULT,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .board import Board, make_empty_board
from .placement import place_mines_first_safe
from .reveal import RevealResult, reveal_from, chord_from
from .rules import GameState, is_won, next_state
from .clusters import cluster_by_value, burst_positions
from .game import Game
from .environment import ActionKind, GridSweepEnv

__all__ = [
    "in_bounds",
    "neighbors",
    "orthogonal_neighbors",
    "Cell",
    "CellState",
    "BoardConfig",
    "clamp_mines",
    "max_mines",
    "DEFAULT",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "Board",
    "make_empty_board",
    "place_mines_first_safe",
    "RevealResult",
    "reveal_from",
    "chord_from",
    "GameState",
    "is_won",
    "next_state",
    "cluster_by_value",
    "burst_positions",
    "Game",
    "ActionKind",
    "GridSweepEnv",
]
