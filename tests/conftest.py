"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, Tuple

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gridsweep import Board, BoardConfig, Cell, Game, make_empty_board
from gridsweep.placement import calculate_adjacent_mines


def build_board(
    rows: int, cols: int, mines: Iterable[Tuple[int, int]]
) -> Board:
    """Build a board with mines at fixed positions and correct counts."""
    board = make_empty_board(rows, cols)
    for pos in mines:
        board[pos].is_mine = True
    calculate_adjacent_mines(board)
    return board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return make_empty_board(5, 5)


@pytest.fixture
def corner_board() -> Board:
    """3x3 board with a mine in each corner."""
    return build_board(3, 3, [(0, 0), (0, 2), (2, 0), (2, 2)])


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board with a full column of mines at col 3.

    Columns 0-1 are zero cells, col 2 is a wall of 2s and 3s,
    col 4 sits behind the mines.
    """
    return build_board(5, 5, [(row, 3) for row in range(5)])


@pytest.fixture
def single_mine_board() -> Board:
    """5x5 board with one mine at (0, 0)."""
    return build_board(5, 5, [(0, 0)])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible placement."""
    return np.random.default_rng(1234)


@pytest.fixture
def beginner_config() -> BoardConfig:
    """Beginner difficulty configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def beginner_game(beginner_config: BoardConfig, rng: np.random.Generator) -> Game:
    """Fresh 9x9 game with 10 mines and a seeded generator."""
    return Game(beginner_config, rng=rng)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)
