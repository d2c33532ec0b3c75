"""
Mine placement for GridSweep.

Mines are placed after the first click so that the clicked cell and its
neighbors are always safe.
"""
import logging
from typing import List, Optional, Set

import numpy as np

from .board import Board
from .geometry import Position


logger = logging.getLogger(__name__)


def safe_zone(board: Board, safe_row: int, safe_col: int) -> Set[Position]:
    """The clicked cell plus its in-bounds neighbors."""
    zone = set(board.neighbors(safe_row, safe_col))
    zone.add((safe_row, safe_col))
    return zone


def _get_valid_mine_positions(
    board: Board, safe_row: int, safe_col: int
) -> List[Position]:
    """All positions outside the safe zone, in row-major order."""
    forbidden = safe_zone(board, safe_row, safe_col)
    return [pos for pos in board.positions() if pos not in forbidden]


def calculate_adjacent_mines(board: Board) -> None:
    """Store the mine-neighbor count on every non-mine cell."""
    for row, col in board.positions():
        cell = board[row, col]
        if not cell.is_mine:
            cell.adjacent_mines = board.count_adjacent_mines(row, col)


def place_mines_first_safe(
    board: Board,
    mine_count: int,
    safe_row: int,
    safe_col: int,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """
    Place mines randomly, keeping a 3x3 zone around the first click clear.

    The requested count is forced up to 1 and capped at the number of
    positions outside the safe zone. Mines are picked with a partial
    Fisher-Yates shuffle, giving a uniform subset without shuffling
    every candidate. Calling this twice on one board stacks a second
    layout on the first; callers place exactly once.

    Args:
        board: Board to mutate.
        mine_count: Requested number of mines.
        safe_row: Row of the first click.
        safe_col: Column of the first click.
        rng: Random generator; a fresh unseeded one is used if omitted.

    Returns:
        Number of mines actually placed.
    """
    if rng is None:
        rng = np.random.default_rng()

    spots = _get_valid_mine_positions(board, safe_row, safe_col)
    count = min(max(1, mine_count), len(spots))

    for i in range(count):
        j = i + int(rng.integers(len(spots) - i))
        spots[i], spots[j] = spots[j], spots[i]
        board[spots[i]].is_mine = True

    calculate_adjacent_mines(board)

    if count != mine_count:
        logger.debug(
            "Requested %d mines, placed %d (%d candidate cells)",
            mine_count, count, len(spots),
        )
    logger.debug(
        "Placed %d mines on %dx%d board, safe cell (%d, %d)",
        count, board.rows, board.cols, safe_row, safe_col,
    )
    return count
