"""
Reveal engine for GridSweep.

Single-cell flood reveal and chorded reveal. Both mutate the board in
place and return a RevealResult describing exactly what changed.
"""
from collections import deque
from dataclasses import dataclass
from typing import Tuple

from .board import Board
from .geometry import Position


# ============================================================================
# Result Type
# ============================================================================

@dataclass(frozen=True)
class RevealResult:
    """
    Delta produced by one reveal or chord.

    Attributes:
        changed: Positions that flipped to revealed, in visitation order.
        hit_mine: Whether a mine was exposed.
    """

    changed: Tuple[Position, ...] = ()
    hit_mine: bool = False

    def __bool__(self) -> bool:
        return bool(self.changed)

    def __len__(self) -> int:
        return len(self.changed)

    def __add__(self, other: "RevealResult") -> "RevealResult":
        return RevealResult(
            self.changed + other.changed,
            self.hit_mine or other.hit_mine,
        )


EMPTY_RESULT = RevealResult()


# ============================================================================
# Single-cell Reveal
# ============================================================================

def reveal_from(board: Board, row: int, col: int) -> RevealResult:
    """
    Reveal a cell, flooding outward through zero cells.

    Flagged or already revealed targets are left alone. A mine is
    revealed by itself. Otherwise a breadth-first search reveals the
    target and expands from every zero cell it reaches; numbered cells
    are revealed but stop the flood.

    Args:
        board: Board to mutate.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        Positions revealed in BFS order and whether a mine was hit.
    """
    cell = board[row, col]
    if not cell.is_hidden:
        return EMPTY_RESULT

    cell.reveal()
    if cell.is_mine:
        return RevealResult(((row, col),), hit_mine=True)

    changed = [(row, col)]
    queue = deque()
    if cell.adjacent_mines == 0:
        queue.append((row, col))

    while queue:
        current_row, current_col = queue.popleft()
        for neighbor_row, neighbor_col in board.neighbors(current_row, current_col):
            neighbor = board[neighbor_row, neighbor_col]
            if neighbor.is_mine or not neighbor.reveal():
                continue
            changed.append((neighbor_row, neighbor_col))
            if neighbor.adjacent_mines == 0:
                queue.append((neighbor_row, neighbor_col))

    return RevealResult(tuple(changed))


# ============================================================================
# Chord Reveal
# ============================================================================

def is_satisfied(board: Board, row: int, col: int) -> bool:
    """Check if a revealed numbered cell has exactly as many flags as mines around it."""
    cell = board[row, col]
    if not cell.is_revealed or cell.adjacent_mines <= 0:
        return False
    return board.count_adjacent_flags(row, col) == cell.adjacent_mines


def chord_from(board: Board, row: int, col: int) -> RevealResult:
    """
    Reveal every hidden neighbor of a satisfied numbered cell.

    Nothing happens unless the cell is revealed, numbered and has as
    many flagged neighbors as its number. Hidden mine neighbors (behind
    a wrong flag elsewhere) are revealed directly and end the game;
    other neighbors are revealed with reveal_from and may flood.

    Returns:
        Aggregated positions from all neighbor reveals and whether any
        of them hit a mine.
    """
    if not is_satisfied(board, row, col):
        return EMPTY_RESULT

    result = EMPTY_RESULT
    for neighbor_row, neighbor_col in board.neighbors(row, col):
        neighbor = board[neighbor_row, neighbor_col]
        if not neighbor.is_hidden:
            continue
        if neighbor.is_mine:
            neighbor.reveal()
            result += RevealResult(((neighbor_row, neighbor_col),), hit_mine=True)
        else:
            result += reveal_from(board, neighbor_row, neighbor_col)
    return result
