"""
Board module for GridSweep.

A fixed-size 2-D container of cells. The board holds no game rules of
its own; placement, reveal and win checks operate on it from outside.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

import numpy as np

from .cell import Cell
from .geometry import Position, in_bounds, neighbors


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Grid of cells sized rows x cols, fixed for the board's lifetime.

    Cells are addressed as board[row, col]. A new game gets a new board
    rather than a cleared one.
    """

    rows: int
    cols: int
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Create the grid after dataclass creation."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if not self._grid:
            self._grid = [
                [Cell() for _ in range(self.cols)]
                for _ in range(self.rows)
            ]

    # ========================================================================
    # Cell Access
    # ========================================================================

    def __getitem__(self, position: Position) -> Cell:
        row, col = position
        return self._grid[row][col]

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(row, col):
            return None
        return self._grid[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return in_bounds(row, col, self.rows, self.cols)

    def neighbors(self, row: int, col: int) -> List[Position]:
        return neighbors(row, col, self.rows, self.cols)

    def positions(self) -> Iterator[Position]:
        """Iterate all positions in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    # ========================================================================
    # Counting
    # ========================================================================

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    def count_revealed(self) -> int:
        return sum(1 for pos in self.positions() if self[pos].is_revealed)

    def count_mines(self) -> int:
        return sum(1 for pos in self.positions() if self[pos].is_mine)

    def count_flags(self) -> int:
        return sum(1 for pos in self.positions() if self[pos].is_flagged)

    def count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(1 for pos in self.neighbors(row, col) if self[pos].is_mine)

    def count_adjacent_flags(self, row: int, col: int) -> int:
        """Count flagged cells adjacent to a specific cell."""
        return sum(1 for pos in self.neighbors(row, col) if self[pos].is_flagged)

    # ========================================================================
    # Snapshots
    # ========================================================================

    def to_array(self) -> np.ndarray:
        """
        Get the player-visible board as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        snapshot = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col in self.positions():
            snapshot[row, col] = self._grid[row][col].to_value()
        return snapshot

    def mine_mask(self) -> np.ndarray:
        """Boolean array marking every mine, hidden or not."""
        mask = np.zeros((self.rows, self.cols), dtype=bool)
        for row, col in self.positions():
            mask[row, col] = self._grid[row][col].is_mine
        return mask

    def render(self) -> str:
        """Render board as a plain text grid, one line per row."""
        return "\n".join(
            " ".join(cell.to_char() for cell in row)
            for row in self._grid
        )


# ============================================================================
# Factory
# ============================================================================

def make_empty_board(rows: int, cols: int) -> Board:
    """
    Allocate a rows x cols board with every cell mine-free, hidden and
    with an adjacency count of 0.
    """
    return Board(rows, cols)
