"""
Board configuration for GridSweep.

Holds the dimensions and mine count for a game, with the bounds the
settings screen enforces.
"""
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MIN_ROWS = 5
MAX_ROWS = 50
MIN_COLS = 5
MAX_COLS = 60


def max_mines(rows: int, cols: int) -> int:
    """Largest mine count allowed for a board: half the cells, at least 1."""
    return max(1, (rows * cols) // 2)


def clamp_mines(rows: int, cols: int, mines: int) -> int:
    """Clamp a requested mine count into [1, max_mines(rows, cols)]."""
    return max(1, min(mines, max_mines(rows, cols)))


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a GridSweep board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 5
    cols: int = 5
    num_mines: int = 4

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are within the playable bounds."""
        if not MIN_ROWS <= self.rows <= MAX_ROWS:
            raise ValueError(
                f"Rows must be between {MIN_ROWS} and {MAX_ROWS}, got {self.rows}"
            )
        if not MIN_COLS <= self.cols <= MAX_COLS:
            raise ValueError(
                f"Columns must be between {MIN_COLS} and {MAX_COLS}, got {self.cols}"
            )
        if self.num_mines < 1:
            raise ValueError("Number of mines must be at least 1")
        limit = max_mines(self.rows, self.cols)
        if self.num_mines > limit:
            raise ValueError(f"Too many mines (max {limit})")

    @classmethod
    def clamped(cls, rows: int, cols: int, num_mines: int) -> "BoardConfig":
        """
        Build a configuration, capping the mine count instead of rejecting it.

        Dimensions are still validated; only the mine count is adjusted.
        """
        return cls(rows, cols, clamp_mines(rows, cols, num_mines))

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


# Preset difficulty levels
DEFAULT = BoardConfig(5, 5, 4)
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)
