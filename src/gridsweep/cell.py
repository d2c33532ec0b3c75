"""
Cell module for GridSweep.

A cell is one grid position: whether it holds a mine, whether the
player has revealed or flagged it, and how many mines surround it.
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Player-visible state of a cell. Revealed and flagged are exclusive."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Snapshot encoding shared by observations and text rendering
HIDDEN_VALUE = -1
FLAGGED_VALUE = -2
MINE_VALUE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the GridSweep grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        state: Current state (hidden, revealed, or flagged).
        adjacent_mines: Count of mines in neighboring cells (0-8). Only
            meaningful for non-mine cells once mines have been placed.
    """

    is_mine: bool = False
    state: CellState = CellState.HIDDEN
    adjacent_mines: int = 0

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell flipped to revealed, False if it was already
            revealed or is flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    @property
    def is_zero(self) -> bool:
        """A non-mine cell with no adjacent mines; flood reveal spreads through these."""
        return not self.is_mine and self.adjacent_mines == 0

    def to_value(self) -> int:
        """
        Encode the player-visible content of this cell.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_VALUE
        if self.state == CellState.FLAGGED:
            return FLAGGED_VALUE
        if self.is_mine:
            return MINE_VALUE
        return self.adjacent_mines

    def to_char(self) -> str:
        """Single-character rendering used by the text views."""
        value = self.to_value()
        if value == HIDDEN_VALUE:
            return "."
        if value == FLAGGED_VALUE:
            return "F"
        if value == MINE_VALUE:
            return "*"
        if value == 0:
            return " "
        return str(value)
