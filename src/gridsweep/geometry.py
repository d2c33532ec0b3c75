"""
Grid geometry helpers.

Bounds checking and neighbor enumeration for a rectangular grid.
"""
from typing import List, Tuple


Position = Tuple[int, int]

# Down, up, right, left
ORTHOGONAL_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def in_bounds(row: int, col: int, rows: int, cols: int) -> bool:
    """Check if position is within grid bounds."""
    return 0 <= row < rows and 0 <= col < cols


def neighbors(row: int, col: int, rows: int, cols: int) -> List[Position]:
    """
    Get the in-bounds king-move neighbors of a position.

    Neighbors are ordered row by row from the top-left, so callers that
    iterate them behave the same on every run.

    Args:
        row: Row index of center cell.
        col: Column index of center cell.
        rows: Number of rows in the grid.
        cols: Number of columns in the grid.

    Returns:
        List of (row, col) tuples for valid neighbors (at most 8).
    """
    result = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if in_bounds(new_row, new_col, rows, cols):
                result.append((new_row, new_col))
    return result


def orthogonal_neighbors(
    row: int, col: int, rows: int, cols: int
) -> List[Position]:
    """Get the in-bounds 4-connected neighbors of a position."""
    return [
        (row + delta_row, col + delta_col)
        for delta_row, delta_col in ORTHOGONAL_OFFSETS
        if in_bounds(row + delta_row, col + delta_col, rows, cols)
    ]
