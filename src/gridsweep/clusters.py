"""
Cluster grouping for revealed numbers.

Groups the numbered cells from one reveal into 4-connected clusters of
equal value. The presentation layer animates clusters of two or more
together; nothing here touches the board.
"""
from collections import deque
from typing import Dict, Iterable, List, Set

from .board import Board
from .geometry import Position, orthogonal_neighbors


def _group_by_value(
    positions: Iterable[Position], board: Board
) -> Dict[int, List[Position]]:
    """Bucket numbered positions by adjacency count, keeping input order."""
    groups: Dict[int, List[Position]] = {}
    for pos in positions:
        cell = board[pos]
        if cell.is_mine or cell.adjacent_mines <= 0:
            continue
        groups.setdefault(cell.adjacent_mines, []).append(pos)
    return groups


def _connected_components(
    positions: List[Position], board: Board
) -> List[List[Position]]:
    """Split positions into 4-connected components, seeded in input order."""
    remaining = dict.fromkeys(positions)
    components = []
    while remaining:
        start = next(iter(remaining))
        del remaining[start]
        queue = deque([start])
        component = []
        while queue:
            row, col = queue.popleft()
            component.append((row, col))
            for pos in orthogonal_neighbors(row, col, board.rows, board.cols):
                if pos in remaining:
                    del remaining[pos]
                    queue.append(pos)
        components.append(component)
    return components


def cluster_by_value(
    positions: Iterable[Position], board: Board
) -> Dict[int, List[List[Position]]]:
    """
    Group revealed numbered positions into same-value 4-connected clusters.

    Zero cells and mines are ignored. Adjacency only links positions that
    are both in the input and share a value.

    Args:
        positions: Positions from one RevealResult.
        board: Board the positions belong to (read only).

    Returns:
        Mapping from adjacency count to its list of clusters.
    """
    return {
        value: _connected_components(group, board)
        for value, group in _group_by_value(positions, board).items()
    }


def burst_positions(
    positions: Iterable[Position], board: Board, min_size: int = 2
) -> Set[Position]:
    """Positions belonging to any cluster of at least min_size cells."""
    burst = set()
    for clusters in cluster_by_value(positions, board).values():
        for cluster in clusters:
            if len(cluster) >= min_size:
                burst.update(cluster)
    return burst
