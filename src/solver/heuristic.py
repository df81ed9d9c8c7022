"""
Heuristic Estimator - Distance estimates for best-first search.

Estimators take (board, target) and return an integer >= 0 that is 0
when the boards are equal. They are looked up by name so the A*
strategy can swap them without changing its search loop.
"""

from typing import Callable, Dict, List, Tuple

from .board import BoardState
from .pieces import PieceKind


Heuristic = Callable[[BoardState, BoardState], int]

DEFAULT_HEURISTIC = "manhattan_all"


def _target_cells(target: BoardState) -> Dict[PieceKind, List[Tuple[int, int]]]:
    cells: Dict[PieceKind, List[Tuple[int, int]]] = {}
    for r, c, kind in target.occupied_cells():
        cells.setdefault(kind, []).append((r, c))
    return cells


def manhattan_all(board: BoardState, target: BoardState) -> int:
    """
    Sum, over every piece, the L1 distance to every target cell of its kind.

    Not admissible when a kind occupies more than one target cell:
    a piece already in place still pays the distance to its twin's
    cell, so the estimate can exceed the true remaining cost.

    Args:
        board: Current board
        target: Goal board

    Returns:
        Non-negative estimate
    """
    goals = _target_cells(target)
    score = 0
    for r, c, kind in board.occupied_cells():
        for tr, tc in goals.get(kind, ()):
            score += abs(r - tr) + abs(c - tc)
    # Twin pieces in place still score each other's distance
    if score and board == target:
        return 0
    return score


def manhattan_nearest(board: BoardState, target: BoardState) -> int:
    """Sum, over every piece, the L1 distance to the nearest target cell of its kind."""
    goals = _target_cells(target)
    score = 0
    for r, c, kind in board.occupied_cells():
        cells = goals.get(kind)
        if cells:
            score += min(abs(r - tr) + abs(c - tc) for tr, tc in cells)
    return score


_HEURISTICS: Dict[str, Heuristic] = {
    "manhattan_all": manhattan_all,
    "manhattan_nearest": manhattan_nearest,
}


def get_heuristic(name: str) -> Heuristic:
    """
    Look up an estimator by name.

    Raises:
        ValueError: If the name is not registered
    """
    if name not in _HEURISTICS:
        available = ", ".join(_HEURISTICS.keys())
        raise ValueError(f"Unknown heuristic: {name}. Available: {available}")
    return _HEURISTICS[name]


def get_heuristic_names() -> List[str]:
    return list(_HEURISTICS.keys())
