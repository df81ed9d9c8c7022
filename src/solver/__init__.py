"""
Solver Package - State-space search engine for the chess piece puzzle.

This package finds a sequence of legal moves turning a start board of
Kings, Bishops and Rooks into a target board. Six interchangeable
strategies share the board model, move generator and visited set.

Public API:
    - PieceKind: Closed enumeration of cell contents
    - BoardState: Immutable board representation
    - Move: Relocation of one piece
    - legal_moves() / is_legal_move(): Move generator
    - Solution / SolveStatus / SolutionMetrics: Strategy results
    - SolutionCursor: Move-by-move playback of a solution
    - SolutionContext: Inputs for a strategy run
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - solve(): One-call entry point

Usage:
    from src.solver import solve

    solution = solve("KBB/RR.", ".BB/RRK", strategy="bfs")
    if solution.found:
        for move in solution.moves:
            print(move)
"""

# Core data structures
from .pieces import PieceKind
from .board import BoardState, StateKey
from .move import Move
from .errors import InvalidMoveError, SolverParameterError
from .movegen import legal_moves, is_legal_move
from .visited import VisitedSet
from .heuristic import get_heuristic, get_heuristic_names
from .solution import Solution, SolutionCursor, SolutionMetrics, SolveStatus
from .context import SolutionContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_class,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .engine import solve, to_board, REFERENCE_START, REFERENCE_TARGET

__all__ = [
    # Data structures
    "PieceKind",
    "BoardState",
    "StateKey",
    "Move",
    "InvalidMoveError",
    "SolverParameterError",
    "legal_moves",
    "is_legal_move",
    "VisitedSet",
    "get_heuristic",
    "get_heuristic_names",
    "Solution",
    "SolutionCursor",
    "SolutionMetrics",
    "SolveStatus",
    "SolutionContext",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_class",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    # Entry point
    "solve",
    "to_board",
    "REFERENCE_START",
    "REFERENCE_TARGET",
]
