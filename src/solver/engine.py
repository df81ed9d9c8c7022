"""
Engine Module - Single-call entry point for solving a puzzle.
"""

import logging
from typing import Any, Callable, Optional, Union

from .board import BoardState
from .context import SolutionContext
from .factory import create_strategy, get_default_strategy_name
from .solution import Solution

logger = logging.getLogger(__name__)

BoardInput = Union[BoardState, str]

# Reference puzzle: the king must travel to the opposite corner
REFERENCE_START = "KBB/RR."
REFERENCE_TARGET = ".BB/RRK"


def to_board(board: BoardInput) -> BoardState:
    """Accept a BoardState or its slash-separated notation."""
    if isinstance(board, BoardState):
        return board
    return BoardState.from_string(board)


def solve(
    start: BoardInput,
    target: BoardInput,
    strategy: Optional[str] = None,
    progress_callback: Optional[Callable[[float, str], None]] = None,
    **params: Any
) -> Solution:
    """
    Solve a puzzle with one strategy.

    Boards are immutable, so the caller's boards are never modified.

    Args:
        start: Start board
        target: Target board
        strategy: Registered strategy name (default "bfs")
        progress_callback: Optional progress callback
        **params: Strategy parameters (max_depth, max_attempts, ...)

    Returns:
        Solution; check solution.found before replaying its moves

    Raises:
        ValueError: Unknown strategy, bad parameter or mismatched boards
    """
    name = strategy or get_default_strategy_name()
    solver = create_strategy(name, **params)
    context = SolutionContext(
        start=to_board(start),
        target=to_board(target),
        progress_callback=progress_callback
    )

    logger.debug(f"Solving with {name} {params}:\n{context.start}\n->\n{context.target}")
    return solver.solve(context)
