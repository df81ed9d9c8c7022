"""
Depth-First Strategy - Stack-based search with a depth bound.
"""

import logging
import time
from typing import List, Tuple

from ..base import SolverStrategy
from ..board import BoardState
from ..move import Move
from ..context import SolutionContext
from ..errors import require_positive
from ..solution import Solution
from ..visited import VisitedSet
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class DepthFirstStrategy(SolverStrategy):
    """
    Iterative depth-first search bounded by max_depth moves.

    Successors are pushed in reverse generator order so the first
    generated move is explored first. Boards are marked visited when
    pushed and never pushed again, which makes the search find some
    solution within the bound but not necessarily the shortest, and
    can miss a solution whose boards were first reached on a longer
    branch.

    Parameters:
        max_depth: Longest move sequence considered (>= 1)
    """
    name = "dfs"
    description = "Depth-First (bounded) - Fast, not necessarily shortest"

    def __init__(self, max_depth: int = 20):
        self.max_depth = require_positive(max_depth, "max_depth")

    def solve(self, context: SolutionContext) -> Solution:
        start_time = time.perf_counter()
        trivial = self._precheck(context, start_time)
        if trivial is not None:
            return trivial

        target = context.target
        visited = VisitedSet()
        visited.insert_board(context.start)
        stack: List[Tuple[BoardState, List[Move], int]] = [(context.start, [], 0)]

        explored = generated = 0
        max_frontier = 1

        while stack:
            max_frontier = max(max_frontier, len(stack))
            board, path, depth = stack.pop()

            # Goal test runs before the depth gate
            if board == target:
                logger.info(
                    f"[DFS] Solved in {len(path)} moves (bound {self.max_depth}), "
                    f"{explored} states explored"
                )
                return self._build_solution(
                    context, path, start_time,
                    states_explored=explored, states_generated=generated,
                    max_frontier=max_frontier
                )

            if depth >= self.max_depth:
                continue

            explored += 1
            for move in reversed(self.find_all_valid_moves(board)):
                successor = board.apply_move(move)
                generated += 1
                if visited.insert_board(successor):
                    stack.append((successor, path + [move], depth + 1))

        logger.info(f"[DFS] No solution within {self.max_depth} moves")
        return self._not_found(
            context, start_time,
            states_explored=explored, states_generated=generated,
            max_frontier=max_frontier
        )
