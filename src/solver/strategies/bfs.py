"""
Breadth-First Strategy - Fewest-moves search over the reachable boards.
"""

import logging
import time
from collections import deque
from typing import Deque, List, Tuple

from ..base import SolverStrategy
from ..board import BoardState
from ..move import Move
from ..context import SolutionContext
from ..solution import Solution
from ..visited import VisitedSet
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class BreadthFirstStrategy(SolverStrategy):
    """
    Breadth-first search returning a minimum-length move sequence.

    Boards are marked visited when enqueued, so a board reachable from
    several parents enters the queue once. The first goal dequeued is
    at minimum depth because the queue is ordered by path length.
    """
    name = "bfs"
    description = "Breadth-First (optimal) - Fewest moves, explores level by level"

    def solve(self, context: SolutionContext) -> Solution:
        start_time = time.perf_counter()
        trivial = self._precheck(context, start_time)
        if trivial is not None:
            return trivial

        target = context.target
        visited = VisitedSet()
        visited.insert_board(context.start)
        queue: Deque[Tuple[BoardState, List[Move]]] = deque([(context.start, [])])

        explored = generated = 0
        max_frontier = 1

        while queue:
            max_frontier = max(max_frontier, len(queue))
            board, path = queue.popleft()

            if board == target:
                logger.info(
                    f"[BFS] Solved in {len(path)} moves, "
                    f"{explored} states explored, {len(visited)} discovered"
                )
                return self._build_solution(
                    context, path, start_time,
                    states_explored=explored, states_generated=generated,
                    max_frontier=max_frontier
                )

            explored += 1
            for move in self.find_all_valid_moves(board):
                successor = board.apply_move(move)
                generated += 1
                if visited.insert_board(successor):
                    queue.append((successor, path + [move]))

        logger.info(f"[BFS] No solution, reachable component of {len(visited)} states exhausted")
        return self._not_found(
            context, start_time,
            states_explored=explored, states_generated=generated,
            max_frontier=max_frontier
        )
