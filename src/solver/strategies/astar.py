"""
A* Strategy - Best-first search ordered by moves taken plus a heuristic.
"""

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import List, Tuple

from ..base import SolverStrategy
from ..board import BoardState
from ..move import Move
from ..context import SolutionContext
from ..heuristic import DEFAULT_HEURISTIC, get_heuristic
from ..solution import Solution
from ..visited import VisitedSet
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@dataclass(order=True)
class AStarNode:
    """
    Open-set entry.

    Ordered by (priority, sequence) so equal priorities pop in
    insertion order.

    Attributes:
        priority: f = moves so far + heuristic estimate
        sequence: Insertion counter
        board: Board reached
        path: Moves taken to reach this board
    """
    priority: int
    sequence: int
    board: BoardState = field(compare=False)
    path: Tuple[Move, ...] = field(compare=False)

    @property
    def depth(self) -> int:
        """Moves taken so far (g)."""
        return len(self.path)


@register_strategy
class AStarStrategy(SolverStrategy):
    """
    Best-first search with priority f = g + h.

    The open set has no decrease-key: a board may be queued several
    times at different costs. The closed set stops a board from being
    expanded twice, which bounds the run by the number of reachable
    boards at the cost of extra queue entries.

    With the default "manhattan_all" estimator the heuristic is not
    admissible, so the result is not guaranteed to be the shortest.

    Parameters:
        heuristic: Registered estimator name (see heuristic.py)
    """
    name = "astar"
    description = "A* (heuristic) - Best-first search guided by Manhattan distance"

    def __init__(self, heuristic: str = DEFAULT_HEURISTIC):
        self.heuristic_name = heuristic
        self.heuristic = get_heuristic(heuristic)

    def solve(self, context: SolutionContext) -> Solution:
        start_time = time.perf_counter()
        trivial = self._precheck(context, start_time)
        if trivial is not None:
            return trivial

        target = context.target
        counter = itertools.count()
        closed = VisitedSet()
        open_set: List[AStarNode] = [
            AStarNode(self.heuristic(context.start, target), next(counter), context.start, ())
        ]

        explored = generated = 0
        max_frontier = 1

        while open_set:
            max_frontier = max(max_frontier, len(open_set))
            node = heapq.heappop(open_set)

            if node.board == target:
                logger.info(
                    f"[A*] Solved in {node.depth} moves ({self.heuristic_name}), "
                    f"{explored} states explored, peak open set {max_frontier}"
                )
                return self._build_solution(
                    context, list(node.path), start_time,
                    states_explored=explored, states_generated=generated,
                    max_frontier=max_frontier
                )

            key = node.board.state_key()
            if not closed.insert(key):
                continue
            explored += 1

            for move in self.find_all_valid_moves(node.board):
                successor = node.board.apply_move(move)
                generated += 1
                if closed.contains_board(successor):
                    continue
                g = node.depth + 1
                heapq.heappush(open_set, AStarNode(
                    g + self.heuristic(successor, target),
                    next(counter),
                    successor,
                    node.path + (move,)
                ))

        logger.info(f"[A*] No solution, {len(closed)} states closed")
        return self._not_found(
            context, start_time,
            states_explored=explored, states_generated=generated,
            max_frontier=max_frontier
        )
