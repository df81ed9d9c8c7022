"""
Base Strategy Module - Abstract base class for search strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Optional

from .board import BoardState
from .move import Move
from .movegen import legal_moves
from .context import SolutionContext
from .solution import Solution, SolutionMetrics, SolveStatus

logger = logging.getLogger(__name__)


class SolverStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes. Strategy parameters are
    constructor arguments validated when the strategy is created.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for listings
        deterministic: False for strategies that sample moves at random
    """
    name: str = "base"
    description: str = "Base strategy"
    deterministic: bool = True

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Search for a move sequence from context.start to context.target.

        Never raises for an unsolvable puzzle: exhaustion is reported
        through the returned Solution's status.

        Args:
            context: Solution context with start and target boards

        Returns:
            Solution with moves and metrics
        """
        pass

    def find_all_valid_moves(self, board: BoardState) -> List[Move]:
        """
        Find all legal moves from a board.

        Args:
            board: Current board state

        Returns:
            List of valid Move objects in generator order
        """
        return legal_moves(board)

    def _precheck(self, context: SolutionContext, start_time: float) -> Optional[Solution]:
        """
        Resolve trivial cases before any search.

        Args:
            context: Solution context
            start_time: perf_counter() value when solve() began

        Returns:
            A finished Solution when start equals target or the piece
            multisets differ, otherwise None

        Raises:
            ValueError: If start and target have different dimensions
        """
        start, target = context.start, context.target
        if start.shape != target.shape:
            raise ValueError(
                f"Start board is {start.rows}x{start.cols} but target is "
                f"{target.rows}x{target.cols}"
            )

        if start == target:
            return self._build_solution(context, [], start_time)

        if not start.has_same_pieces(target):
            logger.info(f"[{self.name}] Target holds different pieces than start, infeasible")
            return self._build_solution(
                context, [], start_time, status=SolveStatus.INFEASIBLE
            )

        return None

    def _build_solution(
        self,
        context: SolutionContext,
        moves: Optional[List[Move]],
        start_time: float,
        status: SolveStatus = SolveStatus.SOLVED,
        states_explored: int = 0,
        states_generated: int = 0,
        max_frontier: int = 0,
        attempts: int = 0
    ) -> Solution:
        """Build Solution object from computation results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        if status is SolveStatus.SOLVED:
            moves = list(moves or [])
            board_states = context.start.replay(moves)
        else:
            moves = []
            board_states = [context.start]

        return Solution(
            status=status,
            moves=moves,
            board_states=board_states,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=states_explored,
                states_generated=states_generated,
                max_frontier=max_frontier,
                attempts=attempts,
                strategy_name=self.name
            )
        )

    def _not_found(self, context: SolutionContext, start_time: float, **metrics) -> Solution:
        """Build a NOT_FOUND solution."""
        return self._build_solution(
            context, None, start_time, status=SolveStatus.NOT_FOUND, **metrics
        )
