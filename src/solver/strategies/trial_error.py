"""
Trial-and-Error Strategies - Random walks restarted from the start board.

Both strategies are best-effort samplers: they may report no solution
even when one exists. Pass a seed to make runs reproducible.
"""

import logging
import random
import time
from typing import List, Optional, Tuple

from ..base import SolverStrategy
from ..move import Move
from ..context import SolutionContext
from ..errors import require_positive
from ..solution import Solution
from ..factory import register_strategy

logger = logging.getLogger(__name__)

# Moves per attempt for the fixed-budget variant
DEFAULT_MOVES_PER_ATTEMPT = 20


@register_strategy
class TrialErrorStrategy(SolverStrategy):
    """
    Repeated random walks with a fixed move budget per attempt.

    Each attempt starts fresh from the start board and plays uniformly
    random legal moves, checking for the target after every move.
    There is no visited-set pruning, so walks may revisit boards.
    Returns the first successful attempt's moves.

    Parameters:
        max_attempts: Number of walks to try (>= 1)
        seed: Optional seed for the random source
    """
    name = "trial_error"
    description = "Trial-and-Error (random) - Restarting random walks of 20 moves"
    deterministic = False

    def __init__(self, max_attempts: int = 1000, seed: Optional[int] = None):
        self.max_attempts = require_positive(max_attempts, "max_attempts")
        self.moves_per_attempt = DEFAULT_MOVES_PER_ATTEMPT
        self.seed = seed

    def solve(self, context: SolutionContext) -> Solution:
        start_time = time.perf_counter()
        trivial = self._precheck(context, start_time)
        if trivial is not None:
            return trivial

        rng = random.Random(self.seed)
        explored = generated = 0

        for attempt in range(1, self.max_attempts + 1):
            path, walked, candidates = self._attempt(context, rng)
            explored += walked
            generated += candidates

            if path is not None:
                logger.info(
                    f"[{self.name}] Solved in {len(path)} moves on attempt "
                    f"{attempt}/{self.max_attempts}"
                )
                return self._build_solution(
                    context, path, start_time,
                    states_explored=explored, states_generated=generated,
                    attempts=attempt
                )

            logger.debug(f"[{self.name}] Attempt {attempt} failed after {walked} moves")
            context.report_progress(
                attempt / self.max_attempts,
                f"{attempt}/{self.max_attempts} attempts"
            )

        logger.info(
            f"[{self.name}] No solution in {self.max_attempts} attempts of "
            f"{self.moves_per_attempt} moves"
        )
        return self._not_found(
            context, start_time,
            states_explored=explored, states_generated=generated,
            attempts=self.max_attempts
        )

    def _attempt(
        self, context: SolutionContext, rng: random.Random
    ) -> Tuple[Optional[List[Move]], int, int]:
        """
        Play one random walk.

        Returns:
            Tuple of (moves or None, moves played, candidate moves seen)
        """
        board = context.start
        moves: List[Move] = []
        candidates = 0

        for _ in range(self.moves_per_attempt):
            possible = self.find_all_valid_moves(board)
            if not possible:
                break
            candidates += len(possible)

            move = rng.choice(possible)
            moves.append(move)
            board = board.apply_move(move)

            if board == context.target:
                return moves, len(moves), candidates

        return None, len(moves), candidates


@register_strategy
class TrialErrorDepthStrategy(TrialErrorStrategy):
    """
    Repeated random walks whose per-attempt budget is a caller-supplied
    depth bound.

    Parameters:
        max_attempts: Number of walks to try (>= 1)
        depth_bound: Moves per walk (>= 1)
        seed: Optional seed for the random source
    """
    name = "trial_error_depth"
    description = "Trial-and-Error (random, bounded) - Restarting random walks up to a depth bound"

    def __init__(self, max_attempts: int = 1000, depth_bound: int = 20,
                 seed: Optional[int] = None):
        super().__init__(max_attempts=max_attempts, seed=seed)
        self.moves_per_attempt = require_positive(depth_bound, "depth_bound")

    @property
    def depth_bound(self) -> int:
        return self.moves_per_attempt
