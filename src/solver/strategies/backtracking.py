"""
Backtracking Strategy - Depth-bounded search that undoes moves on failure.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from ..base import SolverStrategy
from ..board import BoardState, StateKey
from ..move import Move
from ..context import SolutionContext
from ..errors import SolverParameterError, require_positive
from ..solution import Solution
from ..visited import VisitedSet
from ..factory import register_strategy

logger = logging.getLogger(__name__)

VISITED_SCOPES = ("path", "global")


@dataclass
class _Frame:
    """A board on the current path and the moves not yet tried from it."""
    board: BoardState
    key: StateKey
    depth: int
    moves: Iterator[Move]


@dataclass
class _SearchState:
    """Mutable state of one backtracking run."""
    target: BoardState
    moves: List[Move] = field(default_factory=list)
    stack: List[_Frame] = field(default_factory=list)
    visited: VisitedSet = field(default_factory=VisitedSet)
    # Shallowest depth at which a board was fully searched without success
    failed_at: Dict[StateKey, int] = field(default_factory=dict)
    explored: int = 0
    generated: int = 0
    peak_stack: int = 0


@register_strategy
class BacktrackingStrategy(SolverStrategy):
    """
    Depth-first search that appends a move, descends, and removes the
    move again when the branch fails.

    Returns the first solution found under the generator's move order
    whose length is at most max_depth. The path is held in an explicit
    frame stack, so large bounds are limited by memory rather than the
    interpreter's recursion limit.

    visited_scope controls deduplication:
        "path":   a board is skipped only while it is on the current
                  path, so every solution within the bound is reachable.
                  Boards whose subtree already failed with at least as
                  much remaining depth are not searched again.
        "global": a board is never revisited once entered, anywhere in
                  the run. Faster, but a board first entered on a long
                  branch blocks a shorter route through it, so a solution
                  within the bound can be missed.

    max_frontier reports the longest path of expanded boards held at once.

    Parameters:
        max_depth: Longest move sequence considered (>= 1)
        visited_scope: "path" (default) or "global"
    """
    name = "backtracking"
    description = "Backtracking (bounded) - Depth-first search with path pruning"

    def __init__(self, max_depth: int = 20, visited_scope: str = "path"):
        self.max_depth = require_positive(max_depth, "max_depth")
        if visited_scope not in VISITED_SCOPES:
            raise SolverParameterError(
                f"visited_scope must be one of {', '.join(VISITED_SCOPES)}, got {visited_scope!r}"
            )
        self.visited_scope = visited_scope

    def solve(self, context: SolutionContext) -> Solution:
        start_time = time.perf_counter()
        trivial = self._precheck(context, start_time)
        if trivial is not None:
            return trivial

        state = _SearchState(target=context.target)
        found = self._search(context.start, state)

        metrics = dict(
            states_explored=state.explored,
            states_generated=state.generated,
            max_frontier=state.peak_stack
        )
        if found:
            logger.info(
                f"[Backtracking] Solved in {len(state.moves)} moves "
                f"(bound {self.max_depth}, {self.visited_scope} scope), "
                f"{state.explored} states explored"
            )
            return self._build_solution(context, state.moves, start_time, **metrics)

        logger.info(
            f"[Backtracking] No solution within {self.max_depth} moves "
            f"({self.visited_scope} scope)"
        )
        return self._not_found(context, start_time, **metrics)

    def _search(self, start: BoardState, state: _SearchState) -> bool:
        """
        Build state.moves from start.

        Returns:
            True if state.moves now leads to the target
        """
        path_scoped = self.visited_scope == "path"
        self._enter(start, 0, state)

        while state.stack:
            frame = state.stack[-1]
            move = next(frame.moves, None)

            if move is None:
                # Every move from this board failed
                state.stack.pop()
                if path_scoped:
                    state.visited.discard(frame.key)
                    state.failed_at[frame.key] = min(
                        state.failed_at.get(frame.key, frame.depth), frame.depth
                    )
                if state.stack:
                    state.moves.pop()
                continue

            successor = frame.board.apply_move(move)
            state.generated += 1
            successor_key = successor.state_key()
            if state.visited.contains(successor_key):
                continue
            if path_scoped and state.failed_at.get(successor_key, self.max_depth + 1) <= frame.depth + 1:
                continue

            state.moves.append(move)
            if successor == state.target:
                return True
            if frame.depth + 1 >= self.max_depth:
                state.moves.pop()
                continue
            self._enter(successor, frame.depth + 1, state)

        return False

    def _enter(self, board: BoardState, depth: int, state: _SearchState) -> None:
        key = board.state_key()
        state.visited.insert(key)
        state.explored += 1
        state.stack.append(_Frame(board, key, depth, iter(self.find_all_valid_moves(board))))
        state.peak_stack = max(state.peak_stack, len(state.stack))
