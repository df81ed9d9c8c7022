"""
Solution Module - Result of strategy computation and move-by-move playback.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from .board import BoardState
from .move import Move, Position
from .movegen import is_legal_move

logger = logging.getLogger(__name__)


class SolveStatus(Enum):
    """Outcome of a strategy run."""
    SOLVED = auto()
    NOT_FOUND = auto()     # Search space or budget exhausted
    INFEASIBLE = auto()    # Piece multisets differ; no search performed


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of boards expanded
        states_generated: Number of successor boards produced
        max_frontier: Peak size of the queue/stack/open set (for
            backtracking, the longest path of expanded boards)
        attempts: Randomized attempts used (0 for deterministic strategies)
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    states_generated: int = 0
    max_frontier: int = 0
    attempts: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    An empty move list is a success only when status is SOLVED (start
    already equals target). NOT_FOUND and INFEASIBLE always carry an
    empty move list.

    Attributes:
        status: Outcome of the run
        moves: Ordered sequence of moves to execute
        metrics: Performance statistics
        board_states: Board state after each move (first is the start)
    """
    status: SolveStatus
    moves: List[Move] = field(default_factory=list)
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)
    board_states: List[BoardState] = field(default_factory=list)

    @property
    def found(self) -> bool:
        """True if the strategy reached the target."""
        return self.status is SolveStatus.SOLVED

    @property
    def is_infeasible(self) -> bool:
        return self.status is SolveStatus.INFEASIBLE

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def has_moves(self) -> bool:
        """Check if solution has any moves."""
        return len(self.moves) > 0

    @property
    def final_board(self) -> Optional[BoardState]:
        """Board after the last move, or None when no boards were recorded."""
        return self.board_states[-1] if self.board_states else None

    def get_move(self, index: int) -> Move:
        """
        Get move at specific index.

        Args:
            index: Move index (0-based)

        Returns:
            Move at index

        Raises:
            IndexError: If index out of range
        """
        return self.moves[index]

    def get_board_after_move(self, index: int) -> BoardState:
        """
        Get board state after executing move at index.

        Args:
            index: Move index (0-based)

        Returns:
            BoardState after move (index+1 in board_states)

        Raises:
            IndexError: If index out of range
        """
        return self.board_states[index + 1]


@dataclass
class SolutionCursor:
    """
    Tracks progress through a solution for consumers that replay it
    against their own play board one move at a time.

    Attributes:
        solution: The solution being replayed
        move_index: Current position in move sequence (0 = first move)
    """
    solution: Solution
    move_index: int = 0

    @property
    def current_move(self) -> Optional[Move]:
        """Get next move to play, or None if exhausted."""
        if self.move_index < len(self.solution.moves):
            return self.solution.moves[self.move_index]
        return None

    @property
    def expected_board_before(self) -> Optional[BoardState]:
        """Get expected board state before current move executes."""
        if self.move_index < len(self.solution.board_states):
            return self.solution.board_states[self.move_index]
        return None

    @property
    def expected_board_after(self) -> Optional[BoardState]:
        """Get expected board state after current move executes."""
        if self.move_index + 1 < len(self.solution.board_states):
            return self.solution.board_states[self.move_index + 1]
        return None

    @property
    def is_exhausted(self) -> bool:
        """True if all moves have been consumed."""
        return self.move_index >= len(self.solution.moves)

    @property
    def moves_remaining(self) -> int:
        """Number of moves left in the solution."""
        return max(0, len(self.solution.moves) - self.move_index)

    @property
    def total_moves(self) -> int:
        """Total number of moves in the solution."""
        return len(self.solution.moves)

    def advance(self) -> Optional[Move]:
        """
        Move to next move in sequence.

        Returns:
            The move that was just completed, or None if exhausted
        """
        if self.is_exhausted:
            return None
        completed_move = self.current_move
        self.move_index += 1
        return completed_move

    def peek_moves(self, count: int = 3) -> List[Move]:
        """
        Preview upcoming moves without advancing.

        Args:
            count: Number of moves to preview

        Returns:
            List of upcoming moves (may be shorter than count)
        """
        start = self.move_index
        end = min(start + count, len(self.solution.moves))
        return self.solution.moves[start:end]

    def validate_next_move(self, board: BoardState) -> bool:
        """
        Check that the current move is legal on the caller's board.

        Args:
            board: Caller's play board before the move

        Returns:
            True if a move remains and the move generator accepts it
        """
        move = self.current_move
        if move is None:
            return False
        return is_legal_move(board, move)

    def validate_board_match(self, actual: BoardState) -> bool:
        """
        Check if the caller's board matches the expected board after
        the current move.

        Args:
            actual: Caller's play board after playing the move

        Returns:
            True if boards match cell for cell
        """
        expected = self.expected_board_after
        if expected is None or actual.shape != expected.shape:
            return False
        mismatches = self.mismatched_cells(actual)
        if mismatches:
            logger.debug(f"[Cursor] Move {self.move_index + 1} diverged at cells {mismatches}")
        return not mismatches

    def mismatched_cells(self, actual: BoardState) -> List[Position]:
        """
        Cells where the caller's board differs from the expected board
        after the current move, in row-major order.

        Raises:
            ValueError: If no move remains or the board shapes differ
        """
        expected = self.expected_board_after
        if expected is None:
            raise ValueError("No move remains to compare against")
        return expected.diff(actual)
