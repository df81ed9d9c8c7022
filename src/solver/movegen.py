"""
Move Generator - Legal move enumeration per piece kind.

The generator is the single source of truth for legality: strategies
expand boards with legal_moves() and consumers replaying a solution
check moves with is_legal_move().
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .board import BoardState
from .move import Move
from .pieces import PieceKind


Direction = Tuple[int, int]  # (row delta, col delta)


# King: column delta outer loop, row delta inner loop
KING_STEPS: Tuple[Direction, ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)

DIAGONAL_RAYS: Tuple[Direction, ...] = ((-1, -1), (1, -1), (-1, 1), (1, 1))

# Left, up, right, down
ORTHOGONAL_RAYS: Tuple[Direction, ...] = ((0, -1), (-1, 0), (0, 1), (1, 0))


@dataclass(frozen=True)
class MoveRule:
    """
    Movement rule for one piece kind.

    Attributes:
        directions: Directions tried, in this order
        sliding: True if the piece keeps stepping along a direction
                 until it leaves the board or meets another piece
    """
    directions: Tuple[Direction, ...]
    sliding: bool


MOVE_RULES: Dict[PieceKind, MoveRule] = {
    PieceKind.KING: MoveRule(KING_STEPS, sliding=False),
    PieceKind.BISHOP: MoveRule(DIAGONAL_RAYS, sliding=True),
    PieceKind.ROOK: MoveRule(ORTHOGONAL_RAYS, sliding=True),
}


def piece_targets(board: BoardState, row: int, col: int) -> List[Tuple[int, int]]:
    """
    Enumerate the empty cells the piece at (row, col) can move to.

    A piece never moves zero squares and never lands on or passes
    through an occupied cell.

    Args:
        board: Current board state
        row: Row of the piece
        col: Column of the piece

    Returns:
        List of (row, col) targets in the rule's direction order
    """
    rule = MOVE_RULES.get(board.get_cell(row, col))
    if rule is None:
        return []

    targets = []
    for dr, dc in rule.directions:
        r, c = row + dr, col + dc
        while board.in_bounds(r, c) and board.grid[r][c] is PieceKind.EMPTY:
            targets.append((r, c))
            if not rule.sliding:
                break
            r, c = r + dr, c + dc

    return targets


def legal_moves(board: BoardState) -> List[Move]:
    """
    Find all legal moves on the board.

    Ordering is deterministic: sources in row-major order, then each
    piece's own direction order. Depth-first strategies depend on it.

    Args:
        board: Current board state

    Returns:
        List of legal Move objects
    """
    moves = []
    for row, col, kind in board.occupied_cells():
        for target in piece_targets(board, row, col):
            moves.append(Move.create((row, col), target, kind))
    return moves


def is_legal_move(board: BoardState, move: Move) -> bool:
    """
    Check a move against the generator's rules.

    Args:
        board: Board the move would be applied to
        move: Candidate move

    Returns:
        True if the move is one legal_moves() would produce
    """
    if not board.in_bounds(*move.source):
        return False
    if board.get_cell(*move.source) != move.piece:
        return False
    return move.target in piece_targets(board, *move.source)
