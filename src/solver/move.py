"""
Move Module - Relocation of one piece from a source cell to a target cell.
"""

from dataclasses import dataclass
from typing import Tuple

from .pieces import PieceKind


Position = Tuple[int, int]


@dataclass(frozen=True)
class Move:
    """
    Moves one piece to an empty cell. No captures are modeled.

    Attributes:
        src_row: Row the piece moves from
        src_col: Column the piece moves from
        dst_row: Row the piece moves to
        dst_col: Column the piece moves to
        piece: Kind of the piece being moved
    """
    src_row: int
    src_col: int
    dst_row: int
    dst_col: int
    piece: PieceKind

    @classmethod
    def create(cls, source: Position, target: Position,
               piece: PieceKind) -> 'Move':
        """
        Create a Move from (row, col) pairs.

        Args:
            source: (row, col) of the piece
            target: (row, col) of the empty destination
            piece: Kind of the moving piece

        Returns:
            Move instance
        """
        return cls(src_row=source[0], src_col=source[1],
                   dst_row=target[0], dst_col=target[1],
                   piece=PieceKind.coerce(piece))

    @property
    def source(self) -> Position:
        """(row, col) the piece leaves."""
        return (self.src_row, self.src_col)

    @property
    def target(self) -> Position:
        """(row, col) the piece lands on."""
        return (self.dst_row, self.dst_col)

    @property
    def distance(self) -> int:
        """Chebyshev distance covered by the move."""
        return max(abs(self.dst_row - self.src_row),
                   abs(self.dst_col - self.src_col))

    def __str__(self) -> str:
        return (f"{self.piece} from ({self.src_row},{self.src_col}) "
                f"to ({self.dst_row},{self.dst_col})")
