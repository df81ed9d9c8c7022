"""
Board State Module - Immutable board representation for the chess puzzle.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union, TYPE_CHECKING

from .errors import InvalidMoveError
from .pieces import PieceKind

if TYPE_CHECKING:
    from .move import Move


StateKey = Tuple[int, ...]

CellValue = Union[PieceKind, int, str]


@dataclass(frozen=True)
class BoardState:
    """
    Immutable board state representation.

    Uses tuple-of-tuples for hashability and immutability. Every
    transition produces a new BoardState, so boards held by different
    search nodes never share mutable state.

    Attributes:
        grid: Tuple of rows, each a tuple of PieceKind values
    """
    grid: Tuple[Tuple[PieceKind, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[CellValue]]) -> 'BoardState':
        """
        Create BoardState from nested rows.

        Cells may be PieceKind values, their integer ordinals, or
        notation symbols.

        Args:
            rows: Iterable of row sequences

        Returns:
            BoardState instance

        Raises:
            ValueError: If rows are empty, ragged, or hold unknown kinds
        """
        grid = tuple(tuple(PieceKind.coerce(cell) for cell in row) for row in rows)
        if not grid or not grid[0]:
            raise ValueError("Board must have at least one row and one column")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("All board rows must have the same length")
        return cls(grid=grid)

    @classmethod
    def from_string(cls, text: str) -> 'BoardState':
        """
        Parse the slash-separated notation, e.g. "KBB/RR.".

        Args:
            text: Rows separated by '/', one symbol per cell

        Returns:
            BoardState instance
        """
        return cls.from_rows(list(row.strip()) for row in text.strip().split("/"))

    @property
    def rows(self) -> int:
        """Get number of rows in board."""
        return len(self.grid)

    @property
    def cols(self) -> int:
        """Get number of columns in board."""
        return len(self.grid[0]) if self.rows > 0 else 0

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies on the board."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> PieceKind:
        """
        Get the kind at a cell position.

        Raises:
            IndexError: If the position is off the board
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row},{col}) is outside a {self.rows}x{self.cols} board")
        return self.grid[row][col]

    def occupied_cells(self) -> List[Tuple[int, int, PieceKind]]:
        """
        List every non-Empty cell in row-major order.

        Returns:
            List of (row, col, kind) tuples
        """
        return [
            (r, c, kind)
            for r, row in enumerate(self.grid)
            for c, kind in enumerate(row)
            if kind is not PieceKind.EMPTY
        ]

    def piece_counts(self) -> Counter:
        """Multiset of non-Empty kinds on the board."""
        return Counter(kind for _, _, kind in self.occupied_cells())

    def has_same_pieces(self, other: 'BoardState') -> bool:
        """
        Check whether both boards hold the same multiset of pieces.

        Moves only relocate pieces, so a target whose multiset differs
        from the start can never be reached.
        """
        return self.piece_counts() == other.piece_counts()

    def state_key(self) -> StateKey:
        """
        Canonical deduplication key: kind ordinals in row-major order.

        Two boards of the same shape have equal keys exactly when they
        hold the same kind in every cell.
        """
        return tuple(kind.value for row in self.grid for kind in row)

    def diff(self, other: 'BoardState') -> List[Tuple[int, int]]:
        """
        Find cells that differ between this board and another.

        Args:
            other: Another BoardState of the same shape

        Returns:
            List of (row, col) tuples where cells differ
        """
        if not isinstance(other, BoardState):
            raise TypeError("Can only diff against another BoardState")
        if other.shape != self.shape:
            raise ValueError(f"Cannot diff {self.shape} board against {other.shape} board")

        differences = []
        for r in range(self.rows):
            for c in range(self.cols):
                if self.grid[r][c] != other.grid[r][c]:
                    differences.append((r, c))

        return differences

    def apply_move(self, move: 'Move') -> 'BoardState':
        """
        Apply a move to create a new board state.

        The original board is unchanged.

        Args:
            move: Move to apply

        Returns:
            New BoardState with the piece relocated

        Raises:
            InvalidMoveError: If a coordinate is off the board, the source
                is Empty or holds a different kind, or the target is occupied
        """
        if not self.in_bounds(*move.source) or not self.in_bounds(*move.target):
            raise InvalidMoveError(f"Move {move} leaves the {self.rows}x{self.cols} board")

        moving = self.grid[move.src_row][move.src_col]
        if moving is PieceKind.EMPTY:
            raise InvalidMoveError(f"Move {move}: source cell is empty")
        if moving != move.piece:
            raise InvalidMoveError(f"Move {move}: source cell holds a {moving}")
        if self.grid[move.dst_row][move.dst_col] is not PieceKind.EMPTY:
            raise InvalidMoveError(f"Move {move}: target cell is occupied")

        # Convert to mutable list for modification
        new_grid = [list(row) for row in self.grid]
        new_grid[move.dst_row][move.dst_col] = moving
        new_grid[move.src_row][move.src_col] = PieceKind.EMPTY

        return BoardState(grid=tuple(tuple(row) for row in new_grid))

    def replay(self, moves: Iterable['Move']) -> List['BoardState']:
        """
        Apply moves in order starting from this board.

        Args:
            moves: Moves to apply

        Returns:
            This board followed by the board after each move
        """
        states = [self]
        for move in moves:
            states.append(states[-1].apply_move(move))
        return states

    def __hash__(self):
        """Enable using BoardState as dict key or in sets."""
        return hash(self.grid)

    def __eq__(self, other):
        """Cell-wise kind comparison."""
        if not isinstance(other, BoardState):
            return False
        return self.grid == other.grid

    def to_string(self) -> str:
        """Render in the slash-separated notation."""
        return "/".join("".join(kind.symbol for kind in row) for row in self.grid)

    def __str__(self) -> str:
        return "\n".join(" ".join(kind.symbol for kind in row) for row in self.grid)
