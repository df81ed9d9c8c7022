"""
Piece Module - Closed set of piece kinds that can occupy a board cell.
"""

from enum import Enum
from typing import Dict, Union


class PieceKind(Enum):
    """
    Kind tag stored in every board cell.

    The integer value is the ordinal used by the board's state key,
    so existing values must never be renumbered.
    """
    EMPTY = 0
    KING = 1
    BISHOP = 2
    ROOK = 3

    @property
    def symbol(self) -> str:
        """Single-character notation for this kind."""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'PieceKind':
        """
        Parse a notation symbol ('.', 'K', 'B', 'R', case-insensitive).

        Raises:
            ValueError: If the symbol is unknown
        """
        try:
            return _KINDS_BY_SYMBOL[symbol.upper()]
        except KeyError:
            raise ValueError(f"Unknown piece symbol: {symbol!r}") from None

    @classmethod
    def coerce(cls, value: Union['PieceKind', int, str]) -> 'PieceKind':
        """Convert a kind, ordinal or symbol into a PieceKind."""
        if isinstance(value, PieceKind):
            return value
        if isinstance(value, str):
            return cls.from_symbol(value)
        return cls(value)

    def __str__(self) -> str:
        return self.name.capitalize()


_SYMBOLS: Dict[PieceKind, str] = {
    PieceKind.EMPTY: ".",
    PieceKind.KING: "K",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
}

_KINDS_BY_SYMBOL: Dict[str, PieceKind] = {s: k for k, s in _SYMBOLS.items()}
