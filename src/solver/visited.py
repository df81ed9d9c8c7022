"""
Visited Set - Deduplication of board states within one search run.
"""

from typing import Set

from .board import BoardState, StateKey


class VisitedSet:
    """
    Set of StateKey values seen during a single run.

    Keys carry no move history, so two boards reached by different
    paths collapse onto one entry. The set grows monotonically unless
    a caller discards keys explicitly (path-scoped backtracking).
    """

    def __init__(self):
        self._keys: Set[StateKey] = set()

    def contains(self, key: StateKey) -> bool:
        return key in self._keys

    def insert(self, key: StateKey) -> bool:
        """
        Add a key.

        Returns:
            True if the key was not present before
        """
        if key in self._keys:
            return False
        self._keys.add(key)
        return True

    def discard(self, key: StateKey) -> None:
        self._keys.discard(key)

    def contains_board(self, board: BoardState) -> bool:
        return self.contains(board.state_key())

    def insert_board(self, board: BoardState) -> bool:
        return self.insert(board.state_key())

    def __contains__(self, key: StateKey) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return len(self._keys)
