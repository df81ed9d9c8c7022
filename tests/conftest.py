"""
Shared fixtures for solver tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.solver import BoardState, legal_moves, REFERENCE_START, REFERENCE_TARGET


@pytest.fixture
def reference_start() -> BoardState:
    """K B B / R R . - the puzzle's start board."""
    return BoardState.from_string(REFERENCE_START)


@pytest.fixture
def reference_target() -> BoardState:
    """. B B / R R K - the king has moved to the far corner."""
    return BoardState.from_string(REFERENCE_TARGET)


@pytest.fixture
def reachable_boards(reference_start):
    """Every board reachable from the reference start, via the move generator."""
    seen = {reference_start}
    frontier = [reference_start]
    while frontier:
        board = frontier.pop()
        for move in legal_moves(board):
            nxt = board.apply_move(move)
            if nxt not in seen:
                seen.add(nxt)
                frontier.append(nxt)
    return seen
