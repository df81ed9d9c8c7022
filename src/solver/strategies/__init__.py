"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .bfs import BreadthFirstStrategy
from .dfs import DepthFirstStrategy
from .backtracking import BacktrackingStrategy
from .trial_error import TrialErrorStrategy, TrialErrorDepthStrategy
from .astar import AStarStrategy

__all__ = [
    "BreadthFirstStrategy",
    "DepthFirstStrategy",
    "BacktrackingStrategy",
    "TrialErrorStrategy",
    "TrialErrorDepthStrategy",
    "AStarStrategy",
]
