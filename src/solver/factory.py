"""
Strategy Factory Module - Registry of search strategies by name.
"""

from typing import Dict, List, Type, Any

from .base import SolverStrategy


# Global registry of strategies, in registration order
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}

DEFAULT_STRATEGY = "bfs"


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Decorator to register a strategy class under its name attribute.

    Usage:
        @register_strategy
        class IterativeDeepeningStrategy(SolverStrategy):
            name = "iddfs"
            ...

    Raises:
        ValueError: If another class already uses the name
    """
    existing = _STRATEGIES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Strategy name {cls.name!r} already registered by {existing.__name__}"
        )
    _STRATEGIES[cls.name] = cls
    return cls


def get_strategy_class(name: str) -> Type[SolverStrategy]:
    """
    Look up a registered strategy class.

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name]


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name (e.g., "bfs", "backtracking")
        **kwargs: Strategy parameters (max_depth, max_attempts, ...)

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
        SolverParameterError: If a parameter is out of range
    """
    return get_strategy_class(name)(**kwargs)


def get_strategy_names() -> List[str]:
    """Registered strategy names."""
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Describe every registered strategy for listings.

    Returns:
        List of dicts with 'name', 'description' and 'deterministic' keys
    """
    return [
        {
            "name": cls.name,
            "description": cls.description,
            "deterministic": "yes" if cls.deterministic else "no",
        }
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Get the default strategy name.

    Returns:
        "bfs" if registered, else the first registered name, else ""
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES), "")
