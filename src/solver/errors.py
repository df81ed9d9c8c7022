"""
Solver Errors - Exceptions raised by the board model and strategies.

A legitimately unsolvable puzzle is never an error: strategies report it
through Solution.status instead.
"""


class InvalidMoveError(Exception):
    """A move was applied to a board it is not legal on."""


class SolverParameterError(ValueError):
    """A strategy parameter is outside its accepted range."""


def require_positive(value: int, label: str) -> int:
    """
    Validate a strategy count/bound parameter.

    Args:
        value: Parameter value
        label: Parameter name for the error message

    Returns:
        The value unchanged

    Raises:
        SolverParameterError: If value is not an integer >= 1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise SolverParameterError(f"{label} must be an integer, got {value!r}")
    if value < 1:
        raise SolverParameterError(f"{label} must be >= 1, got {value}")
    return value
