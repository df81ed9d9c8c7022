"""
Solution Context Module - Inputs shared by a single strategy run.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .board import BoardState


@dataclass
class SolutionContext:
    """
    Context passed to strategies containing the start and target
    boards plus optional progress reporting.

    Strategies run to completion on the calling thread; there is no
    cancellation. Callers needing bounded latency use the depth and
    attempt parameters of the strategy.

    Attributes:
        start: Board the search begins from
        target: Board the search must reach
        progress_callback: Optional callback for progress updates
    """
    start: BoardState
    target: BoardState
    progress_callback: Optional[Callable[[float, str], None]] = None

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)
