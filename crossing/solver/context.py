"""
Search Context Module - Problem and optional limits for one search.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .problem import Problem


@dataclass
class SearchContext:
    """
    Context passed to strategies containing the problem and the
    optional limits a caller may impose on the search.

    All limits are off by default, so a search runs to completion.

    Attributes:
        problem: Problem to solve
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = unlimited)
        max_nodes: Stop once more than this many nodes exist (None = unlimited)
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    problem: Problem
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    max_nodes: Optional[int] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[int, str], None]] = None

    def is_cancelled(self, nodes_generated: int = 0) -> bool:
        """
        Check if cancellation requested or a limit exceeded.

        Args:
            nodes_generated: Nodes created so far by the caller

        Returns:
            True if the strategy should stop
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        if self.max_nodes is not None and nodes_generated > self.max_nodes:
            return True
        return False

    def cancel(self) -> None:
        """Request cancellation."""
        self.cancel_flag.set()

    def report_progress(self, depth: int, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            depth: Current search depth
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(depth, message)

    def elapsed_time(self) -> float:
        """Seconds elapsed since computation started."""
        return time.time() - self.start_time
