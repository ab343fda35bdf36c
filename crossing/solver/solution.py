"""
Solution Module - Result of a search and its metrics.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Hashable, List, Optional


class SearchPhase(Enum):
    """
    Phases of a search.

    States:
        INITIALIZING: Root created, frontier not yet seeded
        EXPANDING: Dequeuing and expanding frontier nodes
        GOAL_FOUND: A goal state was reached
        EXHAUSTED: Frontier emptied without reaching a goal
        CANCELLED: Stopped by a cancel request or a context limit
    """
    INITIALIZING = auto()
    EXPANDING = auto()
    GOAL_FOUND = auto()
    EXHAUSTED = auto()
    CANCELLED = auto()


@dataclass
class SearchMetrics:
    """
    Performance metrics for one search.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        nodes_generated: Nodes created, root and discarded duplicates included
        states_expanded: States dequeued from the frontier
        duplicates_discarded: Children dropped as already explored or queued
        max_frontier_size: Largest frontier length observed
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    nodes_generated: int = 0
    states_expanded: int = 0
    duplicates_discarded: int = 0
    max_frontier_size: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a search.

    Attributes:
        actions: Ordered actions from the initial state to the goal
        states: States along the path, initial state first
        phase: Phase the search finished in
        metrics: Performance statistics
    """
    actions: List[Any] = field(default_factory=list)
    states: List[Hashable] = field(default_factory=list)
    phase: SearchPhase = SearchPhase.INITIALIZING
    metrics: SearchMetrics = field(default_factory=SearchMetrics)

    @property
    def action_count(self) -> int:
        """Number of actions in the solution."""
        return len(self.actions)

    @property
    def has_actions(self) -> bool:
        """Check if the solution has any actions."""
        return len(self.actions) > 0

    @property
    def goal_reached(self) -> bool:
        """True if the search ended on a goal state."""
        return self.phase == SearchPhase.GOAL_FOUND

    @property
    def was_cancelled(self) -> bool:
        """True if the search stopped before finishing."""
        return self.phase == SearchPhase.CANCELLED

    @property
    def final_state(self) -> Optional[Hashable]:
        """Last state on the path, or None if there is no path."""
        return self.states[-1] if self.states else None
