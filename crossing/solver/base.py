"""
Base Strategy Module - Abstract base class for search strategies.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from .context import SearchContext
from .problem import Problem
from .solution import Solution


class SearchStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes. Strategies hold no state
    between calls, so one instance can search any number of problems.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for the CLI
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SearchContext) -> Solution:
        """
        Search the context's problem and report the result with metrics.

        Must check context.is_cancelled() between expansions and stop
        with an empty solution if it returns True.

        Args:
            context: Search context with problem and limits

        Returns:
            Solution with actions, path states and metrics
        """
        pass

    def search(self, problem: Problem) -> List[Any]:
        """
        Search a problem with no limits and return only the actions.

        Args:
            problem: Problem to solve

        Returns:
            Ordered actions from the initial state to a goal, or an
            empty list if none is needed or none exists
        """
        return self.solve(SearchContext(problem=problem)).actions

    def _check_cancelled(self, context: SearchContext, nodes_generated: int) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Search context
            nodes_generated: Nodes created so far

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled(nodes_generated)
