"""
Problem Module - Abstract search problem definition.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, List


class Problem(ABC):
    """
    Abstract base class for search problems.

    A problem supplies an initial state, a goal state, the actions
    legal in each state and the state that results from applying one.
    States and actions are opaque to the search engine; they only need
    well-defined equality and hashing.

    Subclasses must implement actions() and result(). They may override
    is_goal() to accept more than one goal state.

    Attributes:
        initial_state: State the search starts from
        goal_state: Designated goal state
    """

    def __init__(self, initial_state: Hashable, goal_state: Hashable):
        """
        Initialize the problem.

        Args:
            initial_state: State the search starts from
            goal_state: State that satisfies the goal test
        """
        self.initial_state = initial_state
        self.goal_state = goal_state

    @abstractmethod
    def actions(self, state: Hashable) -> List[Any]:
        """
        Return every action legal in the given state.

        Must be a pure function of state. The returned order decides
        which sibling is tried first during search. Terminal or
        unrecognized states return an empty list.

        Args:
            state: State to enumerate actions for

        Returns:
            Ordered list of legal actions
        """
        pass

    @abstractmethod
    def result(self, state: Hashable, action: Any) -> Hashable:
        """
        Return the state reached by applying action to state.

        Callers only pass actions returned by actions(state); the
        result for any other action is unspecified.

        Args:
            state: Current state
            action: Action legal in state

        Returns:
            Successor state
        """
        pass

    def is_goal(self, state: Hashable) -> bool:
        """True if state equals the goal state."""
        return state == self.goal_state
