"""
Graph Problem Module - Search problem over an explicit transition table.
"""

from typing import Any, Dict, Hashable, List, Mapping, Sequence, Tuple

from ..solver.problem import Problem


class GraphProblem(Problem):
    """
    Problem defined by a table of labelled edges.

    Each state maps to an ordered list of (action, next_state) pairs.
    States missing from the table have no actions. Handy for small
    synthetic graphs, including ones with cycles or unreachable goals.

    Attributes:
        edges: State -> ordered (action, next_state) pairs
    """

    def __init__(self, edges: Mapping[Hashable, Sequence[Tuple[Any, Hashable]]],
                 initial_state: Hashable, goal_state: Hashable):
        """
        Initialize the problem.

        Args:
            edges: State -> ordered (action, next_state) pairs
            initial_state: State the search starts from
            goal_state: State that satisfies the goal test

        Raises:
            ValueError: If a state lists the same action twice
        """
        super().__init__(initial_state, goal_state)
        self.edges: Dict[Hashable, List[Tuple[Any, Hashable]]] = {}
        self._results: Dict[Hashable, Dict[Any, Hashable]] = {}
        for state, pairs in edges.items():
            pairs = list(pairs)
            results = dict(pairs)
            if len(results) != len(pairs):
                raise ValueError(f"Duplicate action in edges of state {state!r}")
            self.edges[state] = pairs
            self._results[state] = results

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[Hashable, Sequence[Hashable]],
                       initial_state: Hashable, goal_state: Hashable) -> "GraphProblem":
        """
        Build a problem where the action is the neighbor to move to.

        Args:
            adjacency: State -> ordered neighbor states
            initial_state: State the search starts from
            goal_state: State that satisfies the goal test

        Returns:
            GraphProblem instance
        """
        edges = {
            state: [(neighbor, neighbor) for neighbor in neighbors]
            for state, neighbors in adjacency.items()
        }
        return cls(edges, initial_state, goal_state)

    @property
    def states(self) -> List[Hashable]:
        """Every state named in the table, in first-seen order."""
        seen: Dict[Hashable, None] = {}
        for state, pairs in self.edges.items():
            seen.setdefault(state)
            for _, next_state in pairs:
                seen.setdefault(next_state)
        return list(seen)

    def actions(self, state: Hashable) -> List[Any]:
        return [action for action, _ in self.edges.get(state, ())]

    def result(self, state: Hashable, action: Any) -> Hashable:
        return self._results[state][action]
