"""
Breadth-First Strategy - Uninformed graph search for the shortest action sequence.

Expands nodes in FIFO order, so every node at depth d is dequeued before
any node at depth d+1. Children are checked against both the explored
set and the states currently queued, which keeps the search finite on
graphs with cycles and guarantees no state is expanded twice.
"""

import time
import logging
from collections import deque
from typing import Any, Deque, Hashable, List, Optional, Set

from ..base import SearchStrategy
from ..context import SearchContext
from ..node import NodeArena, SearchNode
from ..solution import SearchMetrics, SearchPhase, Solution
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class BreadthFirstSearch(SearchStrategy):
    """
    Breadth-first graph search.

    Algorithm:
        1. Create the root from the initial state; if it is already a
           goal, return the empty solution without expanding it
        2. Dequeue the front node and add its state to the explored set
        3. For each action, build the child:
           - goal state: return the child's solution immediately
           - state neither explored nor queued: append to the frontier
           - otherwise: discard it as a duplicate
        4. If the frontier empties, return an empty solution

    The first goal found has the minimum number of actions. Ties between
    equally short solutions go to whichever child the problem's actions()
    lists first, then to whichever parent was dequeued first.
    """
    name = "bfs"
    description = "Breadth-first search - Shortest solution by action count"

    def solve(self, context: SearchContext) -> Solution:
        """
        Run breadth-first search on the context's problem.

        Args:
            context: Search context with problem and limits

        Returns:
            Solution with actions, path states, final phase and metrics
        """
        start_time = time.perf_counter()
        problem = context.problem
        metrics = SearchMetrics(strategy_name=self.name)
        arena = NodeArena()
        phase = SearchPhase.INITIALIZING

        root = arena.root(problem.initial_state)
        if problem.is_goal(root.state):
            logger.debug("Initial state is already a goal")
            phase = self._transition(phase, SearchPhase.GOAL_FOUND)
            return self._build_solution(root, phase,
                                        arena, metrics, start_time)

        frontier: Deque[SearchNode] = deque([root])
        frontier_states: Set[Hashable] = {root.state}
        explored: Set[Hashable] = set()
        metrics.max_frontier_size = 1
        depth = 0

        logger.debug(f"Search started from {root.state!r}")
        phase = self._transition(phase, SearchPhase.EXPANDING)

        while frontier:
            if self._check_cancelled(context, len(arena)):
                logger.info(f"Search cancelled after {metrics.states_expanded} expansions")
                phase = self._transition(phase, SearchPhase.CANCELLED)
                return self._build_solution(None, phase,
                                            arena, metrics, start_time)

            node = frontier.popleft()
            frontier_states.discard(node.state)
            explored.add(node.state)
            metrics.states_expanded += 1

            if node.depth > depth:
                depth = node.depth
                context.report_progress(depth, f"{len(explored)} states explored")

            for action in problem.actions(node.state):
                child = node.child_node(problem, action)

                if problem.is_goal(child.state):
                    logger.debug(f"Goal reached at depth {child.depth}")
                    phase = self._transition(phase, SearchPhase.GOAL_FOUND)
                    return self._build_solution(child, phase,
                                                arena, metrics, start_time)

                if child.state in explored or child.state in frontier_states:
                    metrics.duplicates_discarded += 1
                    continue

                frontier.append(child)
                frontier_states.add(child.state)

            metrics.max_frontier_size = max(metrics.max_frontier_size, len(frontier))

        logger.debug(f"Frontier exhausted after {metrics.states_expanded} expansions")
        phase = self._transition(phase, SearchPhase.EXHAUSTED)
        return self._build_solution(None, phase,
                                    arena, metrics, start_time)

    def _transition(self, current: SearchPhase, new: SearchPhase) -> SearchPhase:
        """Log a phase change and return the new phase."""
        logger.debug(f"{self.name}: {current.name} -> {new.name}")
        return new

    def _build_solution(
        self,
        goal_node: Optional[SearchNode],
        phase: SearchPhase,
        arena: NodeArena,
        metrics: SearchMetrics,
        start_time: float
    ) -> Solution:
        """Extract actions and states from the goal node, then release the arena."""
        actions: List[Any] = []
        states: List[Hashable] = []
        if goal_node is not None:
            actions = goal_node.solution()
            states = [node.state for node in goal_node.path()]

        metrics.nodes_generated = len(arena)
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        arena.clear()

        logger.info(
            f"{self.name}: {phase.name}, {len(actions)} actions, "
            f"{metrics.states_expanded} expanded, {metrics.nodes_generated} nodes, "
            f"{metrics.computation_time_ms:.1f}ms"
        )
        return Solution(actions=actions, states=states, phase=phase, metrics=metrics)
