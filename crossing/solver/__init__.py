"""
Solver Package - Generic uninformed search over lazily expanded state graphs.

This package provides the problem interface, the search tree and a
pluggable strategy framework. Strategies can be selected at runtime by
name from the CLI.

Public API:
    - Problem: Abstract search problem
    - SearchNode / NodeArena: Search tree held in an index-addressed pool
    - Solution: Result of a search
    - SearchMetrics: Performance statistics
    - SearchPhase: Phase a search finished in
    - SearchContext: Problem plus optional cancellation and limits
    - SearchStrategy: Abstract base for strategies
    - BreadthFirstSearch: Shortest-path breadth-first graph search
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from crossing.solver import create_strategy, SearchContext
    from crossing.puzzles import RiverCrossingProblem

    strategy = create_strategy("bfs")

    # Plain search returns the action list
    actions = strategy.search(RiverCrossingProblem())

    # Instrumented search returns path states and metrics too
    solution = strategy.solve(SearchContext(problem=RiverCrossingProblem()))
    print(f"{solution.action_count} actions, "
          f"{solution.metrics.states_expanded} states expanded")
"""

# Core data structures
from .problem import Problem
from .node import SearchNode, NodeArena, ROOT_PARENT
from .solution import Solution, SearchMetrics, SearchPhase
from .context import SearchContext

# Strategy framework
from .base import SearchStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies
from .strategies import BreadthFirstSearch

__all__ = [
    # Data structures
    "Problem",
    "SearchNode",
    "NodeArena",
    "ROOT_PARENT",
    "Solution",
    "SearchMetrics",
    "SearchPhase",
    "SearchContext",
    # Strategy framework
    "SearchStrategy",
    "BreadthFirstSearch",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
]
