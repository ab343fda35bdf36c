"""
Puzzles Package - Concrete search problems.

Importing this package registers the built-in puzzles.
"""

from .registry import (
    create_problem,
    get_puzzle_names,
    get_puzzle_info,
    register_puzzle,
)
from .river_state import Crossing, Entity, RiverState, Side, side_bit
from .river_crossing import GOAL, LEGAL_STATES, START, RiverCrossingProblem
from .graph import GraphProblem

__all__ = [
    "Crossing",
    "Entity",
    "RiverState",
    "Side",
    "side_bit",
    "GOAL",
    "LEGAL_STATES",
    "START",
    "RiverCrossingProblem",
    "GraphProblem",
    "create_problem",
    "get_puzzle_names",
    "get_puzzle_info",
    "register_puzzle",
]
