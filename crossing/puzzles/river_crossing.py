"""
River Crossing Module - The wolf, goat and cabbage puzzle.

A peasant must ferry a wolf, a goat and a cabbage across a river in a
boat that holds the peasant and at most one passenger. Left alone, the
wolf eats the goat and the goat eats the cabbage.

The legal moves are a fixed lookup over the nine configurations that
have any. Every other configuration, the goal included, has none, which
prunes the search to exactly the reachable safe states.
"""

from typing import Dict, List, Tuple

from ..solver.problem import Problem
from .registry import register_puzzle
from .river_state import Crossing, Entity, RiverState, Side

START = RiverState.all_on(Side.RIGHT)   # 0x0F
GOAL = RiverState.all_on(Side.LEFT)     # 0xF0

# Crossings
PEASANT_LEFT = Crossing(Side.LEFT)
CABBAGE_LEFT = Crossing(Side.LEFT, Entity.CABBAGE)
GOAT_LEFT = Crossing(Side.LEFT, Entity.GOAT)
WOLF_LEFT = Crossing(Side.LEFT, Entity.WOLF)
PEASANT_RIGHT = Crossing(Side.RIGHT)
CABBAGE_RIGHT = Crossing(Side.RIGHT, Entity.CABBAGE)
GOAT_RIGHT = Crossing(Side.RIGHT, Entity.GOAT)
WOLF_RIGHT = Crossing(Side.RIGHT, Entity.WOLF)

# Configuration code -> crossings in the order they are tried
_TRANSITION_CODES: Dict[int, Tuple[Crossing, ...]] = {
    0x0F: (GOAT_LEFT,),                                 # |PCGW
    0xA5: (PEASANT_RIGHT, GOAT_RIGHT),                  # PG|CW
    0xE1: (CABBAGE_RIGHT, GOAT_RIGHT),                  # PCG|W
    0x4B: (GOAT_LEFT, WOLF_LEFT),                       # C|PGW
    0xD2: (CABBAGE_RIGHT, WOLF_RIGHT, PEASANT_RIGHT),   # PCW|G
    0x1E: (CABBAGE_LEFT, GOAT_LEFT),                    # W|PCG
    0x5A: (PEASANT_LEFT, GOAT_LEFT),                    # CW|PG
    0x2D: (PEASANT_LEFT, CABBAGE_LEFT, WOLF_LEFT),      # G|PCW
    0xB4: (GOAT_RIGHT, WOLF_RIGHT),                     # PGW|C
}

TRANSITIONS: Dict[RiverState, Tuple[Crossing, ...]] = {
    RiverState.from_bits(code): crossings
    for code, crossings in _TRANSITION_CODES.items()
}

# Every configuration in which nothing gets eaten and the puzzle can be played
LEGAL_STATES = frozenset(TRANSITIONS) | {GOAL}


@register_puzzle
class RiverCrossingProblem(Problem):
    """
    River crossing search problem.

    States are RiverState values and actions are Crossing values.
    Starts with everything on the right bank and is solved when
    everything is on the left bank, unless other states are given.
    """
    name = "river_crossing"
    description = "Wolf, goat and cabbage river crossing"

    def __init__(self, initial_state: RiverState = START, goal_state: RiverState = GOAL):
        super().__init__(initial_state, goal_state)

    def actions(self, state: RiverState) -> List[Crossing]:
        return list(TRANSITIONS.get(state, ()))

    def result(self, state: RiverState, action: Crossing) -> RiverState:
        return action.apply(state)
