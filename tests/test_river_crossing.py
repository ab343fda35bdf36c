"""
Tests for the river crossing puzzle: encodings, transition table and the
shipped solution.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from crossing.puzzles import (
    GOAL,
    LEGAL_STATES,
    START,
    Crossing,
    Entity,
    RiverCrossingProblem,
    RiverState,
    Side,
    create_problem,
    get_puzzle_names,
    register_puzzle,
)
from crossing.puzzles.river_crossing import (
    CABBAGE_LEFT,
    GOAT_LEFT,
    GOAT_RIGHT,
    PEASANT_RIGHT,
    TRANSITIONS,
    WOLF_LEFT,
)
from crossing.solver import BreadthFirstSearch, SearchContext, SearchPhase

LEGAL_CODES = [0x0F, 0xF0, 0xA5, 0x5A, 0xE1, 0x1E, 0x4B, 0xB4, 0x2D, 0xD2]


def is_safe(state: RiverState) -> bool:
    """Nothing gets eaten: the goat is never left with the wolf or the cabbage."""
    goat = state.side_of(Entity.GOAT)
    if state.side_of(Entity.PEASANT) == goat:
        return True
    return (state.side_of(Entity.WOLF) != goat
            and state.side_of(Entity.CABBAGE) != goat)


# ---------------------------------------------------------------------------
# Encodings
# ---------------------------------------------------------------------------

def test_start_and_goal_codes():
    """Everything on the right is 0x0F, everything on the left is 0xF0."""
    assert START.to_bits() == 0x0F
    assert GOAL.to_bits() == 0xF0
    assert RiverState.from_bits(0x0F) == START
    assert RiverState.from_bits(0xF0) == GOAL


@pytest.mark.parametrize("code", LEGAL_CODES)
def test_legal_codes_decode(code):
    """Each legal configuration decodes with one side per entity."""
    state = RiverState.from_bits(code)

    assert state.to_bits() == code
    assert len(state.on_side(Side.LEFT)) + len(state.on_side(Side.RIGHT)) == 4


@pytest.mark.parametrize("code", [0x00, 0xFF, 0x1F, 0x0E, 0x100, -1])
def test_malformed_codes_rejected(code):
    """Codes with an entity on both sides or neither are rejected."""
    with pytest.raises(ValueError):
        RiverState.from_bits(code)


def test_state_requires_one_side_per_entity():
    """A state must list exactly one side for each entity."""
    with pytest.raises(ValueError):
        RiverState(sides=(Side.LEFT, Side.RIGHT))


def test_state_label():
    """Labels show the left bank, a bar, then the right bank."""
    assert START.label == "|PCGW"
    assert GOAL.label == "PCGW|"
    assert RiverState.from_bits(0xA5).label == "PG|CW"
    assert str(RiverState.from_bits(0x4B)) == "C|PGW"


def test_with_moved_returns_new_state():
    """Moving entities leaves the original state unchanged."""
    moved = START.with_moved([Entity.PEASANT, Entity.GOAT], Side.LEFT)

    assert moved.to_bits() == 0xA5
    assert START.to_bits() == 0x0F


def test_crossing_codes():
    """Crossing codes set the peasant's bit and the passenger's bit on the destination side."""
    assert Crossing(Side.LEFT).to_bits() == 0x80
    assert GOAT_LEFT.to_bits() == 0xA0
    assert Crossing(Side.RIGHT, Entity.WOLF).to_bits() == 0x09
    assert Crossing.from_bits(0x0C) == Crossing(Side.RIGHT, Entity.CABBAGE)
    assert Crossing.from_bits(0x08) == PEASANT_RIGHT


@pytest.mark.parametrize("code", [0x00, 0x01, 0x88, 0x0B, 0x90 | 0x08, 0xA1])
def test_malformed_crossing_codes_rejected(code):
    """Codes that are not a single peasant trip are rejected."""
    with pytest.raises(ValueError):
        Crossing.from_bits(code)


def test_peasant_is_not_a_passenger():
    """The peasant cannot ride as their own passenger."""
    with pytest.raises(ValueError):
        Crossing(Side.LEFT, Entity.PEASANT)


def test_crossing_apply():
    """Applying a crossing moves the peasant and passenger."""
    state = RiverState.from_bits(0x2D)  # G|PCW

    assert CABBAGE_LEFT.apply(state).to_bits() == 0xE1
    assert str(CABBAGE_LEFT) == "PC->left"


# ---------------------------------------------------------------------------
# Transition table
# ---------------------------------------------------------------------------

def test_table_covers_nine_configurations():
    """Nine configurations have moves; the goal is the tenth legal one."""
    assert len(TRANSITIONS) == 9
    assert GOAL not in TRANSITIONS
    assert {s.to_bits() for s in LEGAL_STATES} == set(LEGAL_CODES)


def test_every_legal_state_is_safe():
    """Every legal configuration is safe."""
    assert all(is_safe(state) for state in LEGAL_STATES)


def test_transitions_stay_legal():
    """Every listed move leads to another legal configuration."""
    problem = RiverCrossingProblem()
    for state, crossings in TRANSITIONS.items():
        for crossing in problem.actions(state):
            assert crossing in crossings
            assert crossing.destination != state.side_of(Entity.PEASANT)
            if crossing.passenger is not None:
                assert state.side_of(crossing.passenger) == state.side_of(Entity.PEASANT)
            assert problem.result(state, crossing) in LEGAL_STATES


def test_no_actions_outside_table():
    """The goal and unlisted configurations have no moves."""
    problem = RiverCrossingProblem()

    assert problem.actions(GOAL) == []
    assert problem.actions(RiverState.from_bits(0x3C)) == []  # GW|PC


def test_action_order_matches_table():
    """actions() returns moves in table order."""
    problem = RiverCrossingProblem()
    state = RiverState.from_bits(0x2D)

    assert problem.actions(state) == [
        Crossing(Side.LEFT),
        CABBAGE_LEFT,
        WOLF_LEFT,
    ]


# ---------------------------------------------------------------------------
# Solving
# ---------------------------------------------------------------------------

def test_solves_in_seven_crossings():
    """The shipped puzzle solves in the classical seven crossings."""
    actions = BreadthFirstSearch().search(RiverCrossingProblem())

    assert actions == [
        GOAT_LEFT,
        PEASANT_RIGHT,
        CABBAGE_LEFT,
        GOAT_RIGHT,
        WOLF_LEFT,
        PEASANT_RIGHT,
        GOAT_LEFT,
    ]
    assert [a.to_bits() for a in actions] == [0xA0, 0x08, 0xC0, 0x0A, 0x90, 0x08, 0xA0]


def test_solution_path_is_safe():
    """Every configuration along the solution is legal and safe."""
    problem = RiverCrossingProblem()
    solution = BreadthFirstSearch().solve(SearchContext(problem=problem))

    assert solution.phase == SearchPhase.GOAL_FOUND
    assert solution.states[0] == START
    assert solution.final_state == GOAL
    assert len(solution.states) == solution.action_count + 1

    state = START
    for action, expected in zip(solution.actions, solution.states[1:]):
        state = problem.result(state, action)
        assert state == expected
        assert state in LEGAL_STATES
        assert is_safe(state)


def test_solution_metrics():
    """The search expands each of the nine playable configurations once."""
    solution = BreadthFirstSearch().solve(SearchContext(problem=RiverCrossingProblem()))
    metrics = solution.metrics

    assert metrics.states_expanded == 9
    assert metrics.nodes_generated == 20
    assert metrics.duplicates_discarded == 10
    assert metrics.max_frontier_size == 2


def test_goal_as_start_is_trivial():
    """Starting at the goal needs no crossings."""
    problem = RiverCrossingProblem(initial_state=GOAL)
    solution = BreadthFirstSearch().solve(SearchContext(problem=problem))

    assert solution.actions == []
    assert solution.goal_reached


def test_reverse_direction_has_no_solution():
    """The table only plays right to left, so the reverse trip is unsolvable."""
    problem = RiverCrossingProblem(initial_state=GOAL, goal_state=START)
    solution = BreadthFirstSearch().solve(SearchContext(problem=problem))

    assert solution.actions == []
    assert solution.phase == SearchPhase.EXHAUSTED


def test_intermediate_goal():
    """Any legal configuration can serve as the goal."""
    goal = RiverState.from_bits(0xE1)  # PCG|W
    actions = BreadthFirstSearch().search(RiverCrossingProblem(goal_state=goal))

    assert actions == [GOAT_LEFT, PEASANT_RIGHT, CABBAGE_LEFT]


def test_puzzle_registry():
    """The river crossing puzzle is available by name."""
    assert "river_crossing" in get_puzzle_names()
    problem = create_problem("river_crossing")

    assert isinstance(problem, RiverCrossingProblem)
    assert problem.initial_state == START
    assert problem.goal_state == GOAL

    with pytest.raises(ValueError):
        create_problem("missionaries")


def test_duplicate_puzzle_name_rejected():
    """Another class cannot replace the registered river crossing puzzle."""
    with pytest.raises(ValueError, match="already used by RiverCrossingProblem"):
        @register_puzzle
        class OtherRiverProblem(RiverCrossingProblem):
            name = "river_crossing"

    assert type(create_problem("river_crossing")) is RiverCrossingProblem
    assert register_puzzle(RiverCrossingProblem) is RiverCrossingProblem
