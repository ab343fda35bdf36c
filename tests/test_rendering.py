"""
Tests for solution rendering.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from crossing.puzzles import Crossing, Entity, RiverCrossingProblem, RiverState, Side
from crossing.rendering import (
    ACTION_DESCRIPTIONS,
    describe_action,
    render_solution,
    render_states,
)
from crossing.solver import BreadthFirstSearch, SearchContext


def test_eight_crossings_described():
    """Each of the eight possible crossings has a line of text."""
    assert len(ACTION_DESCRIPTIONS) == 8
    assert ACTION_DESCRIPTIONS[0x08] == "Peasant crosses right."
    assert ACTION_DESCRIPTIONS[0xA0] == "Peasant and goat cross left."
    assert ACTION_DESCRIPTIONS[0x09] == "Peasant and wolf cross right."
    assert ACTION_DESCRIPTIONS[0xC0] == "Peasant and cabbage cross left."


def test_describe_accepts_crossings_and_codes():
    """Crossing values and raw action codes render the same way."""
    crossing = Crossing(Side.LEFT, Entity.WOLF)

    assert describe_action(crossing) == "Peasant and wolf cross left."
    assert describe_action(0x90) == "Peasant and wolf cross left."


def test_unrecognized_actions_skipped():
    """Unknown values produce no line."""
    assert describe_action(0x00) is None
    assert describe_action("walk") is None
    assert describe_action(None) is None
    assert render_solution([0x00, 0x80, "walk", 0xFF, 0x08]) == [
        "Peasant crosses left.",
        "Peasant crosses right.",
    ]


def test_render_shipped_solution():
    """The shipped puzzle renders as seven lines."""
    actions = BreadthFirstSearch().search(RiverCrossingProblem())

    assert render_solution(actions) == [
        "Peasant and goat cross left.",
        "Peasant crosses right.",
        "Peasant and cabbage cross left.",
        "Peasant and goat cross right.",
        "Peasant and wolf cross left.",
        "Peasant crosses right.",
        "Peasant and goat cross left.",
    ]


def test_render_empty_solution():
    """An empty solution renders as no lines."""
    assert render_solution([]) == []


def test_render_states():
    """River states render as labels, other states with str()."""
    solution = BreadthFirstSearch().solve(SearchContext(problem=RiverCrossingProblem()))
    lines = render_states(solution.states)

    assert lines[0] == "|PCGW"
    assert lines[1] == "PG|CW"
    assert lines[-1] == "PCGW|"
    assert render_states([RiverState.from_bits(0x5A), 3, "x"]) == ["CW|PG", "3", "x"]
