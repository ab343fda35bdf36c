"""
Rendering Module - Human-readable text for river crossing solutions.
"""

import logging
from typing import Any, Dict, Hashable, Iterable, List, Optional

from .puzzles.river_state import Entity, RiverState, Side, side_bit

logger = logging.getLogger(__name__)


def _describe(side: Side, passenger: Optional[Entity]) -> str:
    direction = side.name.lower()
    if passenger is None:
        return f"Peasant crosses {direction}."
    return f"Peasant and {passenger.name.lower()} cross {direction}."


def _code(side: Side, passenger: Optional[Entity]) -> int:
    code = side_bit(Entity.PEASANT, side)
    if passenger is not None:
        code |= side_bit(passenger, side)
    return code


# Action code -> line of text
ACTION_DESCRIPTIONS: Dict[int, str] = {
    _code(side, passenger): _describe(side, passenger)
    for side in (Side.RIGHT, Side.LEFT)
    for passenger in (None, Entity.CABBAGE, Entity.GOAT, Entity.WOLF)
}


def describe_action(action: Any) -> Optional[str]:
    """
    Look up the text for one action.

    Accepts Crossing values or raw 8-bit action codes.

    Args:
        action: Action to describe

    Returns:
        Line of text, or None if the action is not recognized
    """
    to_bits = getattr(action, "to_bits", None)
    code = to_bits() if callable(to_bits) else action
    if not isinstance(code, int):
        return None
    return ACTION_DESCRIPTIONS.get(code)


def render_solution(actions: Iterable[Any]) -> List[str]:
    """
    Render a solution as one line per recognized action.

    Unrecognized actions are skipped.

    Args:
        actions: Ordered actions from a search

    Returns:
        Lines of text in solution order
    """
    lines = []
    for action in actions:
        line = describe_action(action)
        if line is None:
            logger.debug(f"Skipping unrecognized action: {action!r}")
            continue
        lines.append(line)
    return lines


def render_states(states: Iterable[Hashable]) -> List[str]:
    """
    Render the states along a path, one per line.

    River states print as left bank | right bank; anything else uses str().
    """
    return [state.label if isinstance(state, RiverState) else str(state) for state in states]
