"""
Puzzle Registry Module - Named problems selectable from the CLI.
"""

import logging
from typing import Any, Dict, List, Type

from ..solver.problem import Problem

logger = logging.getLogger(__name__)


# Global registry of puzzles
_PUZZLES: Dict[str, Type[Problem]] = {}


def register_puzzle(cls: Type[Problem]) -> Type[Problem]:
    """
    Decorator to register a problem class under its name attribute.

    Args:
        cls: Problem class with name and description attributes

    Returns:
        The same class (for decorator chaining)

    Raises:
        ValueError: If another class already holds the name
    """
    existing = _PUZZLES.get(cls.name)
    if existing is not None and existing.__qualname__ != cls.__qualname__:
        raise ValueError(
            f"Puzzle name '{cls.name}' already used by {existing.__qualname__}"
        )
    _PUZZLES[cls.name] = cls
    logger.debug(f"Registered puzzle: {cls.name}")
    return cls


def create_problem(name: str, **kwargs: Any) -> Problem:
    """
    Create a problem instance by name.

    Args:
        name: Puzzle name (e.g., "river_crossing")
        **kwargs: Additional arguments passed to the problem constructor

    Returns:
        Problem instance

    Raises:
        ValueError: If puzzle name not found
    """
    if name not in _PUZZLES:
        available = ", ".join(_PUZZLES.keys())
        raise ValueError(f"Unknown puzzle: {name}. Available: {available}")
    return _PUZZLES[name](**kwargs)


def get_puzzle_names() -> List[str]:
    """List registered puzzle names."""
    return list(_PUZZLES.keys())


def get_puzzle_info() -> List[Dict[str, str]]:
    """Name and description for all registered puzzles."""
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _PUZZLES.values()
    ]
