"""
Strategy Factory Module - Name-to-class registry for search strategies.

Strategy modules register themselves with @register_strategy when the
strategies package is imported; the CLI then looks them up by name.
"""

import logging
from typing import Any, Dict, List, Type

from .base import SearchStrategy

logger = logging.getLogger(__name__)

# Used when neither the CLI nor config.json names a strategy
DEFAULT_STRATEGY = "bfs"

_STRATEGIES: Dict[str, Type[SearchStrategy]] = {}


def register_strategy(cls: Type[SearchStrategy]) -> Type[SearchStrategy]:
    """
    Class decorator adding a strategy to the registry under cls.name.

    Re-registering the same class is a no-op, so reloading a strategy
    module is harmless.

    Raises:
        ValueError: If the class keeps the base placeholder name or
            another class already holds the name
    """
    name = cls.name
    if not name or name == SearchStrategy.name:
        raise ValueError(f"{cls.__name__} must define its own strategy name")

    existing = _STRATEGIES.get(name)
    if existing is not None and existing.__qualname__ != cls.__qualname__:
        raise ValueError(
            f"Strategy name '{name}' already used by {existing.__qualname__}"
        )

    _STRATEGIES[name] = cls
    logger.debug(f"Registered strategy: {name} ({cls.__qualname__})")
    return cls


def create_strategy(name: str, **kwargs: Any) -> SearchStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Registered strategy name (e.g., "bfs")
        **kwargs: Passed to the strategy constructor

    Raises:
        ValueError: If no strategy has that name
    """
    try:
        cls = _STRATEGIES[name]
    except KeyError:
        available = ", ".join(sorted(_STRATEGIES)) or "none"
        raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None
    return cls(**kwargs)


def get_strategy_names() -> List[str]:
    """Registered strategy names, in registration order."""
    return list(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, str]]:
    """Name and description of each registered strategy, for --list."""
    return [
        {"name": name, "description": cls.description}
        for name, cls in _STRATEGIES.items()
    ]


def get_default_strategy_name() -> str:
    """
    Strategy to use when none is configured.

    DEFAULT_STRATEGY if registered, else the first registered name, else "".
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES), "")
