"""
Settings Module for Crossing Solver

Provides persistent storage for user preferences using JSON.
Settings are stored in config.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Tuple

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "strategy_name": "bfs",
    "puzzle_name": "river_crossing",
    "log_level": "INFO",
    "timeout_sec": None,
    "max_nodes": None,
}

# Accepted value types per key; keys whose default is None also accept None
SETTING_TYPES: Dict[str, Tuple[type, ...]] = {
    "strategy_name": (str,),
    "puzzle_name": (str,),
    "log_level": (str,),
    "timeout_sec": (int, float),
    "max_nodes": (int,),
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file to read (default: SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = path or SETTINGS_FILE
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)

        if not isinstance(settings, dict):
            logger.warning(f"Settings file {path} is not a JSON object, using defaults")
            return DEFAULT_SETTINGS.copy()

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        _replace_invalid(result)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file to write (default: SETTINGS_FILE)
    """
    path = path or SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")


def _is_valid(key: str, value: Any) -> bool:
    """Check a value against SETTING_TYPES. bool is never accepted as a number."""
    if value is None:
        return DEFAULT_SETTINGS.get(key) is None
    if isinstance(value, bool):
        return False
    return isinstance(value, SETTING_TYPES[key])


def _replace_invalid(settings: Dict[str, Any]) -> None:
    """Reset known keys holding a value of the wrong type to their defaults."""
    for key in SETTING_TYPES:
        if not _is_valid(key, settings[key]):
            logger.warning(
                f"Invalid value for setting '{key}': {settings[key]!r}, "
                f"using default {DEFAULT_SETTINGS[key]!r}"
            )
            settings[key] = DEFAULT_SETTINGS[key]
