"""
Settings Module for the Chess Puzzle Solver

Provides persistent storage for solver defaults using JSON.
Settings are stored in config.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Settings file location (project root)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "strategy_name": "bfs",
    "max_depth": 20,
    "max_attempts": 1000,
    "depth_bound": 20,
    "seed": None,
    "heuristic": "manhattan_all",
    "debug_enabled": False
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file (defaults to SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = Path(path) if path is not None else SETTINGS_FILE
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(settings, dict):
        logger.warning("Settings file does not hold an object, using defaults")
        return DEFAULT_SETTINGS.copy()

    # Merge with defaults to handle missing keys
    result = DEFAULT_SETTINGS.copy()
    result.update(settings)
    logger.debug(f"Settings loaded: {result}")
    return result


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file (defaults to SETTINGS_FILE)
    """
    path = Path(path) if path is not None else SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")


def strategy_params(settings: Dict[str, Any], strategy_name: str) -> Dict[str, Any]:
    """
    Pick the constructor parameters a strategy accepts from settings.

    Args:
        settings: Effective settings
        strategy_name: Registered strategy name

    Returns:
        Keyword arguments for create_strategy()
    """
    keys = {
        "dfs": ("max_depth",),
        "backtracking": ("max_depth",),
        "trial_error": ("max_attempts", "seed"),
        "trial_error_depth": ("max_attempts", "depth_bound", "seed"),
        "astar": ("heuristic",),
    }.get(strategy_name, ())
    return {key: settings[key] for key in keys if key in settings}
