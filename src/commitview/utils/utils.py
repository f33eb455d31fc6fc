# commitview/utils/utils.py
"""
commitview.utils.utils
======================

Core utility functions for the commitview history browser.

Key functionalities include:
- Robust Configuration Loading: a hardcoded, built-in default configuration
  recursively merged with user settings from `~/.config/commitview/config.toml`.
- Helper Utilities: deep-merging dictionaries and display-width measurement
  of terminal text.

The application is always runnable, even if the user configuration file is
missing or corrupted, by falling back to the embedded defaults.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from wcwidth import wcwidth

logger = logging.getLogger("commitview")

# This dictionary is the ultimate fallback, ensuring the application can ALWAYS start.
DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "file_level": "DEBUG",
        "console_level": "WARNING",
        "log_to_console": False,
        "separate_error_log": False,
    },
    "gui": {
        "horizontal_scroll_factor": 3,
        "use_system_clipboard": True,
        "popup_views": [
            "commitMessage",
            "credentials",
            "confirmation",
            "menu",
            "suggestions",
        ],
    },
}


def get_user_config_path() -> Path:
    """Returns the location of the user's `config.toml`."""
    return Path.home() / ".config" / "commitview" / "config.toml"


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Loads and merges configurations, ensuring the application can always run.
    """
    final_config = copy.deepcopy(DEFAULT_CONFIG)
    logger.debug("Loaded embedded default configuration.")

    user_config_path = path if path is not None else get_user_config_path()
    if user_config_path.is_file():
        try:
            user_config = toml.load(user_config_path)
            final_config = deep_merge(final_config, user_config)
            logger.info(f"Successfully loaded and merged user config from {user_config_path}")
        except (toml.TomlDecodeError, OSError) as e:
            logger.error(f"Could not parse user config '{user_config_path}': {e}. Using defaults.")

    return final_config


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Recursively merges the `override` dictionary into the `base` dictionary.
    """
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def get_char_width(ch: str) -> int:
    """Return width (0-2 cells) of a single code point; control chars count as 0."""
    w = wcwidth(ch)
    return w if w > 0 else 0


def get_string_width(text: str) -> int:
    """Return the number of terminal cells *text* occupies."""
    return sum(get_char_width(ch) for ch in text)
