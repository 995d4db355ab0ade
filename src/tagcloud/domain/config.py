from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last used run parameters as JSON inside
the user data directory, with default fallback on missing or corrupted
files.
"""

import json
import logging
import os
from typing import Any, Dict

from tagcloud.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_STYLESHEETS,
    DEFAULT_WORD_COUNT,
    FONT_MAX,
    FONT_MIN,
    SEPARATOR_CHARS,
)
from tagcloud.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default run configuration.

    An empty 'output_path' means the document is written next to the
    input file with an '.html' extension.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": "",
        "output_path": "",

        # Selection
        "word_count": DEFAULT_WORD_COUNT,
        "separators": SEPARATOR_CHARS,

        # Rendering
        "font_min": FONT_MIN,
        "font_max": FONT_MAX,
        "stylesheets": list(DEFAULT_STYLESHEETS),
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default structure of config.json.

    Returns:
        Dict[str, Any]: Versioned state with the last session parameters.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    default_state = get_default_app_state()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return default_state

    state = default_state
    session = data.get("last_session")
    if isinstance(session, dict):
        state["last_session"].update(session)

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """Retrieve the last session parameters merged over the defaults."""
    state = load_app_state()
    defaults = get_default_config()
    defaults.update(state.get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> None:
    """Save the provided config as the 'last_session'."""
    state = load_app_state()
    state["last_session"] = config
    save_app_state(state)
