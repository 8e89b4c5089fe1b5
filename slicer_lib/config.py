"""
Config Module - JSON Configuration Management
=============================================

Handles loading and saving the slicer settings file.
Structure:
  - "tracing": contour tracing settings (background alpha threshold)
"""

import json
import os

from .field import check_threshold
from .log import get_logger

logger = get_logger(__name__)

# Default config file path
DEFAULT_CONFIG_PATH = "slicer_config.json"

DEFAULT_MAX_BACKGROUND_ALPHA = 50

# Default config structure
DEFAULT_CONFIG = {
    "tracing": {"max_background_alpha": DEFAULT_MAX_BACKGROUND_ALPHA},
}


def load_config(path=DEFAULT_CONFIG_PATH):
    """
    Load configuration from JSON file.

    A missing file is created with the defaults. A file that cannot be read
    or parsed is left untouched and the defaults are returned.

    Parameters
    ----------
    path : str or os.PathLike
        Path to config file.

    Returns
    -------
    dict
        Configuration dictionary.
    """
    if not os.path.exists(path):
        save_config(DEFAULT_CONFIG, path)
        return _deep_copy(DEFAULT_CONFIG)

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Error loading config %s: %s", os.fspath(path), e)
        return _deep_copy(DEFAULT_CONFIG)

    if not isinstance(config, dict):
        logger.warning("Config %s is not a JSON object, using defaults", os.fspath(path))
        return _deep_copy(DEFAULT_CONFIG)

    # Ensure structure exists
    for section, values in DEFAULT_CONFIG.items():
        if not isinstance(config.get(section), dict):
            config[section] = _deep_copy(values)

    return config


def save_config(config, path=DEFAULT_CONFIG_PATH):
    """
    Save configuration to JSON file.

    Parameters
    ----------
    config : dict
        Configuration dictionary to save.
    path : str or os.PathLike
        Path to config file.
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
    except OSError as e:
        logger.warning("Error saving config %s: %s", os.fspath(path), e)


def get_tracing_config(config=None):
    """
    Get tracing settings with defaults filled in.

    Parameters
    ----------
    config : dict or None
        Full configuration dictionary. None means defaults only.

    Returns
    -------
    dict
        Copy of the "tracing" section.
    """
    result = _deep_copy(DEFAULT_CONFIG["tracing"])
    if config:
        result.update(config.get("tracing", {}))
    return result


def update_tracing_config(config, values):
    """
    Update the "tracing" section in place.

    Raises
    ------
    ValueError
        If ``max_background_alpha`` is not an integer in [0, 255].
    """
    if "max_background_alpha" in values:
        values = dict(values, max_background_alpha=check_threshold(values["max_background_alpha"]))

    if "tracing" not in config:
        config["tracing"] = {}
    config["tracing"].update(values)


def _deep_copy(obj):
    """Create a deep copy of nested dicts."""
    if isinstance(obj, dict):
        return {k: _deep_copy(v) for k, v in obj.items()}
    return obj
