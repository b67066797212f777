"""
config_manager.py
-----------------
Configuration loader for optional JSON overrides.

Features:
- Looks up bare filenames in a small list of search directories
- Recursively merges overrides onto defaults
- Ignores '_notes' keys for human-readable configs
"""

import copy
import json
import os

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.runtime.game_settings import Display, Persistence


# ===========================================================
# Configuration
# ===========================================================

SEARCH_DIRS = [
    ".",
    "config",
]

DEFAULT_SETTINGS = {
    "display": {
        "fps": Display.FPS,
        "caption": Display.CAPTION,
    },
    "persistence": {
        "path": Persistence.DEFAULT_PATH,
    },
    "logging": {
        "level": "INFO",
    },
}


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file merged over defaults.

    Args:
        filename: Filename or path to a .json file
        default_dict: Default fallback config
        strict: If True, raise on missing or invalid file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = _resolve_search_path(filename)

    try:
        data = _load_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"top-level value is {type(data).__name__}, expected object")
        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, ValueError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or invalid: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults")
        return copy.deepcopy(default_dict)


def load_settings(filename=None):
    """
    Load runtime settings, falling back to DEFAULT_SETTINGS.

    Args:
        filename: Optional settings file. None returns the defaults.
    """
    if filename is None:
        return copy.deepcopy(DEFAULT_SETTINGS)
    return load_config(filename, DEFAULT_SETTINGS)


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """Return the first existing match in SEARCH_DIRS, or the name unchanged."""
    if os.path.isabs(filename) or os.path.exists(filename):
        return filename

    for directory in SEARCH_DIRS:
        candidate = os.path.join(directory, filename)
        if os.path.exists(candidate):
            return candidate

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = copy.deepcopy(default)
    for key, value in override.items():
        if key == "_notes":
            continue
        if key in merged and isinstance(merged[key], dict):
            if not isinstance(value, dict):
                DebugLogger.warn(f"Ignoring '{key}': expected object, got {type(value).__name__}")
                continue
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
