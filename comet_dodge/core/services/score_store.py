"""
score_store.py
--------------
Key-value persistence for the best score.

Values are stored as strings. The file-backed store keeps a flat JSON
object on disk; unreadable or corrupt files are treated as empty.
"""

import json
import math
import os
from typing import Optional

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.runtime.game_settings import Persistence


# ===========================================================
# Stores
# ===========================================================

class MemoryScoreStore:
    """In-process store, used for tests and when no file is wanted."""

    def __init__(self, initial=None):
        self._data = {k: str(v) for k, v in (initial or {}).items()}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)


class ScoreStore(MemoryScoreStore):
    """JSON-file backed store. Every set() is written through to disk."""

    def __init__(self, path=Persistence.DEFAULT_PATH):
        """
        Args:
            path: File holding the JSON object of stored values.
        """
        super().__init__()
        self.path = path
        self._data = self._load()

    def set(self, key: str, value: str) -> None:
        super().set(key, value)
        self._save()

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError, OSError) as e:
            DebugLogger.warn(f"Failed to read {self.path}: {e} - starting empty",
                             category="persistence")
            return {}

        if not isinstance(data, dict):
            DebugLogger.warn(f"Ignoring non-object data in {self.path}", category="persistence")
            return {}

        DebugLogger.system(f"Loaded {os.path.basename(self.path)}", category="persistence")
        return {str(k): str(v) for k, v in data.items()}

    def _save(self):
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
        except (IOError, OSError) as e:
            DebugLogger.warn(f"Failed to save {self.path}: {e}", category="persistence")


# ===========================================================
# Best Score Helpers
# ===========================================================

def parse_best(raw) -> int:
    """
    Parse a stored best score. Missing or malformed values read as 0.

    Args:
        raw: String from the store, or None.

    Returns:
        int: Non-negative floored best score.
    """
    if raw is None:
        return 0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        DebugLogger.warn(f"Malformed best score {raw!r}, using 0", category="persistence")
        return 0
    if not math.isfinite(value) or value < 0:
        return 0
    return int(math.floor(value))


def read_best(store, key=Persistence.BEST_KEY) -> int:
    """Read the best score from a store."""
    return parse_best(store.get(key))


def write_best(store, best: int, key=Persistence.BEST_KEY) -> None:
    """Persist the best score as its decimal string."""
    store.set(key, str(int(best)))
    DebugLogger.action(f"Best score saved: {best}", category="persistence")
