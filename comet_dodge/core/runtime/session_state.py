"""
session_state.py
----------------
Container for everything one game session mutates.
Owned by a SessionController; never module-global.
"""

import math
from enum import Enum

from comet_dodge.core.runtime.game_settings import Difficulty


class SessionPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class SessionState:
    """Score, lives, difficulty and the entities of a single session."""

    def __init__(self, player, stars, best=0):
        """
        Args:
            player (Player): Ship reused across sessions.
            stars (list[Star]): Fixed background star list.
            best (int): Best score loaded from persistence.
        """
        self.phase = SessionPhase.IDLE
        self.best = best
        self.player = player
        self.stars = stars
        self.comets = []
        self.reset()

    @property
    def running(self):
        return self.phase is SessionPhase.RUNNING

    @property
    def display_score(self):
        """Score as shown on the HUD and saved as best."""
        return int(math.floor(self.score))

    def reset(self):
        """Reset per-session values. Preserves best score and stars."""
        self.score = 0.0
        self.lives = Difficulty.STARTING_LIVES
        self.speed = 1.0
        self.spawn_timer = 0.0
        self.spawn_interval = Difficulty.BASE_SPAWN_INTERVAL
        self.time = 0.0
        self.comets.clear()
