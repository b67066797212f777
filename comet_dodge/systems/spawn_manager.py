"""
spawn_manager.py
----------------
Creates comets with randomized size, column and fall speed.

Responsibilities
----------------
- Produce one comet per call, fully inside the playfield horizontally.
- Scale fall speed with the current difficulty multiplier.
- Draw all randomness from an injectable random.Random.
"""

import random

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.runtime.game_settings import Comets, Display
from comet_dodge.entities.comet import Comet


class CometSpawner:
    """Comet factory bound to a playfield width and a random source."""

    def __init__(self, playfield_width=Display.WIDTH, rng=None):
        """
        Args:
            playfield_width: Horizontal extent comets must fit within.
            rng (random.Random, optional): Random source, a fresh one if omitted.
        """
        self.playfield_width = playfield_width
        self.rng = rng or random.Random()
        self.total_spawned = 0

    def spawn(self, speed_multiplier):
        """
        Create a single comet just above the visible top edge.

        Args:
            speed_multiplier (float): Current difficulty multiplier.

        Returns:
            Comet: The new comet, not yet attached to any session.
        """
        rand = self.rng.random
        radius = rand() * Comets.RADIUS_RANGE + Comets.MIN_RADIUS
        x = rand() * (self.playfield_width - radius * 2) + radius
        y = -radius - Comets.SPAWN_GAP
        speed = (rand() * Comets.SPEED_RANGE + Comets.MIN_SPEED
                 + speed_multiplier * Comets.SPEED_PER_MULTIPLIER)

        self.total_spawned += 1
        comet = Comet(x, y, radius, speed)
        DebugLogger.trace(f"Spawned {comet}", category="spawn")
        return comet
