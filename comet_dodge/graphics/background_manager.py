"""
background_manager.py
---------------------
Scrolling star field drawn behind the playfield.

Provides a fixed set of stars that:
- Drift downward at individual parallax speeds
- Speed up with the session's difficulty multiplier
- Wrap back to the top instead of being destroyed
"""

import random

import pygame

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.runtime.game_settings import Colors, Display, Stars


class Star:
    """Single background star."""

    __slots__ = ("x", "y", "radius", "speed")

    def __init__(self, x, y, radius, speed):
        self.x = x
        self.y = y
        self.radius = radius
        self.speed = speed


class StarField:
    """
    Fixed-size parallax star field.

    The star list is allocated once; update() only moves and recycles
    existing stars.
    """

    __slots__ = ("width", "height", "rng", "stars")

    def __init__(self, width=Display.WIDTH, height=Display.HEIGHT,
                 count=Stars.COUNT, rng=None):
        """
        Args:
            width: Playfield width in pixels.
            height: Playfield height in pixels.
            count: Number of stars to allocate.
            rng (random.Random, optional): Random source for placement.
        """
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.stars = [self._make_star() for _ in range(count)]
        DebugLogger.init_sub(f"StarField: {count} stars")

    def _make_star(self):
        rand = self.rng.random
        return Star(
            x=rand() * self.width,
            y=rand() * self.height,
            radius=rand() * Stars.RADIUS_RANGE + Stars.MIN_RADIUS,
            speed=rand() * Stars.SPEED_RANGE + Stars.MIN_SPEED,
        )

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, dt, speed_multiplier):
        """
        Scroll every star and wrap those that left the bottom edge.

        Args:
            dt: Simulated seconds for this tick.
            speed_multiplier: Session difficulty multiplier.
        """
        parallax = Stars.BASE_PARALLAX + speed_multiplier * Stars.PARALLAX_PER_MULTIPLIER
        wrap_y = self.height + Stars.WRAP_MARGIN

        for star in self.stars:
            star.y += star.speed * dt * parallax
            if star.y > wrap_y:
                star.y = -Stars.WRAP_MARGIN
                star.x = self.rng.random() * self.width

    # ===========================================================
    # Render
    # ===========================================================

    def render(self, surface):
        """Draw all stars as soft white dots."""
        layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for star in self.stars:
            pygame.draw.circle(layer, Colors.STAR, (star.x, star.y), star.radius)
        surface.blit(layer, (0, 0))
