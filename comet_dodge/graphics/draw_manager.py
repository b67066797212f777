"""
draw_manager.py
---------------
Draws one frame of the playfield from read-only session state.

Responsibilities:
- Clear to the background colour and draw the star field
- Draw comets as two-tone discs
- Draw the ship with its glow and engine flame
"""

import pygame

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.runtime.game_settings import Colors

COMET_RINGS = 5
FLAME_LENGTH = 12
FLAME_HALF_WIDTH = 6
GLOW_PADDING = 10
GLOW_LAYERS = 2


def lerp_color(a, b, t):
    """Linear blend between two RGB tuples."""
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


class DrawManager:
    """Renderer for the playfield. Holds only the cached glow surface."""

    def __init__(self):
        DebugLogger.init_entry("DrawManager")
        self._glow = None

    def render(self, surface, state, star_field):
        """
        Draw background, stars, comets and ship.

        Args:
            surface (pygame.Surface): Target surface.
            state (SessionState): Session to draw. Not modified.
            star_field (StarField): Background stars.
        """
        surface.fill(Colors.BACKGROUND)
        star_field.render(surface)

        for comet in state.comets:
            self.draw_comet(surface, comet)
        self.draw_ship(surface, state.player)

    # ===========================================================
    # Entities
    # ===========================================================

    def draw_comet(self, surface, comet):
        """Stack shrinking discs from edge colour to core colour."""
        for ring in range(COMET_RINGS):
            t = ring / (COMET_RINGS - 1)
            radius = comet.radius * (1.0 - 0.8 * t)
            color = lerp_color(Colors.COMET_EDGE, Colors.COMET_CORE, t)
            pygame.draw.circle(surface, color, (comet.x, comet.y), radius)

    def draw_ship(self, surface, player):
        """Triangle hull pointing up, with a flame under it."""
        x, y = player.x, player.y
        hw, hh = player.half_width, player.half_height

        hull = [(x, y - hh), (x + hw, y + hh), (x - hw, y + hh)]
        flame = [
            (x, y + hh - 2),
            (x + FLAME_HALF_WIDTH, y + hh + FLAME_LENGTH),
            (x - FLAME_HALF_WIDTH, y + hh + FLAME_LENGTH),
        ]
        self.draw_glow(surface, x, y, hh)
        pygame.draw.polygon(surface, Colors.FLAME, flame)
        pygame.draw.polygon(surface, Colors.SHIP, hull)

    def draw_glow(self, surface, x, y, half_height):
        """Translucent halo behind the ship, brighter toward the middle."""
        radius = int(half_height) + GLOW_PADDING
        if self._glow is None or self._glow.get_width() != radius * 2:
            self._glow = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
            r, g, b, alpha = Colors.SHIP_GLOW
            for layer in range(GLOW_LAYERS):
                # draw.circle overwrites alpha, so inner layers carry more of it
                pygame.draw.circle(self._glow, (r, g, b, alpha * (layer + 1)), (radius, radius),
                                   radius - layer * GLOW_PADDING // GLOW_LAYERS)
        surface.blit(self._glow, (int(x) - radius, int(y) - radius))
