"""
hud_manager.py
--------------
Score, best and lives readout along the top of the playfield.
"""

import pygame

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.runtime.game_settings import Colors

HUD_MARGIN = 12
HUD_FONT_SIZE = 24


def format_hud(score, best, lives):
    """Return the three HUD labels in display order."""
    return (f"Score: {score}", f"Best: {best}", f"Lives: {lives}")


class HUDManager:
    """Renders HUD text. Reads values only; never writes session state."""

    def __init__(self, width):
        self.width = width
        self.font = pygame.font.Font(None, HUD_FONT_SIZE)
        self._cache = {}
        DebugLogger.init_sub("HUDManager initialized")

    def _text(self, label):
        surf = self._cache.get(label)
        if surf is None:
            surf = self.font.render(label, True, Colors.HUD_TEXT)
            self._cache[label] = surf
            if len(self._cache) > 64:
                self._cache.clear()
        return surf

    def draw(self, surface, score, best, lives):
        """Draw score on the left, best in the middle, lives on the right."""
        score_text, best_text, lives_text = (self._text(t) for t in format_hud(score, best, lives))

        surface.blit(score_text, (HUD_MARGIN, HUD_MARGIN))
        surface.blit(best_text, ((self.width - best_text.get_width()) // 2, HUD_MARGIN))
        surface.blit(lives_text, (self.width - lives_text.get_width() - HUD_MARGIN, HUD_MARGIN))
