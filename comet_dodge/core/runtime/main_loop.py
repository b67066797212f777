"""
main_loop.py
------------
Core game loop orchestrating timing, events, simulation and rendering.

Responsibilities:
- Initialize pygame, the window and the clock
- Route key events to the InputManager and the overlay
- Drive the session's FrameTicker once per display frame
- Draw playfield, HUD and overlay
"""

import random

import pygame

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.runtime.game_settings import Display
from comet_dodge.core.runtime.session_controller import SessionController
from comet_dodge.core.services.input_manager import InputManager
from comet_dodge.core.services.score_store import ScoreStore
from comet_dodge.graphics.draw_manager import DrawManager
from comet_dodge.ui.hud_manager import HUDManager
from comet_dodge.ui.overlay import Overlay


class MainLoop:
    """Owns the window and runs frames until the user quits."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, settings, seed=None):
        """
        Args:
            settings (dict): Merged runtime settings (see config_manager).
            seed (int, optional): Seed for comet and star placement.
        """
        DebugLogger.section("Initializing MainLoop")
        self.settings = settings
        self.fps = settings["display"]["fps"]

        self._init_pygame(settings["display"]["caption"])
        self._init_session(settings["persistence"]["path"], seed)

        self.draw_manager = DrawManager()
        self.hud = HUDManager(Display.WIDTH)
        self.overlay = Overlay(self.controller, Display.WIDTH, Display.HEIGHT)

    def _init_pygame(self, caption):
        """Initialize pygame subsystems and window."""
        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(caption)
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT} '{caption}'")

    def _init_session(self, best_path, seed):
        """Create input, persistence and the session controller."""
        self.input_manager = InputManager()
        self.store = ScoreStore(best_path)
        self.controller = SessionController(
            self.store,
            held_keys=self.input_manager.held_keys,
            rng=random.Random(seed),
        )

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Execute frames until quit. One simulation tick per frame."""
        DebugLogger.section("Game Loop")

        while self.running:
            self.clock.tick(self.fps)
            self._handle_events()
            self.controller.ticker.frame(pygame.time.get_ticks() / 1000.0)
            self._draw()

        self.overlay.close()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if self.overlay.handle_event(event):
                continue
            self.input_manager.handle_event(event)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.draw_manager.render(self.screen, self.controller.state, self.controller.star_field)
        self.hud.draw(self.screen, *self.controller.hud_values())
        self.overlay.draw(self.screen)
        pygame.display.flip()
