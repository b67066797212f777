"""
overlay.py
----------
Start and Game Over panels with their single button.

Responsibilities
----------------
- Pick the panel for the session phase (none while running).
- Turn button clicks and Enter/Space into Start or Restart requests.
- Remember the final score from SessionEndedEvent for the Game Over text.
"""

import pygame

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.runtime.game_settings import Colors
from comet_dodge.core.runtime.session_state import SessionPhase
from comet_dodge.core.services.event_manager import SessionEndedEvent

PANEL_SIZE = (360, 220)
BUTTON_SIZE = (160, 44)
CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)


class Panel:
    """Text and button action for one overlay screen."""

    __slots__ = ("title", "body", "button", "action")

    def __init__(self, title, body, button, action):
        self.title = title
        self.body = body
        self.button = button
        self.action = action


def panel_for(phase, final_score=0):
    """
    Panel shown in a given phase.

    Returns:
        Panel | None: None while a session is running.
    """
    if phase is SessionPhase.IDLE:
        return Panel("Comet Dodge",
                     "Move with A/D or arrow keys. Survive the comet storm.",
                     "Start", "start")
    if phase is SessionPhase.ENDED:
        return Panel("Game Over", f"Score: {final_score}", "Restart", "restart")
    return None


class Overlay:
    """Modal panel over the playfield, bound to a SessionController."""

    def __init__(self, controller, width, height):
        self.controller = controller
        self.final_score = 0

        self.panel_rect = pygame.Rect((0, 0), PANEL_SIZE)
        self.panel_rect.center = (width // 2, height // 2)
        self.button_rect = pygame.Rect((0, 0), BUTTON_SIZE)
        self.button_rect.midbottom = (self.panel_rect.centerx, self.panel_rect.bottom - 24)

        self._fonts = None
        controller.events.subscribe(SessionEndedEvent, self._on_session_ended)
        DebugLogger.init_sub("Overlay initialized")

    @property
    def panel(self):
        return panel_for(self.controller.phase, self.final_score)

    def _on_session_ended(self, event):
        self.final_score = event.score

    def close(self):
        """Stop listening for session events."""
        self.controller.events.unsubscribe(SessionEndedEvent, self._on_session_ended)

    # ===========================================================
    # Input
    # ===========================================================

    def handle_event(self, event):
        """
        Trigger the visible panel's button.

        Returns:
            bool: True if the event activated the button.
        """
        if self.panel is None:
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.button_rect.collidepoint(event.pos):
                return self.activate()
        elif event.type == pygame.KEYDOWN and event.key in CONFIRM_KEYS:
            return self.activate()
        return False

    def activate(self):
        """Run the current panel's action on the controller."""
        panel = self.panel
        if panel is None:
            return False

        DebugLogger.action(f"Overlay button: {panel.button}", category="ui")
        if panel.action == "start":
            self.controller.start()
        else:
            self.controller.restart()
        return True

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, surface):
        """Draw the panel if one is visible."""
        panel = self.panel
        if panel is None:
            return

        if self._fonts is None:
            self._fonts = (pygame.font.Font(None, 44), pygame.font.Font(None, 22))
        title_font, body_font = self._fonts

        shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 120))
        surface.blit(shade, (0, 0))

        box = pygame.Surface(self.panel_rect.size, pygame.SRCALPHA)
        box.fill(Colors.PANEL)
        surface.blit(box, self.panel_rect.topleft)
        pygame.draw.rect(surface, Colors.PANEL_BORDER, self.panel_rect, 2, border_radius=8)

        title = title_font.render(panel.title, True, Colors.HUD_TEXT)
        surface.blit(title, title.get_rect(midtop=(self.panel_rect.centerx, self.panel_rect.top + 24)))

        body = body_font.render(panel.body, True, Colors.HUD_TEXT)
        surface.blit(body, body.get_rect(midtop=(self.panel_rect.centerx, self.panel_rect.top + 84)))

        hovered = self.button_rect.collidepoint(pygame.mouse.get_pos())
        pygame.draw.rect(surface, Colors.BUTTON_HOVER if hovered else Colors.BUTTON,
                         self.button_rect, border_radius=6)
        label = body_font.render(panel.button, True, Colors.BUTTON_TEXT)
        surface.blit(label, label.get_rect(center=self.button_rect.center))
