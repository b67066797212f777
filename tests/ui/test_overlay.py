"""
test_overlay.py
---------------
Unit tests for the Start / Game Over panels and HUD labels.
"""

import random
from types import SimpleNamespace

import pygame
import pytest

from comet_dodge.core.runtime.session_controller import SessionController
from comet_dodge.core.runtime.session_state import SessionPhase
from comet_dodge.core.services.score_store import MemoryScoreStore
from comet_dodge.ui.hud_manager import format_hud
from comet_dodge.ui.overlay import Overlay, panel_for


@pytest.fixture
def controller():
    return SessionController(MemoryScoreStore(), rng=random.Random(8))


@pytest.fixture
def overlay(controller):
    return Overlay(controller, controller.width, controller.height)


def click(pos):
    return SimpleNamespace(type=pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def key(code):
    return SimpleNamespace(type=pygame.KEYDOWN, key=code, unicode="")


# ===========================================================
# Panels
# ===========================================================

def test_panel_per_phase():
    assert panel_for(SessionPhase.IDLE).button == "Start"
    assert panel_for(SessionPhase.RUNNING) is None

    ended = panel_for(SessionPhase.ENDED, final_score=31)
    assert ended.title == "Game Over"
    assert ended.body == "Score: 31"
    assert ended.button == "Restart"


# ===========================================================
# Controls
# ===========================================================

def test_start_button_click_starts_session(overlay, controller):
    assert overlay.handle_event(click(overlay.button_rect.center))
    assert controller.phase is SessionPhase.RUNNING
    assert overlay.panel is None


def test_click_outside_button_does_nothing(overlay, controller):
    assert not overlay.handle_event(click((1, 1)))
    assert controller.phase is SessionPhase.IDLE


def test_enter_key_starts_session(overlay, controller):
    assert overlay.handle_event(key(pygame.K_RETURN))
    assert controller.phase is SessionPhase.RUNNING


def test_overlay_ignores_input_while_running(overlay, controller):
    controller.start()

    assert not overlay.handle_event(key(pygame.K_SPACE))
    assert controller.phase is SessionPhase.RUNNING


def test_game_over_shows_final_score_and_restarts(overlay, controller):
    controller.start()
    controller.state.score = 57.8
    controller.end()

    assert overlay.panel.body == "Score: 57"

    assert overlay.handle_event(click(overlay.button_rect.center))
    assert controller.phase is SessionPhase.RUNNING
    assert controller.state.score == 0
    assert controller.state.best == 57


def test_closed_overlay_stops_tracking_final_score(overlay, controller):
    overlay.close()
    controller.start()
    controller.state.score = 40
    controller.end()

    assert overlay.final_score == 0


# ===========================================================
# HUD
# ===========================================================

def test_hud_labels():
    assert format_hud(33, 75, 2) == ("Score: 33", "Best: 75", "Lives: 2")


def test_hud_values_floor_score(controller):
    controller.start()
    controller.state.score = 12.99

    assert controller.hud_values() == (12, 0, 3)
