"""
conftest.py
-----------
Shared pytest configuration and fixtures for Comet Dodge tests.

Contains:
- Headless SDL drivers so pygame never opens a window
- Console logging silenced for every test
- Seeded controllers, mock persistence and spawner helpers
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random
from unittest.mock import MagicMock

import pytest

from comet_dodge.core.debug.debug_logger import LoggerConfig
from comet_dodge.core.runtime.session_controller import SessionController
from comet_dodge.entities.comet import Comet


# ===========================================================
# Logging
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep test output free of console log lines."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Common Fixtures
# ===========================================================

@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def mock_score_store():
    """Store mock with no saved best score."""
    store = MagicMock()
    store.get.return_value = None
    return store


@pytest.fixture
def controller(mock_score_store, rng):
    """Controller in the Idle phase with a seeded random source."""
    return SessionController(mock_score_store, held_keys=set(), rng=rng)


class EdgeSpawner:
    """Spawner that always drops small comets against the left wall."""

    def __init__(self):
        self.calls = 0

    def spawn(self, speed_multiplier):
        self.calls += 1
        return Comet(x=10.0, y=-20.0, radius=10.0, speed=200.0)


@pytest.fixture
def edge_spawner():
    return EdgeSpawner()


@pytest.fixture
def safe_controller(mock_score_store, rng, edge_spawner):
    """Controller whose comets never reach the centred ship."""
    return SessionController(mock_score_store, held_keys=set(), rng=rng, spawner=edge_spawner)


@pytest.fixture
def place_comet_on_player():
    """Factory putting a stationary comet directly on top of the ship."""
    def _place(state, radius=12.0, speed=0.0):
        comet = Comet(state.player.x, state.player.y, radius, speed)
        state.comets.append(comet)
        return comet
    return _place


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
