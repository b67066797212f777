"""
session_controller.py
---------------------
Owns one game session from start to game over.

Responsibilities
----------------
- Run the Idle -> Running -> Ended state machine (restart re-enters Running).
- Drive each tick in order: clock/spawner, movement and stars, collisions.
- Update and persist the best score when a session ends.
- Publish session events for presentation code.
"""

import random

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.runtime.frame_ticker import FrameTicker
from comet_dodge.core.runtime.game_settings import Display
from comet_dodge.core.runtime.session_state import SessionPhase, SessionState
from comet_dodge.core.services.event_manager import (
    EventManager,
    PlayerHitEvent,
    SessionEndedEvent,
    SessionStartedEvent,
)
from comet_dodge.core.services.input_manager import sample_direction
from comet_dodge.core.services.score_store import MemoryScoreStore, read_best, write_best
from comet_dodge.entities.player import Player
from comet_dodge.entities.player_movement import update_movement
from comet_dodge.graphics.background_manager import StarField
from comet_dodge.systems.collision_manager import CollisionManager
from comet_dodge.systems.simulation_clock import advance_clock
from comet_dodge.systems.spawn_manager import CometSpawner


class SessionController:
    """
    Game session state machine.

    Usage:
        controller = SessionController(store, held_keys=input_manager.held_keys)
        controller.start()
        controller.ticker.frame(now)   # once per display refresh
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, store=None, held_keys=None, rng=None, events=None,
                 ticker=None, spawner=None,
                 width=Display.WIDTH, height=Display.HEIGHT):
        """
        Args:
            store: Key-value store holding the best score (get/set).
            held_keys: Live set of held key identifiers, read every tick.
            rng (random.Random, optional): Shared random source.
            events (EventManager, optional): Event bus for session events.
            ticker (FrameTicker, optional): Frame scheduler.
            spawner (CometSpawner, optional): Comet factory override.
            width: Playfield width.
            height: Playfield height.
        """
        self.width = width
        self.height = height
        self.store = store if store is not None else MemoryScoreStore()
        self.held_keys = held_keys if held_keys is not None else set()
        self.events = events or EventManager()
        self.ticker = ticker or FrameTicker()

        rng = rng or random.Random()
        self.spawner = spawner or CometSpawner(width, rng=rng)
        self.star_field = StarField(width, height, rng=rng)
        self.collisions = CollisionManager(height)

        # Best score is read once per process
        self.state = SessionState(
            Player.spawn(width, height),
            self.star_field.stars,
            best=read_best(self.store),
        )
        DebugLogger.init_entry("SessionController")
        DebugLogger.init_sub(f"Best score loaded: {self.state.best}")

    @property
    def phase(self):
        return self.state.phase

    # ===========================================================
    # Transitions
    # ===========================================================

    def start(self):
        """Reset the session and begin ticking."""
        state = self.state
        if state.phase is SessionPhase.RUNNING:
            DebugLogger.warn("Start ignored, session already running", category="session")
            return

        state.reset()
        state.player.recenter(self.width)
        state.phase = SessionPhase.RUNNING

        self.ticker.start(self.tick)
        DebugLogger.state("Session started")
        self.events.dispatch(SessionStartedEvent(best=state.best))

    def restart(self):
        """Start a fresh session after game over."""
        if self.state.phase is not SessionPhase.ENDED:
            DebugLogger.warn(f"Restart ignored in phase {self.state.phase.value}", category="session")
            return
        self.start()

    def end(self):
        """Stop ticking, update and persist the best score."""
        state = self.state
        if state.phase is not SessionPhase.RUNNING:
            DebugLogger.warn(f"End ignored in phase {state.phase.value}", category="session")
            return

        self.ticker.stop()
        final_score = state.display_score
        state.best = max(state.best, final_score)
        write_best(self.store, state.best)
        state.phase = SessionPhase.ENDED

        DebugLogger.state(f"Session ended: score={final_score} best={state.best}")
        self.events.dispatch(SessionEndedEvent(score=final_score, best=state.best))

    # ===========================================================
    # Simulation
    # ===========================================================

    def tick(self, dt):
        """
        Advance the running session by one frame.

        Args:
            dt (float): Elapsed seconds, clamped to the ticker's max step.
        """
        state = self.state
        if state.phase is not SessionPhase.RUNNING:
            return

        dt = self.ticker.clamp(dt)

        advance_clock(state, dt, self.spawner)

        update_movement(state.player, sample_direction(self.held_keys), dt, self.width)
        self.star_field.update(dt, state.speed)

        lives_before = state.lives
        hits = self.collisions.update(state, dt)
        for n in range(1, hits + 1):
            self.events.dispatch(PlayerHitEvent(lives_left=lives_before - n))

        if state.lives <= 0:
            self.end()

    # ===========================================================
    # Presentation Snapshot
    # ===========================================================

    def hud_values(self):
        """Return (score, best, lives) as the HUD shows them."""
        state = self.state
        return state.display_score, state.best, state.lives
