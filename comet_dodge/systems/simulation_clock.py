"""
simulation_clock.py
-------------------
Advances session time, score and the difficulty curve, and triggers spawns.
"""

from comet_dodge.core.runtime.game_settings import Difficulty


def advance_clock(state, dt, spawner):
    """
    Advance the session clock by one tick.

    Args:
        state (SessionState): Session being simulated.
        dt (float): Simulated seconds, already clamped by the frame ticker.
        spawner (CometSpawner): Called once when the spawn timer elapses.

    Returns:
        Comet | None: The comet spawned this tick, if any.
    """
    state.time += dt
    state.score += dt * Difficulty.SCORE_RATE
    state.speed = 1 + state.time / Difficulty.SPEED_RAMP_SECONDS
    state.spawn_interval = max(
        Difficulty.MIN_SPAWN_INTERVAL,
        Difficulty.BASE_SPAWN_INTERVAL - state.time / Difficulty.SPAWN_RAMP_SECONDS,
    )

    state.spawn_timer += dt
    if state.spawn_timer < state.spawn_interval:
        return None

    state.spawn_timer = 0.0
    comet = spawner.spawn(state.speed)
    state.comets.append(comet)
    return comet
