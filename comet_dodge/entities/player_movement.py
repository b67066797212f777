"""
player_movement.py
------------------
Handles player acceleration, damping and playfield-boundary logic.

Responsibilities
----------------
- Translate left/right intent into horizontal acceleration.
- Apply per-tick damping when no steering key is held.
- Clamp velocity to the ship's top speed and position to the playfield.
"""

from comet_dodge.core.runtime.game_settings import Display, PlayerDefaults


def update_movement(player, intent, dt, playfield_width=Display.WIDTH):
    """
    Update the player's velocity and position from steering intent.

    Left and right are applied as independent branches, so holding both
    keys applies both accelerations in the same tick.

    Args:
        player (Player): The ship being updated.
        intent (MoveIntent): Sampled (left, right) steering booleans.
        dt (float): Simulated seconds for this tick.
        playfield_width (float): Horizontal extent of the playfield.
    """
    if intent.left:
        player.vx -= player.accel * dt
    if intent.right:
        player.vx += player.accel * dt

    # Multiplicative decay, once per tick
    if not intent.left and not intent.right:
        player.vx *= PlayerDefaults.DAMPING

    player.vx = max(-player.max_speed, min(player.max_speed, player.vx))

    player.x += player.vx * dt
    clamp_to_playfield(player, playfield_width)


def clamp_to_playfield(player, playfield_width=Display.WIDTH):
    """Keep the ship's centre inside its allowed horizontal range."""
    min_x, max_x = player.bounds(playfield_width)
    player.x = max(min_x, min(max_x, player.x))
