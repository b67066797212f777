"""
collision_manager.py
--------------------
Moves active comets and resolves them against the player's bounding box.

Responsibilities
----------------
- Advance each comet's fall for the tick.
- Drop comets that have left the bottom of the playfield (no penalty).
- Remove comets that overlap the ship and deduct one life per hit.
"""

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.runtime.game_settings import Comets, Display


def hit_test(comet, player):
    """
    Axis-aligned overlap between a comet and the ship.

    The comet is treated as its centre point padded by its radius on both
    axes, not as a true circle.
    """
    dx = abs(comet.x - player.x)
    dy = abs(comet.y - player.y)
    return (dx < comet.radius + player.half_width
            and dy < comet.radius + player.half_height)


class CollisionManager:
    """Comet movement, cleanup and hit resolution for one playfield."""

    def __init__(self, playfield_height=Display.HEIGHT):
        self.playfield_height = playfield_height
        self.cleanup_y = playfield_height + Comets.CLEANUP_MARGIN

    def update(self, state, dt):
        """
        Advance and resolve every active comet.

        Args:
            state (SessionState): Session whose comets and lives are updated.
            dt (float): Simulated seconds for this tick.

        Returns:
            int: Number of comets that hit the player this tick.
        """
        hits = 0
        survivors = []

        for comet in state.comets:
            comet.fall(dt)

            if comet.y - comet.radius > self.cleanup_y:
                DebugLogger.trace(f"Missed {comet}", category="collision")
                continue

            # Lives never drop below zero; later overlaps stay in play
            if state.lives > 0 and hit_test(comet, state.player):
                state.lives -= 1
                hits += 1
                DebugLogger.trace(
                    f"Hit by {comet} ({state.lives} lives left)", category="collision"
                )
                continue

            survivors.append(comet)

        state.comets[:] = survivors
        return hits
