"""
player.py
---------
The player's ship: position, horizontal velocity and handling constants.
"""

from comet_dodge.core.runtime.game_settings import Display, PlayerDefaults


class Player:
    """Player ship. Mutated every tick by the movement integrator."""

    __slots__ = ("x", "y", "vx", "half_width", "half_height", "accel", "max_speed")

    def __init__(self, x, y,
                 width=PlayerDefaults.WIDTH,
                 height=PlayerDefaults.HEIGHT,
                 accel=PlayerDefaults.ACCEL,
                 max_speed=PlayerDefaults.MAX_SPEED):
        self.x = float(x)
        self.y = float(y)
        self.vx = 0.0
        self.half_width = width / 2
        self.half_height = height / 2
        self.accel = accel
        self.max_speed = max_speed

    @classmethod
    def spawn(cls, playfield_width=Display.WIDTH, playfield_height=Display.HEIGHT):
        """Create a ship centred horizontally near the bottom of the playfield."""
        return cls(playfield_width / 2, playfield_height - PlayerDefaults.BOTTOM_OFFSET)

    def recenter(self, playfield_width=Display.WIDTH):
        """Move back to the horizontal centre and stop."""
        self.x = playfield_width / 2
        self.vx = 0.0

    def bounds(self, playfield_width=Display.WIDTH):
        """Return the (min_x, max_x) range the ship centre may occupy."""
        margin = PlayerDefaults.EDGE_MARGIN
        return (self.half_width + margin,
                playfield_width - self.half_width - margin)

    def __repr__(self):
        return f"Player(x={self.x:.1f}, y={self.y:.1f}, vx={self.vx:.1f})"
