"""
comet.py
--------
Falling hazard entity.
"""


class Comet:
    """A comet falling straight down at a constant speed."""

    __slots__ = ("x", "y", "radius", "speed")

    def __init__(self, x, y, radius, speed):
        self.x = x
        self.y = y
        self.radius = radius
        self.speed = speed

    def fall(self, dt):
        """Advance downward by speed * dt."""
        self.y += self.speed * dt

    def __repr__(self):
        return f"Comet(x={self.x:.1f}, y={self.y:.1f}, r={self.radius:.1f}, s={self.speed:.1f})"
