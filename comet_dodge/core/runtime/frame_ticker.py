"""
frame_ticker.py
---------------
Repeating per-frame scheduler for the simulation tick.

The display loop calls frame() once per refresh with a monotonic timestamp.
While started, each call runs the callback exactly once with the elapsed
time since the previous frame, clamped to [0, max_step].
"""

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.runtime.game_settings import Physics


class FrameTicker:
    """Start/stop scheduler driving a tick callback from frame timestamps."""

    def __init__(self, max_step=Physics.MAX_STEP):
        self.max_step = max_step
        self._callback = None
        self._last = None
        self.frames = 0

    @property
    def running(self):
        return self._callback is not None

    def start(self, callback):
        """Begin calling callback(dt) on every frame. The first dt is 0."""
        self._callback = callback
        self._last = None
        self.frames = 0
        DebugLogger.state("Ticker started", category="timing")

    def stop(self):
        """Stop scheduling. Safe to call from inside the callback."""
        if self._callback is None:
            return
        self._callback = None
        self._last = None
        DebugLogger.state(f"Ticker stopped after {self.frames} frames", category="timing")

    def clamp(self, elapsed):
        """Bound a raw frame delta to [0, max_step]."""
        return max(0.0, min(self.max_step, elapsed))

    def frame(self, now):
        """
        Run one scheduled tick if started.

        Args:
            now (float): Current time in seconds.

        Returns:
            float | None: The dt passed to the callback, or None if stopped.
        """
        if self._callback is None:
            return None

        dt = 0.0 if self._last is None else self.clamp(now - self._last)
        self._last = now
        self.frames += 1
        self._callback(dt)
        return dt
