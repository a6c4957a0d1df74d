"""
scheduler.py: Cooperative clock driving the frame tick and the 1-second countdown.

The host loop (pygame's ``Clock.tick``) feeds elapsed wall time into
``advance``; the scheduler converts it into fixed-interval callbacks on
the same thread.
"""

import logging
from typing import Callable

from .constants import COUNTDOWN_INTERVAL_MS, FRAME_INTERVAL_MS, MAX_FRAMES_PER_ADVANCE

logger = logging.getLogger(__name__)


class GameScheduler:
    def __init__(
        self,
        on_frame: Callable[[float], None],
        on_second: Callable[[], None],
        frame_interval_ms: float = FRAME_INTERVAL_MS,
        countdown_interval_ms: float = COUNTDOWN_INTERVAL_MS,
        max_frames: int = MAX_FRAMES_PER_ADVANCE,
    ):
        self.on_frame = on_frame
        self.on_second = on_second
        self.frame_interval_ms = frame_interval_ms
        self.countdown_interval_ms = countdown_interval_ms
        self.max_frames = max_frames

        self.now_ms = 0.0
        self._frame_timer = 0.0
        self._countdown_timer = 0.0
        self._suspended = False
        self._cancelled = False

    @property
    def running(self) -> bool:
        return not (self._suspended or self._cancelled)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def advance(self, elapsed_ms: float):
        """
        Moves the clock forward and fires every tick that fell due.
        Frame callbacks receive the clock time of their own tick.
        """
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time must be non-negative, got {elapsed_ms}")
        if self._cancelled:
            return

        self.now_ms += elapsed_ms
        if self._suspended:
            return

        # --- Frame loop (fixed timestep) ---
        self._frame_timer += elapsed_ms
        frames = 0
        while self._frame_timer >= self.frame_interval_ms and self.running:
            self._frame_timer -= self.frame_interval_ms
            frames += 1
            self.on_frame(self.now_ms - self._frame_timer)
            if frames >= self.max_frames:
                # Drop the backlog after a stall
                self._frame_timer = 0.0
                break

        # --- Countdown loop ---
        if not self.running:
            return
        self._countdown_timer += elapsed_ms
        while self._countdown_timer >= self.countdown_interval_ms and self.running:
            self._countdown_timer -= self.countdown_interval_ms
            self.on_second()

    def suspend(self):
        """Pauses both loops (game over)."""
        self._suspended = True

    def resume(self):
        """Restarts both loops; the next countdown tick is a full interval away."""
        if self._cancelled:
            return
        self._suspended = False
        self._frame_timer = 0.0
        self._countdown_timer = 0.0

    def cancel(self):
        """Stops the scheduler for good; no callback fires afterwards."""
        if not self._cancelled:
            logger.debug("Scheduler cancelled at %.0f ms", self.now_ms)
        self._cancelled = True
