"""Frame-driven and wall-clock countdown timers."""

from __future__ import annotations

import time
from typing import Callable

_PENDULUM_PERIOD = 12


class Timer:
    """A countdown advanced by explicit frame deltas, with a blinking pendulum."""

    def __init__(self, time_remaining: float) -> None:
        self._pendulum_count = 0
        self.set(time_remaining)

    def set(self, time_remaining: float) -> None:
        """Set a new starting time and rewind to it."""
        self._timer_max = time_remaining
        self._pendulum = False
        self.reset()

    def update(self, dt: float) -> None:
        """Advance the countdown by ``dt`` seconds."""
        if self._pendulum_count >= _PENDULUM_PERIOD:
            self._pendulum = not self._pendulum
            self._pendulum_count = 0
        self._pendulum_count += 1

        if self._timer >= 0:
            self._timer -= dt
        else:
            self._timer = 0.0
            self._pendulum = False

    def reset(self) -> None:
        """Rewind to the starting time."""
        self._timer = self._timer_max

    def remaining(self) -> float:
        return self._timer

    def remaining_int(self) -> int:
        """Remaining time truncated toward zero."""
        return int(self._timer)

    def tick_tock(self) -> bool:
        """State of the pendulum, which flips every twelve updates."""
        return self._pendulum

    def is_finished(self) -> bool:
        return self.remaining() <= 0.0


class RealTimeTimer:
    """A countdown measured against a monotonic clock."""

    def __init__(
        self, duration: float, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self._clock = clock
        self._duration = duration
        self._running = False
        self._start_time = 0.0
        self._paused_time = 0.0

    def set(self, duration: float) -> None:
        """Set a new duration and stop the timer."""
        self._duration = duration
        self.reset()

    def start(self) -> None:
        """Start counting from the full duration, unless already running."""
        if not self._running:
            self._running = True
            self._start_time = self._clock()

    def pause(self) -> None:
        """Stop counting and remember the time left."""
        if self._running:
            self._running = False
            self._paused_time = max(0.0, self._duration - self._elapsed())

    def reset(self) -> None:
        """Stop counting and restore the full duration."""
        self._running = False
        self._paused_time = self._duration

    def remaining(self) -> float:
        if not self._running:
            return self._paused_time
        return max(0.0, self._duration - self._elapsed())

    def is_running(self) -> bool:
        return self._running

    def is_finished(self) -> bool:
        return self.remaining() <= 0.0

    def _elapsed(self) -> float:
        return self._clock() - self._start_time