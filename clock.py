# clock.py
from __future__ import annotations
from enum import Enum, auto
import math
import time
from typing import Callable


class ClockState(Enum):
    RUNNING = auto()
    OVER = auto()


class RoundClock:
    """Countdown measured against a fixed start timestamp.

    The remaining time depends only on wall-clock time, never on how many
    ticks ran, so frame jitter does not stretch or shrink a round.
    """

    def __init__(self, total_time: float, now: Callable[[], float] = time.monotonic):
        self.total_time = total_time
        self._now = now
        self.start = now()
        self.time_left = int(math.ceil(total_time))
        self.state = ClockState.RUNNING

    @property
    def running(self) -> bool:
        return self.state is ClockState.RUNNING

    def update(self) -> int:
        """Recompute time_left. Once it hits 0 the clock stays OVER."""
        if self.state is ClockState.OVER:
            return 0
        elapsed = self._now() - self.start
        self.time_left = max(0, int(math.ceil(self.total_time - elapsed)))
        if self.time_left == 0:
            self.state = ClockState.OVER
        return self.time_left
