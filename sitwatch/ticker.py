"""
Recurring interval tick source.

Plays the role of the scheduler that pushes Tick events into the posture
timer. Timestamps come from a monotonic clock; the sleep between them is
corrected for the time the consumer spent handling the previous tick.
"""

import time
from typing import Callable, Generator, Optional

from . import config
from .models import Tick


class IntervalTicker:
    """
    Yields Tick events at a fixed cadence.

    Iteration stops after max_ticks ticks or once duration seconds have
    passed since the first tick, whichever comes first. With neither set it
    runs until the consumer stops iterating.
    """

    def __init__(
        self,
        interval: float = config.TICK_INTERVAL,
        max_ticks: Optional[int] = None,
        duration: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            interval: Seconds between ticks
            max_ticks: Stop after this many ticks (None for no limit)
            duration: Stop after this many seconds (None for no limit)
            clock: Monotonic clock
            sleep: Sleep function, injectable for tests
        """
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")

        self.interval = interval
        self.max_ticks = max_ticks
        self.duration = duration
        self._clock = clock
        self._sleep = sleep
        self.tick_count = 0

    def __iter__(self) -> Generator[Tick, None, None]:
        self.tick_count = 0
        start = self._clock()
        next_due = start

        while True:
            if self.max_ticks is not None and self.tick_count >= self.max_ticks:
                return

            now = self._clock()
            if self.duration is not None and now - start >= self.duration:
                return

            self.tick_count += 1
            yield Tick(now=now)

            next_due += self.interval
            remaining = next_due - self._clock()
            if remaining > 0:
                self._sleep(remaining)
            else:
                # Fell behind; resume the cadence from here
                next_due = self._clock()
