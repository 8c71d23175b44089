"""
Posture Timer State Machine

Tracks time spent sitting versus standing:
1. Tagged posture state (Sitting / Standing) carrying its own last tick
2. Two accumulators integrated by periodic ticks
3. Toggle / reset transitions
4. Sitting threshold warning

Ticks, toggles and resets are pushed in by the presentation layer one at a
time. The timer owns no clock thread of its own.
"""

from __future__ import annotations

import time
from collections import deque
from dataclasses import replace
from typing import Callable, Dict, Optional

from . import config
from .models import (
    Posture,
    PostureState,
    Reset,
    Sitting,
    Standing,
    Tick,
    TimerEvent,
    Toggle,
    state_for,
)


class PostureTimer:
    """
    Sitting/standing timer driven by external events.

    Toggle zeroes the counter of the posture being LEFT; the posture being
    entered keeps counting from its previous value.

    Sitting ⇄ Standing, Reset → Sitting
    """

    def __init__(
        self,
        max_sitting_time: float = config.MAX_SITTING_TIME,
        max_standing_time: float = config.MAX_STANDING_TIME,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the timer in the sitting state with both counters at zero.

        Args:
            max_sitting_time: Sitting warning threshold (seconds)
            max_standing_time: Standing threshold (seconds), reported only
            clock: Monotonic clock used for toggle and reset timestamps
        """
        self._max_sitting_time = float(max_sitting_time)
        self._max_standing_time = float(max_standing_time)
        self._clock = clock

        self.state: PostureState = Sitting(last_tick=clock())
        self.sitting_duration = 0.0
        self.standing_duration = 0.0

        self.toggle_count = 0
        self.history = deque(maxlen=config.HISTORY_SIZE)

        # Callbacks for external integration
        self.on_posture_change: Optional[Callable[[Dict], None]] = None
        self.on_warning: Optional[Callable[[bool, float], None]] = None

    @classmethod
    def new(cls, **kwargs) -> "PostureTimer":
        return cls(**kwargs)

    @property
    def max_sitting_time(self) -> float:
        return self._max_sitting_time

    @property
    def max_standing_time(self) -> float:
        return self._max_standing_time

    # -----------------------------------------------------------------
    # Event entry point
    # -----------------------------------------------------------------

    def handle(self, event: TimerEvent) -> None:
        """Apply a single event. The caller re-reads state afterwards."""
        was_warning = self.sitting_warning_exceeded()

        if isinstance(event, Tick):
            self.tick(event.now)
        elif isinstance(event, Toggle):
            self.toggle()
        elif isinstance(event, Reset):
            self.reset()
        else:
            raise TypeError(f"Unsupported timer event: {event!r}")

        is_warning = self.sitting_warning_exceeded()
        if is_warning != was_warning and self.on_warning:
            self.on_warning(is_warning, self.sitting_duration)

    # -----------------------------------------------------------------
    # Operations
    # -----------------------------------------------------------------

    def toggle(self, now: Optional[float] = None) -> None:
        if now is None:
            now = self._clock()

        previous = self.current_posture()
        if isinstance(self.state, Sitting):
            left_duration = self.sitting_duration
            self.state = Standing(last_tick=now)
            self.sitting_duration = 0.0
        else:
            left_duration = self.standing_duration
            self.state = Sitting(last_tick=now)
            self.standing_duration = 0.0

        self.toggle_count += 1
        self._record(previous, self.current_posture(), "Toggle", now, left_duration)

    def tick(self, now: float) -> None:
        """
        Integrate elapsed time into the active posture's accumulator.

        A timestamp earlier than the last tick (or NaN) contributes nothing
        and leaves last_tick where it was.
        """
        delta = now - self.state.last_tick
        if not delta > 0:
            return

        if isinstance(self.state, Sitting):
            self.sitting_duration += delta
        else:
            self.standing_duration += delta
        self.state = replace(self.state, last_tick=now)

    def reset(self, now: Optional[float] = None) -> None:
        if now is None:
            now = self._clock()

        previous = self.current_posture()
        left_duration = (self.sitting_duration if previous is Posture.SITTING
                         else self.standing_duration)
        self.sitting_duration = 0.0
        self.standing_duration = 0.0
        self.state = state_for(Posture.SITTING, now)
        self._record(previous, Posture.SITTING, "Reset", now, left_duration)

    def _record(self, old: Posture, new: Posture, reason: str, now: float,
                left_duration: float) -> None:
        record = {
            "time": now,
            "from": old.value,
            "to": new.value,
            "reason": reason,
            "left_duration": left_duration
        }
        self.history.append(record)
        if self.on_posture_change:
            self.on_posture_change(record)

    # -----------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------

    def current_posture(self) -> Posture:
        return self.state.posture

    def sitting_elapsed(self) -> float:
        return self.sitting_duration

    def standing_elapsed(self) -> float:
        return self.standing_duration

    def sitting_warning_exceeded(self) -> bool:
        # Only sitting has a warning; the standing threshold is reported, not enforced.
        return self.sitting_duration > self._max_sitting_time

    def get_status(self) -> Dict:
        return {
            "posture": self.current_posture().value,
            "sitting_elapsed": self.sitting_duration,
            "standing_elapsed": self.standing_duration,
            "warning": self.sitting_warning_exceeded(),
            "max_sitting_time": self._max_sitting_time,
            "max_standing_time": self._max_standing_time,
            "toggle_count": self.toggle_count,
        }
