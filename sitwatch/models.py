"""
Data models and types for the posture timer.

Defines the posture states, the tagged state carried by the timer and the
events the presentation layer sends to it. All timestamps are float seconds
on a monotonic clock.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Posture(Enum):
    """Which posture the user is currently in."""
    SITTING = "sitting"
    STANDING = "standing"

    @property
    def label(self) -> str:
        """Upper-case display name ("SITTING" / "STANDING")."""
        return self.name


@dataclass(frozen=True)
class Sitting:
    """
    Active state while the user sits.

    last_tick is the last moment elapsed time was folded into the
    sitting accumulator.
    """
    last_tick: float

    @property
    def posture(self) -> Posture:
        return Posture.SITTING


@dataclass(frozen=True)
class Standing:
    """Active state while the user stands."""
    last_tick: float

    @property
    def posture(self) -> Posture:
        return Posture.STANDING


PostureState = Union[Sitting, Standing]


def state_for(posture: Posture, last_tick: float) -> PostureState:
    """Build the state variant matching a posture."""
    if posture is Posture.SITTING:
        return Sitting(last_tick=last_tick)
    return Standing(last_tick=last_tick)


# ---------------------------------------------------------------------
# EVENTS
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class Toggle:
    """Switch to the other posture."""


@dataclass(frozen=True)
class Reset:
    """Zero both counters and go back to sitting."""


@dataclass(frozen=True)
class Tick:
    """Periodic time-integration event."""
    now: float


TimerEvent = Union[Toggle, Reset, Tick]
