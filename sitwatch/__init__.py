"""Sitting/standing posture timer."""

from .models import (
    Posture,
    Sitting,
    Standing,
    PostureState,
    Toggle,
    Reset,
    Tick,
    TimerEvent,
)
from .posture_timer import PostureTimer

__all__ = [
    "Posture",
    "Sitting",
    "Standing",
    "PostureState",
    "Toggle",
    "Reset",
    "Tick",
    "TimerEvent",
    "PostureTimer",
]
