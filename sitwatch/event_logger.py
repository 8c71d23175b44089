"""
Event Logging Module
In-memory session log of posture timer events
"""

from collections import deque
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

import numpy as np

from . import config
from .models import Posture


class EventType(Enum):
    """Event type classifications"""
    POSTURE_TOGGLED = "posture_toggled"
    TIMER_RESET = "timer_reset"
    SITTING_WARNING = "sitting_warning"
    SITTING_WARNING_CLEARED = "sitting_warning_cleared"


class EventLogger:
    """
    Keeps the current session's events in memory for the dashboard.

    Features:
    - Per-event dict records with increasing ids
    - Session counters (toggles, resets, warnings)
    - Sitting bout statistics

    Nothing is written to disk; the log ends with the process.
    """

    def __init__(self, buffer_size: int = config.EVENT_BUFFER_SIZE):
        """
        Initialize event logger

        Args:
            buffer_size: Number of recent events to keep in memory
        """
        self.buffer_size = buffer_size
        self.event_buffer = deque(maxlen=buffer_size)
        self.event_counter = 0
        self._reset_session_metrics()

    def log_posture_change(self,
                           timestamp: float,
                           old_posture: Posture,
                           new_posture: Posture,
                           reason: str,
                           left_duration: float = 0.0) -> Dict:
        """
        Log a toggle or reset

        Args:
            timestamp: Event timestamp (monotonic seconds)
            old_posture: Posture before the event
            new_posture: Posture after the event
            reason: "Toggle" or "Reset"
            left_duration: Time accumulated in the posture that was left

        Returns:
            Event record dictionary
        """
        event_type = EventType.TIMER_RESET if reason == "Reset" else EventType.POSTURE_TOGGLED

        event = self._make_event(event_type, timestamp)
        event['transition'] = {
            'from': old_posture.value,
            'to': new_posture.value,
            'left_duration': round(left_duration, 2)
        }

        self._add_event(event)

        if event_type == EventType.TIMER_RESET:
            self.session_metrics['resets'] += 1
        else:
            self.session_metrics['toggles'] += 1

        if old_posture is Posture.SITTING and left_duration > 0:
            self.session_metrics['sitting_bouts'].append(left_duration)

        return event

    def log_warning(self, timestamp: float, active: bool, sitting_duration: float) -> Dict:
        """
        Log the sitting warning switching on or off

        Args:
            timestamp: Event timestamp
            active: True when the warning starts, False when it clears
            sitting_duration: Sitting time at the moment of the edge

        Returns:
            Event record dictionary
        """
        event_type = EventType.SITTING_WARNING if active else EventType.SITTING_WARNING_CLEARED

        event = self._make_event(event_type, timestamp)
        event['sitting_duration'] = round(sitting_duration, 2)

        self._add_event(event)

        if active:
            self.session_metrics['warnings'] += 1

        return event

    def _make_event(self, event_type: EventType, timestamp: float) -> Dict:
        return {
            'event_id': self._get_next_id(),
            'event_type': event_type.value,
            'timestamp': timestamp,
            'logged_at': datetime.now().isoformat(timespec='seconds'),
        }

    def _add_event(self, event: Dict) -> None:
        self.event_buffer.append(event)

    def _get_next_id(self) -> int:
        """Get next event ID"""
        self.event_counter += 1
        return self.event_counter

    def _reset_session_metrics(self) -> None:
        self.session_metrics = {
            'started_at': datetime.now().isoformat(timespec='seconds'),
            'toggles': 0,
            'resets': 0,
            'warnings': 0,
            'sitting_bouts': []
        }

    def get_recent_events(self, n: int = 10, event_type: Optional[EventType] = None) -> List[Dict]:
        """
        Get recent events from buffer

        Args:
            n: Number of events to return
            event_type: Filter by event type (optional)

        Returns:
            List of event dictionaries, oldest first
        """
        events = list(self.event_buffer)

        if event_type:
            events = [e for e in events if e['event_type'] == event_type.value]

        return events[-n:] if n > 0 else []

    def get_session_metrics(self) -> Dict:
        """
        Get current session metrics

        Returns:
            Dictionary of aggregated counters and sitting bout statistics
        """
        metrics = dict(self.session_metrics)
        bouts = metrics.pop('sitting_bouts')

        metrics['sitting_bouts'] = len(bouts)
        if bouts:
            metrics['avg_sitting_bout'] = float(np.mean(bouts))
            metrics['max_sitting_bout'] = float(np.max(bouts))
        else:
            metrics['avg_sitting_bout'] = 0.0
            metrics['max_sitting_bout'] = 0.0

        return metrics

    def clear_buffer(self) -> None:
        """Clear in-memory event buffer and session counters"""
        self.event_buffer.clear()
        self._reset_session_metrics()


def attach_logger(timer, logger: EventLogger) -> None:
    """Wire a PostureTimer's callbacks into an EventLogger."""

    def on_posture_change(record: Dict) -> None:
        logger.log_posture_change(
            timestamp=record['time'],
            old_posture=Posture(record['from']),
            new_posture=Posture(record['to']),
            reason=record['reason'],
            left_duration=record['left_duration']
        )

    def on_warning(active: bool, sitting_duration: float) -> None:
        logger.log_warning(timer.state.last_tick, active, sitting_duration)

    timer.on_posture_change = on_posture_change
    timer.on_warning = on_warning
