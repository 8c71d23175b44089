import pytest

from posture_chart import (
    SITTING_COLOR,
    STANDING_COLOR,
    WARNING_COLOR,
    build_counter_figure,
    events_to_frame,
)
from sitwatch.event_logger import EventLogger
from sitwatch.models import Posture, Tick, Toggle


class TestBuildCounterFigure:
    def test_bars_show_minutes_and_clock_text(self, timer, clock):
        timer.handle(Tick(clock.advance(30)))
        bar = build_counter_figure(timer).data[0]

        assert list(bar.x) == ['Sitting', 'Standing']
        assert list(bar.y) == pytest.approx([0.5, 0.0])
        assert list(bar.text) == ['00:00:30.00', '00:00:00.00']

    def test_sitting_bar_turns_red_past_threshold(self, timer, clock):
        assert list(build_counter_figure(timer).data[0].marker.color) == [SITTING_COLOR, STANDING_COLOR]

        timer.handle(Tick(clock.advance(61)))
        assert list(build_counter_figure(timer).data[0].marker.color) == [WARNING_COLOR, STANDING_COLOR]

    def test_standing_never_turns_red(self, timer, clock):
        timer.handle(Toggle())
        timer.handle(Tick(clock.advance(40 * 60)))
        assert list(build_counter_figure(timer).data[0].marker.color) == [SITTING_COLOR, STANDING_COLOR]

    def test_threshold_lines(self, timer):
        shapes = build_counter_figure(timer).layout.shapes
        assert [(s.y0, s.y1) for s in shapes] == [(1.0, 1.0), (30.0, 30.0)]


class TestEventsToFrame:
    def test_empty(self):
        frame = events_to_frame([])
        assert frame.empty
        assert list(frame.columns) == ['Time', 'Event', 'From', 'To', 'Duration']

    def test_newest_first_with_duration_fallback(self):
        logger = EventLogger()
        logger.log_posture_change(1.0, Posture.SITTING, Posture.STANDING, "Toggle", 75.5)
        logger.log_warning(2.0, True, 61.0)

        frame = events_to_frame(logger.get_recent_events())

        assert list(frame['Event']) == ['sitting warning', 'posture toggled']
        assert list(frame['Duration']) == ['00:01:01.00', '00:01:15.50']
        assert list(frame['From']) == ['', 'sitting']
        assert list(frame['To']) == ['', 'standing']
        assert all(len(t) == 8 for t in frame['Time'])
