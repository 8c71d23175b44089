import pytest

from sitwatch.formatting import format_duration, state_message, toggle_labels, warning_message
from sitwatch.models import Posture


class TestFormatDuration:
    @pytest.mark.parametrize("seconds, expected", [
        (0, "00:00:00.00"),
        (5.1, "00:00:05.10"),
        (59.999, "00:00:59.99"),
        (59.9996, "00:00:59.99"),
        (0.0096, "00:00:00.00"),
        (61, "00:01:01.00"),
        (3723.456, "01:02:03.45"),
        (100 * 3600, "100:00:00.00"),
    ])
    def test_values(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_negative_reads_as_zero(self):
        assert format_duration(-3) == "00:00:00.00"


class TestMessages:
    def test_state_message(self):
        assert state_message(Posture.SITTING) == "You are currently: SITTING"
        assert state_message(Posture.STANDING) == "You are currently: STANDING"

    def test_warning_uses_whole_minutes(self):
        assert warning_message(60) == "You have been sitting for over 1 minutes! Get up, lazy!"
        assert warning_message(30 * 60 + 59) == "You have been sitting for over 30 minutes! Get up, lazy!"

    def test_toggle_labels(self):
        assert toggle_labels(Posture.SITTING) == ("Stop sitting", "Start standing")
        assert toggle_labels(Posture.STANDING) == ("Start sitting", "Stop standing")
