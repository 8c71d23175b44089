import pytest

from sitwatch.posture_timer import PostureTimer


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def timer(clock):
    return PostureTimer(max_sitting_time=60.0, max_standing_time=30 * 60.0, clock=clock)
