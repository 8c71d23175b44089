import pytest

from sitwatch.models import Tick
from sitwatch.ticker import IntervalTicker


class SleepingClock:
    """Clock whose only way forward is the ticker's own sleep calls."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class TestIntervalTicker:
    def test_max_ticks(self):
        clock = SleepingClock()
        ticks = list(IntervalTicker(interval=0.01, max_ticks=5, clock=clock, sleep=clock.sleep))

        assert len(ticks) == 5
        assert all(isinstance(t, Tick) for t in ticks)
        assert [t.now for t in ticks] == pytest.approx([0.0, 0.01, 0.02, 0.03, 0.04])

    def test_duration(self):
        clock = SleepingClock()
        ticks = list(IntervalTicker(interval=0.5, duration=2.0, clock=clock, sleep=clock.sleep))
        assert [t.now for t in ticks] == pytest.approx([0.0, 0.5, 1.0, 1.5])

    def test_timestamps_never_decrease(self):
        clock = SleepingClock()
        ticks = list(IntervalTicker(interval=0.25, max_ticks=20, clock=clock, sleep=clock.sleep))
        stamps = [t.now for t in ticks]
        assert stamps == sorted(stamps)

    def test_slow_consumer_skips_sleep(self):
        clock = SleepingClock()
        ticker = IntervalTicker(interval=0.1, max_ticks=3, clock=clock, sleep=clock.sleep)

        for _ in ticker:
            clock.now += 0.5  # handling took longer than the interval

        assert clock.sleeps == []
        assert ticker.tick_count == 3

    def test_iterating_again_starts_a_fresh_run(self):
        clock = SleepingClock()
        ticker = IntervalTicker(interval=0.1, max_ticks=3, clock=clock, sleep=clock.sleep)

        assert len(list(ticker)) == 3
        assert len(list(ticker)) == 3
        assert ticker.tick_count == 3

    @pytest.mark.parametrize("interval", [0, -0.01])
    def test_rejects_non_positive_interval(self, interval):
        with pytest.raises(ValueError):
            IntervalTicker(interval=interval)
