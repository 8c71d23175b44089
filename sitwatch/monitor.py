"""
Headless posture monitor.

Coordinates the timer components without a window:
- Tick source
- Posture timer
- Session event log

Prints a status line periodically and whenever the sitting warning changes.
When stdin is a terminal, typing "t" (toggle) or "r" (reset) followed by
Enter sends the matching event to the timer.
"""

import argparse
import queue
import sys
import threading
from typing import Callable, Optional, TextIO

from . import config
from .event_logger import EventLogger, attach_logger
from .formatting import format_duration, warning_message
from .models import Toggle, Reset
from .posture_timer import PostureTimer
from .ticker import IntervalTicker

COMMANDS = {
    "t": Toggle,
    "toggle": Toggle,
    "r": Reset,
    "reset": Reset,
}


class PostureMonitor:
    """
    Runs a PostureTimer off an IntervalTicker.

    Toggle and reset may be requested from any thread between ticks; they
    are applied in order, on the ticking thread, before the next tick.
    """

    def __init__(
        self,
        timer: Optional[PostureTimer] = None,
        logger: Optional[EventLogger] = None,
        status_interval: float = config.STATUS_PRINT_INTERVAL,
        output: Callable[[str], None] = print,
    ):
        """
        Initialize monitor.

        Args:
            timer: Posture timer (None for a default one)
            logger: Session event log (None for a default one)
            status_interval: Seconds between status lines
            output: Line sink, print by default
        """
        self.timer = timer or PostureTimer()
        self.logger = logger or EventLogger()
        attach_logger(self.timer, self.logger)

        self.status_interval = status_interval
        self.output = output
        self.running = False

        self._pending = queue.Queue()
        self._last_status = None

        previous_on_warning = self.timer.on_warning

        def on_warning(active: bool, sitting_duration: float) -> None:
            previous_on_warning(active, sitting_duration)
            if active:
                self.output(warning_message(self.timer.max_sitting_time))
            else:
                self.output("Sitting warning cleared")

        self.timer.on_warning = on_warning

    def request_toggle(self) -> None:
        self._pending.put(Toggle())

    def request_reset(self) -> None:
        self._pending.put(Reset())

    def handle_command(self, line: str) -> bool:
        """Queue the event named by a typed command; False if it is unknown."""
        command = line.strip().lower()
        if not command:
            return False

        event_type = COMMANDS.get(command)
        if event_type is None:
            self.output(f"Unknown command {command!r}: use t (toggle) or r (reset)")
            return False

        self._pending.put(event_type())
        return True

    def start_input_thread(self, stream: Optional[TextIO] = None) -> threading.Thread:
        """Read commands from a stream (stdin by default) on a daemon thread."""
        if stream is None:
            stream = sys.stdin

        def read_commands() -> None:
            for line in stream:
                self.handle_command(line)

        thread = threading.Thread(target=read_commands, daemon=True)
        thread.start()
        return thread

    def process_tick(self, tick) -> None:
        """Apply queued user actions, then the tick itself."""
        while True:
            try:
                event = self._pending.get_nowait()
            except queue.Empty:
                break
            self.timer.handle(event)
        self.timer.handle(tick)

        if self._last_status is None or tick.now - self._last_status >= self.status_interval:
            self.output(self.status_line())
            self._last_status = tick.now
    def status_line(self) -> str:
        return (f"[{self.timer.current_posture().label}] "
                f"sitting {format_duration(self.timer.sitting_elapsed())}  "
                f"standing {format_duration(self.timer.standing_elapsed())}")

    def run(self, ticker: IntervalTicker) -> None:
        """Consume ticks until the ticker stops or the user interrupts."""
        self.running = True
        self.output(f"Posture monitor started ({ticker.interval * 1000:.0f} ms ticks)")

        try:
            for tick in ticker:
                if not self.running:
                    break
                self.process_tick(tick)
        except KeyboardInterrupt:
            self.output("\nInterrupted by user")
        finally:
            self.stop()

    def stop(self) -> None:
        self.running = False

        metrics = self.logger.get_session_metrics()
        self.output(self.status_line())
        self.output(f"Session: {metrics['toggles']} toggles, {metrics['resets']} resets, "
                    f"{metrics['warnings']} sitting warnings")
        self.output("Posture monitor stopped")


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Headless sitting/standing timer")
    parser.add_argument("--duration", type=float, default=None,
                        help="stop after this many seconds (default: run until Ctrl+C)")
    parser.add_argument("--interval", type=float, default=config.TICK_INTERVAL,
                        help="seconds between ticks")
    parser.add_argument("--status-interval", type=float, default=config.STATUS_PRINT_INTERVAL,
                        help="seconds between status lines")
    args = parser.parse_args(argv)

    monitor = PostureMonitor(status_interval=args.status_interval)
    if sys.stdin.isatty():
        monitor.output("Type t + Enter to toggle posture, r + Enter to reset")
        monitor.start_input_thread()
    monitor.run(IntervalTicker(interval=args.interval, duration=args.duration))


if __name__ == "__main__":
    main()
