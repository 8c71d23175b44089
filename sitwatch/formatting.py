"""Display strings shared by the dashboard and the console monitor."""

from .models import Posture

MINUTE = 60
HOUR = 60 * MINUTE


def format_duration(seconds: float) -> str:
    """
    Format elapsed seconds as HH:MM:SS.cc (hundredths, truncated).

    Hours are not wrapped, so 100 hours reads "100:00:00.00".
    """
    # Offset absorbs representation error in the product; truncate to the millisecond
    millis = int(max(0.0, seconds) * 1000 + 1e-6)
    whole = millis // 1000
    centis = (millis % 1000) // 10

    return "{:02d}:{:02d}:{:02d}.{:02d}".format(
        whole // HOUR,
        (whole % HOUR) // MINUTE,
        whole % MINUTE,
        centis,
    )


def state_message(posture: Posture) -> str:
    return f"You are currently: {posture.label}"


def warning_message(max_sitting_time: float) -> str:
    return (f"You have been sitting for over {int(max_sitting_time) // MINUTE} minutes! "
            "Get up, lazy!")


def toggle_labels(posture: Posture) -> tuple:
    """Labels for the (sitting, standing) buttons; both toggle the posture."""
    if posture is Posture.SITTING:
        return "Stop sitting", "Start standing"
    return "Start sitting", "Stop standing"
