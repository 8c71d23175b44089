# Configuration Module - module-level values read once at startup
import math
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _positive_seconds(name: str, default: float) -> float:
    """Read a positive number of seconds from the environment."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None

    if not math.isfinite(value) or not value > 0:
        raise ValueError(f"{name} must be a positive finite number, got {raw!r}")
    return value


# Posture thresholds (seconds)
MAX_SITTING_TIME = _positive_seconds("SITWATCH_MAX_SITTING_SECONDS", 30 * 60)   # 30 minutes
MAX_STANDING_TIME = _positive_seconds("SITWATCH_MAX_STANDING_SECONDS", 30 * 60)  # not wired into any warning

# Scheduling
TICK_INTERVAL = _positive_seconds("SITWATCH_TICK_INTERVAL", 0.01)  # 10 ms
DASHBOARD_REFRESH_INTERVAL = _positive_seconds("SITWATCH_DASHBOARD_REFRESH", 0.1)
STATUS_PRINT_INTERVAL = 60.0  # headless monitor status line

# Session event log
EVENT_BUFFER_SIZE = 200
HISTORY_SIZE = 100

# Display
APP_TITLE = "Don't sit"
