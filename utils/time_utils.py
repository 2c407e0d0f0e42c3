"""Duration and instant formatting utilities for punch."""

from datetime import datetime

from models import PrettyDuration

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400


def decompose(total_seconds: int) -> PrettyDuration:
    """
    Break a number of seconds into days, hours, minutes and seconds.

    Each unit is the total count of that unit unless it reaches the size of
    the next larger unit, in which case it wraps:

    - 59 -> 0 days, 0 hours, 0 minutes, 59 seconds
    - 3600 -> 0 days, 1 hours, 0 minutes, 0 seconds
    - 90061 -> 1 days, 1 hours, 1 minutes, 1 seconds

    Args:
        total_seconds: Non-negative number of whole seconds

    Returns:
        PrettyDuration with the breakdown

    Raises:
        ValueError: If total_seconds is negative
    """
    if total_seconds < 0:
        raise ValueError(f"Duration must not be negative: {total_seconds}")

    total_minutes = total_seconds // SECONDS_PER_MINUTE
    total_hours = total_seconds // SECONDS_PER_HOUR

    days = total_seconds // SECONDS_PER_DAY
    hours = total_hours % 24 if total_hours >= 24 else total_hours
    minutes = total_minutes % 60 if total_minutes >= 60 else total_minutes
    seconds = total_seconds % 60 if total_seconds >= 60 else total_seconds

    return PrettyDuration(days=days, hours=hours, minutes=minutes, seconds=seconds)


def format_duration(total_seconds: int) -> str:
    """
    Format seconds as "D days, H hours, M minutes, S seconds".

    Args:
        total_seconds: Non-negative number of whole seconds

    Returns:
        Formatted duration string
    """
    return str(decompose(total_seconds))


def format_instant(timestamp: int) -> str:
    """Format epoch seconds as local wall-clock time."""
    return datetime.fromtimestamp(timestamp).astimezone().strftime("%Y-%m-%d %H:%M:%S %z")


def now_timestamp() -> int:
    """Current local time as whole epoch seconds."""
    return int(datetime.now().timestamp())
