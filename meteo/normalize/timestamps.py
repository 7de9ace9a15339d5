"""Epoch timestamp to local hour-of-day conversion."""

from datetime import datetime, tzinfo

from meteo.errors import TimestampError


def timestamp_to_hour(timestamp_ms: int, tz: tzinfo | None = None) -> float:
    """Convert an epoch timestamp in milliseconds to a fractional hour.

    Args:
        timestamp_ms: Milliseconds since the epoch.
        tz: Zone of the wall clock. None uses the process local zone.

    Returns:
        ``hour + (minute + second / 60) / 60``, in [0, 24).
    """
    # Truncate toward zero, sub-second precision is dropped.
    seconds = abs(timestamp_ms) // 1000
    if timestamp_ms < 0:
        seconds = -seconds
    try:
        t = datetime.fromtimestamp(seconds, tz=tz)
    except (OverflowError, OSError, ValueError) as e:
        raise TimestampError("Timestamp cannot be resolved to local time") from e
    return t.hour + (t.minute + t.second / 60.0) / 60.0
