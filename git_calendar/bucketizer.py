"""
Fold commit timestamps into per-day commit counts.
"""

import math
from datetime import date, datetime

from git_calendar.window_calculator import ReportWindow


def _to_local_day(timestamp) -> date | None:
    """
    Convert a commit timestamp to a local calendar day.

    Args:
        timestamp: Epoch seconds (int or float) or a datetime. Naive
            datetimes are taken as local time, aware ones are converted.

    Returns:
        The local date, or None if the value cannot be interpreted
    """
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is not None:
            try:
                timestamp = timestamp.astimezone()
            except (OverflowError, OSError, ValueError):
                return None
        return timestamp.date()

    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        return None
    if isinstance(timestamp, float) and not math.isfinite(timestamp):
        return None

    try:
        return datetime.fromtimestamp(timestamp).date()
    except (OverflowError, OSError, ValueError):
        return None


def day_index(window: ReportWindow, day: date) -> int | None:
    """
    Index of a day in the bucket sequence for a window.

    Args:
        window: Reporting window
        day: Local calendar day

    Returns:
        Offset from window.start, or None if the day is outside the window
    """
    length = window.length_days
    diff = (window.end_date - day).days

    if diff < 0 or diff >= length:
        return None

    return (length - 1) - diff


def bucketize(window: ReportWindow, timestamps) -> list[int]:
    """
    Count commits per local calendar day across the window.

    Args:
        window: Reporting window from compute_window()
        timestamps: Iterable of commit timestamps (epoch seconds or datetimes)

    Returns:
        List of counts, one per day, index 0 = window.start. Timestamps
        outside the window or that cannot be read are dropped.
    """
    buckets = [0] * window.length_days

    for timestamp in timestamps:
        day = _to_local_day(timestamp)
        if day is None:
            continue

        index = day_index(window, day)
        if index is None:
            continue

        buckets[index] += 1

    return buckets
