"""
Build a calendar report from commit timestamps.
"""

from dataclasses import dataclass
from datetime import datetime

from git_calendar.bucketizer import bucketize
from git_calendar.grid_layout import CalendarLayout, IntensityLevel, lay_out, normalize
from git_calendar.window_calculator import ReportWindow, compute_window


@dataclass(frozen=True)
class CalendarReport:
    """Output of every pipeline stage for a single run."""

    now: datetime
    window: ReportWindow
    buckets: list[int]
    levels: list[IntensityLevel]
    layout: CalendarLayout

    @property
    def total_commits(self) -> int:
        return sum(self.buckets)


def build_report(timestamps, now: datetime | None = None) -> CalendarReport:
    """
    Run the window, bucket, normalize and layout stages.

    Args:
        timestamps: Commit timestamps (epoch seconds or datetimes)
        now: Current local time, read once here if not supplied

    Returns:
        CalendarReport for the window ending on `now`
    """
    if now is None:
        now = datetime.now()

    window = compute_window(now)
    buckets = bucketize(window, timestamps)
    levels = normalize(buckets)
    layout = lay_out(levels, window)

    return CalendarReport(
        now=now,
        window=window,
        buckets=buckets,
        levels=levels,
        layout=layout,
    )
