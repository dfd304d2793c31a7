"""
Calculate the reporting window for the commit calendar.

The window runs from a Sunday roughly one year ago up to the end of today,
so that the first column of the calendar is always a full week.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta


@dataclass(frozen=True)
class ReportWindow:
    """Inclusive range of days covered by the calendar."""

    start: datetime  # local midnight, always a Sunday
    end: datetime  # 23:59:59 local time of the last day

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()

    @property
    def length_days(self) -> int:
        """Number of calendar days in the window, both ends included."""
        return (self.end - self.start).days + 1


def weekday_index(day: date) -> int:
    """
    Position of a day within a calendar week that starts on Sunday.

    Args:
        day: Any date or datetime

    Returns:
        0 for Sunday through 6 for Saturday
    """
    return (day.weekday() + 1) % 7


def _one_year_before(today: date) -> date:
    """Same month and day one year earlier, with Feb 29 falling back to Feb 28."""
    try:
        return today.replace(year=today.year - 1)
    except ValueError:
        return today.replace(year=today.year - 1, day=28)


def compute_window(now: datetime | None = None) -> ReportWindow:
    """
    Compute the reporting window ending today.

    Args:
        now: Current local date-time. Defaults to datetime.now(); callers
            should capture it once per run and pass it everywhere.

    Returns:
        ReportWindow starting on the Sunday strictly before the date one
        year ago and ending at 23:59:59 today
    """
    if now is None:
        now = datetime.now()

    one_year_ago = datetime.combine(_one_year_before(now.date()), time(0, 0, 0))
    # weekday() is Monday=0, so this always steps back to a Sunday
    start = one_year_ago - timedelta(days=one_year_ago.weekday() + 1)
    end = datetime.combine(now.date(), time(23, 59, 59))

    return ReportWindow(start=start, end=end)
