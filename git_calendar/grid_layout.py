"""
Grid layout for the commit calendar.

Normalizes daily commit counts into intensity levels and arranges them into
week columns and weekday rows, with month labels for the header row.
"""

import math
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import IntEnum

from git_calendar.window_calculator import ReportWindow

MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

DAYS_PER_WEEK = 7

# Terminal width of one week column: a square glyph plus a space
COLUMN_WIDTH = 2

# Spaces between month labels after the first one
MONTH_LABEL_SEPARATOR = 6


class IntensityLevel(IntEnum):
    """Relative commit volume for a single day."""

    NONE = 0
    LOW = 1
    MID = 2
    HIGH = 3
    VERY_HIGH = 4


@dataclass(frozen=True)
class MonthLabel:
    """A month name and the character column it starts at above the grid."""

    label: str
    column: int


@dataclass
class Grid:
    """
    Intensity levels arranged as 7 weekday rows by `weeks` columns.

    rows[weekday][week] holds the level for flat index weekday + week * 7,
    or None where the trailing partial week has no day.
    """

    weeks: int
    rows: list[list[IntensityLevel | None]] = field(default_factory=list)

    def level_at(self, weekday: int, week: int) -> IntensityLevel | None:
        return self.rows[weekday][week]


@dataclass
class CalendarLayout:
    """Everything a renderer needs to draw the calendar."""

    grid: Grid
    month_labels: list[MonthLabel]


def classify(ratio: float) -> IntensityLevel:
    """
    Map a count-to-maximum ratio onto an intensity level.

    Each threshold belongs to the higher tier:
        0            -> NONE
        (0, 0.25)    -> LOW
        [0.25, 0.5)  -> MID
        [0.5, 0.75)  -> HIGH
        [0.75, ...)  -> VERY_HIGH
    """
    if ratio == 0:
        return IntensityLevel.NONE
    elif ratio < 0.25:
        return IntensityLevel.LOW
    elif ratio < 0.5:
        return IntensityLevel.MID
    elif ratio < 0.75:
        return IntensityLevel.HIGH
    else:
        return IntensityLevel.VERY_HIGH


def normalize(buckets: list[int]) -> list[IntensityLevel]:
    """
    Convert daily counts into intensity levels relative to the busiest day.

    Args:
        buckets: Per-day commit counts from bucketize()

    Returns:
        List of IntensityLevel in the same order. All NONE when there are
        no commits at all.
    """
    max_count = max(buckets, default=0)
    if max_count == 0:
        return [IntensityLevel.NONE] * len(buckets)

    return [classify(count / max_count) for count in buckets]


def week_count(window: ReportWindow) -> int:
    """Number of week columns needed to show every day in the window."""
    return math.ceil(window.length_days / DAYS_PER_WEEK)


def week_start(window: ReportWindow, week: int) -> date:
    """Date of the Sunday heading a week column."""
    return window.start_date + timedelta(weeks=week)


def cell_date(window: ReportWindow, weekday: int, week: int) -> date:
    """Date shown in the cell at (weekday, week)."""
    return window.start_date + timedelta(days=weekday + week * DAYS_PER_WEEK)


def _month_labels(window: ReportWindow) -> list[MonthLabel]:
    """
    Build the month header for the grid.

    The first label is the start month. The gap after it is derived from
    the start day of month, and the remaining twelve months follow with a
    fixed separator. This is an approximation of where each month begins;
    use cell_date() for exact positions.
    """
    start = window.start_date
    first_name = MONTH_NAMES[start.month - 1]

    # Days 29-31 give a negative gap
    gap = max(0, 4 - math.ceil(start.day / DAYS_PER_WEEK))

    labels = [MonthLabel(label=first_name, column=0)]
    column = len(first_name) + gap

    for i in range(12):
        name = MONTH_NAMES[(start.month + i) % 12]
        labels.append(MonthLabel(label=name, column=column))
        column += len(name) + MONTH_LABEL_SEPARATOR

    return labels


def lay_out(levels: list[IntensityLevel], window: ReportWindow) -> CalendarLayout:
    """
    Arrange intensity levels into a week-major grid with month labels.

    Args:
        levels: Per-day levels from normalize(), index 0 = window.start
        window: Reporting window the levels cover

    Returns:
        CalendarLayout with the grid and month header labels
    """
    weeks = week_count(window)

    rows = []
    for weekday in range(DAYS_PER_WEEK):
        row = []
        for week in range(weeks):
            index = weekday + week * DAYS_PER_WEEK
            row.append(levels[index] if index < len(levels) else None)
        rows.append(row)

    return CalendarLayout(
        grid=Grid(weeks=weeks, rows=rows),
        month_labels=_month_labels(window),
    )
