"""
CLI display functions for git-calendar.
"""

from git_calendar.grid_layout import (
    COLUMN_WIDTH,
    CalendarLayout,
    IntensityLevel,
    MonthLabel,
)

# 256-color palette codes per intensity level
LEVEL_COLORS = {
    IntensityLevel.NONE: 237,
    IntensityLevel.LOW: 139,
    IntensityLevel.MID: 40,
    IntensityLevel.HIGH: 190,
    IntensityLevel.VERY_HIGH: 1,
}

PLAIN_SYMBOLS = {
    IntensityLevel.NONE: ".",
    IntensityLevel.LOW: ":",
    IntensityLevel.MID: "o",
    IntensityLevel.HIGH: "O",
    IntensityLevel.VERY_HIGH: "#",
}

SQUARE = "◼"

GUTTER = "    "

# Only every other weekday row is labeled
WEEKDAY_LABELS = {1: "Mon", 3: "Wed", 5: "Fri"}


def format_square(level: IntensityLevel, color: bool = True) -> str:
    """
    Format a single day cell.

    Args:
        level: Intensity level of the day
        color: Use ANSI 256-color escapes; otherwise a plain ASCII symbol

    Returns:
        Cell text, always COLUMN_WIDTH characters wide when printed
    """
    if not color:
        return PLAIN_SYMBOLS[level] + " " * (COLUMN_WIDTH - 1)
    return f"\x1b[38;5;{LEVEL_COLORS[level]}m{SQUARE} \x1b[0m"


def format_month_row(month_labels: list[MonthLabel]) -> str:
    """Place month labels at their columns after the weekday gutter."""
    row = ""
    for month in month_labels:
        if len(row) < month.column:
            row += " " * (month.column - len(row))
        row += month.label
    return GUTTER + row


def render_calendar(layout: CalendarLayout, color: bool = True) -> list[str]:
    """
    Render the calendar as lines of text.

    Args:
        layout: CalendarLayout from lay_out()
        color: Use ANSI colors for the cells

    Returns:
        Month header line followed by one line per weekday
    """
    lines = [format_month_row(layout.month_labels)]

    for weekday, row in enumerate(layout.grid.rows):
        label = WEEKDAY_LABELS.get(weekday, "")
        line = f"{label:<{len(GUTTER)}}"
        for level in row:
            # Absent cells in the trailing partial week are skipped
            if level is None:
                continue
            line += format_square(level, color)
        lines.append(line)

    return lines


def display_calendar(layout: CalendarLayout, color: bool = True) -> None:
    """Print the calendar to the console."""
    for line in render_calendar(layout, color):
        print(line)


def display_summary(total_commits: int, author: str | None = None) -> None:
    """Print the commit total below the calendar."""
    plural = "commit" if total_commits == 1 else "commits"
    who = f" by {author}" if author else ""
    print()
    print(f"{total_commits} {plural}{who} in the last year")
