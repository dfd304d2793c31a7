"""
FastAPI web application for git-calendar.

Serves the commit calendar as JSON and as an HTML heatmap page.
"""

from datetime import datetime
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from git_calendar import config
from git_calendar.git_log import GitLogError, GitLogSource
from git_calendar.grid_layout import MONTH_NAMES, cell_date, week_start
from git_calendar.report import CalendarReport, build_report

app = FastAPI(
    title="git-calendar",
    description="Commit activity calendar for a git repository",
    version="0.1.0",
)

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")


class WindowInfo(BaseModel):
    """Reporting window of a calendar."""

    start: str
    end: str
    total_days: int


class DayInfo(BaseModel):
    """Commit count and intensity level for one day."""

    date: str
    count: int
    level: int


class MonthLabelInfo(BaseModel):
    """Month header label and its character column."""

    label: str
    column: int


class CalendarResponse(BaseModel):
    """Full calendar report."""

    author: str | None
    window: WindowInfo
    weeks: int
    max_count: int
    total_commits: int
    days: list[DayInfo]
    grid: list[list[int | None]]
    week_starts: list[str]
    month_labels: list[MonthLabelInfo]


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


def _fetch_report(author: str | None) -> CalendarReport:
    """
    Read commits from git and build the calendar report.

    Raises:
        HTTPException: on configuration or git errors
    """
    try:
        config.validate_config()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")

    source = GitLogSource(config.GIT_BINARY, config.REPO_PATH)

    try:
        timestamps = source.get_commit_timestamps(author)
    except GitLogError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return build_report(timestamps, datetime.now())


def _report_to_response(report: CalendarReport, author: str | None) -> CalendarResponse:
    window = report.window
    grid = report.layout.grid

    days = [
        DayInfo(
            date=cell_date(window, index % 7, index // 7).isoformat(),
            count=count,
            level=int(level),
        )
        for index, (count, level) in enumerate(zip(report.buckets, report.levels))
    ]

    return CalendarResponse(
        author=author,
        window=WindowInfo(
            start=window.start_date.isoformat(),
            end=window.end_date.isoformat(),
            total_days=window.length_days,
        ),
        weeks=grid.weeks,
        max_count=max(report.buckets, default=0),
        total_commits=report.total_commits,
        days=days,
        grid=[[None if level is None else int(level) for level in row] for row in grid.rows],
        week_starts=[week_start(window, week).isoformat() for week in range(grid.weeks)],
        month_labels=[
            MonthLabelInfo(label=month.label, column=month.column)
            for month in report.layout.month_labels
        ],
    )


@app.get("/api/calendar", response_model=CalendarResponse)
def get_calendar(author: str | None = None):
    """
    Get the commit calendar for the configured repository.

    Args:
        author: Optional author filter

    Returns:
        JSON with the window, per-day counts and levels, grid and month labels
    """
    report = _fetch_report(author)
    return _report_to_response(report, author)


@app.get("/", response_class=HTMLResponse)
def index(request: Request, author: str | None = None):
    """Render the calendar page."""
    report = _fetch_report(author)
    data = _report_to_response(report, author).model_dump()

    # Month of each week column, for an exactly aligned header
    data["week_months"] = [
        MONTH_NAMES[week_start(report.window, week).month - 1]
        for week in range(report.layout.grid.weeks)
    ]

    return templates.TemplateResponse(request, "index.html", data)
