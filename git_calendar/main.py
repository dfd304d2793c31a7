"""
git-calendar: a commit activity calendar for the terminal

Entry point for the application.
"""

import argparse
from datetime import datetime

from git_calendar import config
from git_calendar.cli import display_calendar, display_summary
from git_calendar.git_log import GitLogError, GitLogSource
from git_calendar.report import build_report


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-calendar",
        description="Show a year of commit activity in the current git repository",
    )
    parser.add_argument(
        "-a",
        "--author",
        help="Only count commits whose author matches this pattern",
        default=None,
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        help="Draw cells with plain characters instead of ANSI colors",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, now: datetime | None = None) -> int:
    args = parse_args(argv)
    author = args.author

    # Validate configuration
    try:
        config.validate_config()
    except ValueError as e:
        print(f"Configuration Error:\n{e}")
        return 1

    source = GitLogSource(config.GIT_BINARY, config.REPO_PATH)

    who = f" by {author}" if author else ""
    print(f"Reading commit history{who}...\n")

    try:
        timestamps = source.get_commit_timestamps(author)
    except GitLogError as e:
        print(f"Error: {e}")
        return 1

    # Read the clock once so every stage agrees on "today"
    if now is None:
        now = datetime.now()

    report = build_report(timestamps, now)
    display_calendar(report.layout, color=args.color)
    display_summary(report.total_commits, author)

    return 0


if __name__ == "__main__":
    exit(main())
