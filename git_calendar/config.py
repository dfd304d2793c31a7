"""
Configuration management for git-calendar.

Loads settings from environment variables, with optional .env support.
"""

import os
import shutil

from dotenv import find_dotenv, load_dotenv

# Load .env file from the working directory or its parents
load_dotenv(find_dotenv(usecwd=True))

GIT_BINARY = os.getenv("GIT_CALENDAR_GIT", "git")
REPO_PATH = os.getenv("GIT_CALENDAR_REPO") or None


def validate_config():
    """Validate that git can be run against the configured repository."""
    problems = []

    if not GIT_BINARY or shutil.which(GIT_BINARY) is None:
        problems.append(f"GIT_CALENDAR_GIT: '{GIT_BINARY}' was not found on PATH")

    if REPO_PATH and not os.path.isdir(REPO_PATH):
        problems.append(f"GIT_CALENDAR_REPO: '{REPO_PATH}' is not a directory")

    if problems:
        raise ValueError(
            "Invalid configuration:\n"
            + "\n".join(f"  {problem}" for problem in problems)
            + "\nSet these in the environment or in a .env file."
        )
