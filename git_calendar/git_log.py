"""
Read commit timestamps from a local git repository.
"""

import subprocess


class GitLogError(Exception):
    """Raised when commit history cannot be read from git."""

    pass


def parse_timestamps(output: str) -> list[int]:
    """
    Parse `git log --pretty=format:%at` output.

    Args:
        output: Raw stdout from git, one epoch timestamp per line

    Returns:
        List of epoch seconds. Lines that are not integers are skipped.
    """
    timestamps = []
    for line in output.splitlines():
        try:
            timestamps.append(int(line.strip()))
        except ValueError:
            continue
    return timestamps


class GitLogSource:
    """Supplies commit timestamps by running `git log`."""

    # Over-fetch margin; the calendar window itself is authoritative
    SINCE = "13 months"

    def __init__(self, git_binary: str = "git", repo_path: str | None = None):
        """
        Initialize the commit source.

        Args:
            git_binary: Name or path of the git executable
            repo_path: Repository to read. Defaults to the current directory.
        """
        self.git_binary = git_binary
        self.repo_path = repo_path

    def build_command(self, author: str | None = None) -> list[str]:
        """Build the git log command line."""
        command = [
            self.git_binary,
            "log",
            "--no-merges",
            "--pretty=format:%at",
            f"--since={self.SINCE}",
        ]
        if author is not None:
            command.append(f"--author={author}")
        return command

    def get_commit_timestamps(self, author: str | None = None) -> list[int]:
        """
        Fetch timestamps of non-merge commits from the last 13 months.

        Args:
            author: Only include commits whose author matches this pattern

        Returns:
            List of commit times as epoch seconds

        Raises:
            GitLogError: If git cannot be run, exits with an error, or
                produces output that is not valid text
        """
        command = self.build_command(author)

        try:
            result = subprocess.run(
                command,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=False,
            )
        except (OSError, UnicodeDecodeError) as e:
            raise GitLogError(f"Could not run {self.git_binary}: {e}") from e

        if result.returncode != 0:
            message = result.stderr.strip() or f"exit status {result.returncode}"
            raise GitLogError(f"git log returned an error: {message}")

        return parse_timestamps(result.stdout)
