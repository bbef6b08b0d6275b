"""Git operations wrapper using subprocess."""

from __future__ import annotations

import subprocess
from pathlib import Path


class GitError(Exception):
    """Error during git operations."""

    pass


class GitRepo:
    """Wrapper for git operations using subprocess."""

    def __init__(self, path: str | Path | None = None) -> None:
        """Initialize git repository wrapper.

        Args:
            path: Path to the repository (defaults to current directory)
        """
        self.path = Path(path) if path else Path.cwd()

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        """Run a git command and capture its output.

        Args:
            *args: Git command arguments

        Returns:
            CompletedProcess result

        Raises:
            GitError: If git is missing or the command exits non-zero
        """
        cmd = ["git", *args]
        try:
            return subprocess.run(
                cmd,
                cwd=self.path,
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found. Is git installed?") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"Command failed: {' '.join(cmd)}\nExit code: {e.returncode}\nStderr: {e.stderr}"
            ) from e

    def _run_interactive(self, *args: str) -> int:
        """Run a git command attached to the user's terminal.

        Returns:
            The exit status of git
        """
        cmd = ["git", *args]
        try:
            return subprocess.run(cmd, cwd=self.path, check=False).returncode
        except FileNotFoundError as e:
            raise GitError("git executable not found. Is git installed?") from e

    def is_repository(self) -> bool:
        """Check if this is a valid git repository."""
        try:
            self._run("rev-parse", "--git-dir")
            return True
        except GitError:
            return False

    def check_repository(self) -> None:
        """Check if this is a valid git repository.

        Raises:
            GitError: If not a git repository
        """
        if not self.is_repository():
            raise GitError("Not a git repository!")

    def get_staged_diff(self) -> str:
        """Get diff of staged changes."""
        result = self._run("--no-pager", "diff", "--staged")
        return result.stdout

    def get_staged_files(self) -> list[str]:
        """Get list of staged files."""
        result = self._run("diff", "--staged", "--name-only")
        return [f for f in result.stdout.strip().split("\n") if f]

    def commit(self, message: str | None = None) -> int:
        """Commit the staged changes.

        Args:
            message: Commit message; if None, git opens the editor

        Returns:
            The exit status of ``git commit``
        """
        if message is None:
            return self._run_interactive("commit")
        return self._run_interactive("commit", "-m", message)

    def amend(self) -> int:
        """Open the editor to amend the last commit."""
        return self._run_interactive("commit", "--amend")
