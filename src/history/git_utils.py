"""Git utilities for reading manifest history."""

import subprocess
from pathlib import Path
from typing import Protocol

from common.constants import GIT_LOG_FORMAT
from common.env import env
from common.logger import get_logger

logger = get_logger(__name__)


class VersionControlGateway(Protocol):
    """The three version-control queries the history pipeline depends on."""

    def has_commits(self, repo_path: Path) -> bool: ...

    def log_following(self, repo_path: Path, filename: str) -> str: ...

    def show_file_at(self, repo_path: Path, commit_id: str, filename: str) -> str: ...


class GitGateway:
    """VersionControlGateway backed by the git command line."""

    def __init__(self, executable: str | None = None):
        """Initialize the gateway.

        Args:
            executable: git binary to invoke (default: GIT_EXECUTABLE or "git")
        """
        self.executable = executable or env.git_executable()

    def _run(self, repo_path: Path, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        return subprocess.run(
            [self.executable, *args],
            cwd=repo_path,
            capture_output=True,
            text=True,
            check=check,
        )

    def has_commits(self, repo_path: Path) -> bool:
        """
        Check whether the repository has at least one commit.

        Uses: git rev-parse HEAD

        Args:
            repo_path: Path to git repository

        Returns:
            True if HEAD resolves, False for an empty or invalid repository
        """
        try:
            result = self._run(repo_path, "rev-parse", "HEAD", check=False)
        except OSError as e:
            logger.debug(f"Could not run {self.executable} in {repo_path}: {e}")
            return False
        return result.returncode == 0

    def log_following(self, repo_path: Path, filename: str) -> str:
        """
        Get one line per commit that touched a file, newest first.

        Uses: git log --follow --format=%H|%an|%ad|%s --date=iso -- filename

        Args:
            repo_path: Path to git repository
            filename: Path of the file relative to the repository root

        Returns:
            Raw log text, one "id|author|date|subject" line per commit

        Raises:
            subprocess.CalledProcessError: If git command fails
        """
        result = self._run(
            repo_path,
            "log",
            "--follow",
            f"--format={GIT_LOG_FORMAT}",
            "--date=iso",
            "--",
            filename,
        )
        return result.stdout

    def show_file_at(self, repo_path: Path, commit_id: str, filename: str) -> str:
        """
        Get file content at a specific commit.

        Uses: git show commit_id:filename

        Args:
            repo_path: Path to git repository
            commit_id: Commit hash to query
            filename: Path of the file relative to the repository root

        Returns:
            File content, or an empty string if the file does not exist at that commit
            or commit_id is empty

        Raises:
            subprocess.CalledProcessError: If git fails for reasons other than a missing path
        """
        # "git show :path" would read the index, not a revision
        if not commit_id:
            return ""

        try:
            result = self._run(repo_path, "show", f"{commit_id}:{filename}")
        except subprocess.CalledProcessError as e:
            # "does not exist in" / "exists on disk, but not in" for a missing path
            if "exist" in (e.stderr or ""):
                logger.debug(f"{filename} does not exist at {commit_id[:7]}")
                return ""
            raise
        return result.stdout
