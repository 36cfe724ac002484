"""Shared fixtures for history tests."""

import os
import subprocess
from pathlib import Path

import pytest


class FakeGateway:
    """In-memory VersionControlGateway returning canned git output."""

    def __init__(self, log: str = "", files: dict[str, str] | None = None, has_commits=True):
        self.log = log
        self.files = files or {}
        self._has_commits = has_commits
        self.shown: list[str] = []

    def has_commits(self, repo_path: Path) -> bool:
        return self._has_commits

    def log_following(self, repo_path: Path, filename: str) -> str:
        return self.log

    def show_file_at(self, repo_path: Path, commit_id: str, filename: str) -> str:
        self.shown.append(commit_id)
        content = self.files.get(commit_id, "")
        if isinstance(content, Exception):
            raise content
        return content


@pytest.fixture
def fake_gateway():
    """Factory for in-memory gateways."""
    return FakeGateway


@pytest.fixture
def temp_git_repo(tmp_path):
    """
    Create a temporary git repository with proper git config.
    Returns the repo path.
    """
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()

    subprocess.run(["git", "init"], cwd=repo_path, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=repo_path,
        check=True,
        capture_output=True,
    )
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=repo_path,
        check=True,
        capture_output=True,
    )
    subprocess.run(
        ["git", "config", "commit.gpgsign", "false"],
        cwd=repo_path,
        check=True,
        capture_output=True,
    )

    return repo_path


@pytest.fixture
def git_commit_all():
    """Return a helper that stages everything and commits with a fixed date."""

    def commit(repo_path: Path, message: str, date: str):
        subprocess.run(["git", "add", "-A"], cwd=repo_path, check=True, capture_output=True)
        subprocess.run(
            ["git", "commit", "-m", message],
            cwd=repo_path,
            check=True,
            capture_output=True,
            env={**os.environ, "GIT_AUTHOR_DATE": date, "GIT_COMMITTER_DATE": date},
        )

    return commit
