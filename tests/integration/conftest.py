"""Helpers for integration tests that run the real git binary."""

import shutil
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def init_git_repo(repo: Path, default_branch: str) -> None:
    """Create a repository with one commit on `default_branch`."""
    _git(repo, "init", "--initial-branch", default_branch)
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test User")
    _git(repo, "config", "commit.gpgsign", "false")
    (repo / "README.md").write_text("# Test\n", encoding="utf-8")
    _git(repo, "add", "README.md")
    _git(repo, "commit", "-m", "Initial commit")


def create_branch(repo: Path, name: str) -> None:
    _git(repo, "branch", name)


def current_branch(repo: Path) -> str:
    return _git(repo, "rev-parse", "--abbrev-ref", "HEAD").strip()


def head_sha(repo: Path) -> str:
    return _git(repo, "rev-parse", "HEAD").strip()


@pytest.fixture
def cloned_repo(tmp_path: Path) -> Path:
    """A clone whose origin has main, feature-y and release branches.

    Locally only main exists, plus an unpushed feature-x branch.
    """
    upstream = tmp_path / "upstream"
    upstream.mkdir()
    init_git_repo(upstream, "main")
    create_branch(upstream, "feature-y")
    create_branch(upstream, "release")

    clone = tmp_path / "clone"
    _git(tmp_path, "clone", "--quiet", str(upstream), str(clone))
    _git(clone, "config", "user.email", "test@example.com")
    _git(clone, "config", "user.name", "Test User")
    # Drop origin/HEAD so only real branches are listed under refs/remotes/origin/
    _git(clone, "remote", "set-head", "origin", "--delete")
    create_branch(clone, "feature-x")
    return clone
