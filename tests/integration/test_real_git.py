"""Integration tests for RealGit against real repositories."""

import subprocess
from pathlib import Path

import pytest

from git_fuzzy.core.branches import BranchRecord, tracking_branches
from git_fuzzy.gateway.git.real import RealGit
from git_fuzzy.subprocess_utils import SubprocessFailure
from tests.integration.conftest import current_branch, init_git_repo, requires_git

pytestmark = requires_git


def test_list_refs_reports_local_branches_in_git_order(tmp_path: Path) -> None:
    init_git_repo(tmp_path, "main")

    assert RealGit().list_refs(tmp_path, "refs/heads/") == ["main"]


def test_list_remotes_and_remote_refs(cloned_repo: Path) -> None:
    git = RealGit()

    assert git.list_remotes(cloned_repo) == ["origin"]
    remote_refs = git.list_refs(cloned_repo, "refs/remotes/origin/")
    assert "origin/main" in remote_refs
    assert "origin/feature-y" in remote_refs
    assert "origin/release" in remote_refs


def test_list_remotes_is_empty_without_remotes(tmp_path: Path) -> None:
    init_git_repo(tmp_path, "main")

    assert RealGit().list_remotes(tmp_path) == []


def test_queries_are_empty_outside_repository(tmp_path: Path) -> None:
    git = RealGit()

    assert git.list_remotes(tmp_path) == []
    assert git.list_refs(tmp_path, "refs/heads/") == []


def test_queries_are_empty_when_git_is_missing(tmp_path: Path) -> None:
    git = RealGit(git_executable="git-fuzzy-no-such-git")

    assert git.list_remotes(tmp_path) == []
    assert git.list_refs(tmp_path, "refs/heads/") == []


def test_tracking_branches_on_real_clone(cloned_repo: Path) -> None:
    """origin/main is hidden by local main."""
    result = tracking_branches(RealGit(), cloned_repo)

    assert result == [
        BranchRecord("feature-x", is_remote=False),
        BranchRecord("main", is_remote=False),
        BranchRecord("origin/feature-y", is_remote=True),
        BranchRecord("origin/release", is_remote=True),
    ]


def test_checkout_switches_branch(cloned_repo: Path) -> None:
    message = RealGit().checkout(cloned_repo, "feature-x")

    assert current_branch(cloned_repo) == "feature-x"
    assert "feature-x" in message


def test_checkout_of_unknown_ref_raises_with_git_message(tmp_path: Path) -> None:
    init_git_repo(tmp_path, "main")

    with pytest.raises(SubprocessFailure) as exc_info:
        RealGit().checkout(tmp_path, "zzz-nonexistent")

    assert "zzz-nonexistent" in str(exc_info.value)
    assert current_branch(tmp_path) == "main"


def test_list_refs_survives_non_utf8_branch_name(tmp_path: Path) -> None:
    init_git_repo(tmp_path, "main")
    subprocess.run([b"git", b"branch", b"caf\xe9"], cwd=tmp_path, check=True, capture_output=True)
    subprocess.run(["git", "branch", "develop"], cwd=tmp_path, check=True, capture_output=True)

    result = RealGit().list_refs(tmp_path, "refs/heads/")

    assert len(result) == 3
    assert "caf\ufffd" in result
    assert "develop" in result
    assert "main" in result


def test_checkout_reports_upstream_tracking_status(cloned_repo: Path) -> None:
    RealGit().checkout(cloned_repo, "feature-x")

    message = RealGit().checkout(cloned_repo, "main")

    assert "Switched to branch 'main'" in message
    assert "Your branch is up to date with 'origin/main'." in message
