"""Branch enumeration and the tracking-branch filter."""

from dataclasses import dataclass
from pathlib import Path

from git_fuzzy.gateway.git.abc import Git

LOCAL_BRANCH_PREFIX = "refs/heads/"


@dataclass(frozen=True)
class BranchRecord:
    """A branch as reported by git.

    Attributes:
        name: Short ref name, e.g. "main" or "origin/feature"
        is_remote: True for remote-tracking branches
    """

    name: str
    is_remote: bool


def remote_branch_prefix(remote: str) -> str:
    """Ref namespace holding a remote's tracking branches."""
    return f"refs/remotes/{remote}/"


def all_branches(
    git: Git, repo_root: Path, *, include_remotes: bool = True
) -> list[BranchRecord]:
    """Enumerate local branches, then remote-tracking branches per remote.

    Locals come first in git's order; remote branches follow grouped by remote
    in `git remote` order. Failures of individual git calls show up as empty
    groups rather than errors.

    Args:
        git: Git gateway
        repo_root: Repository root to run git in
        include_remotes: If False, only local branches are returned
    """
    branches = [
        BranchRecord(name, is_remote=False)
        for name in git.list_refs(repo_root, LOCAL_BRANCH_PREFIX)
    ]
    if not include_remotes:
        return branches

    for remote in git.list_remotes(repo_root):
        for name in git.list_refs(repo_root, remote_branch_prefix(remote)):
            branches.append(BranchRecord(name, is_remote=True))
    return branches


def strip_remote_name(name: str) -> str | None:
    """Drop the leading "<remote>/" segment, or None if there is none."""
    _, sep, branch = name.partition("/")
    if not sep:
        return None
    return branch


def filter_tracking_branches(branches: list[BranchRecord]) -> list[BranchRecord]:
    """Drop remote branches that already have a local branch of the same name.

    Every local branch is kept. A remote branch "origin/main" is kept only if
    there is no local "main". Remote names without a "/" (git reports
    refs/remotes/origin/HEAD as plain "origin") are dropped.
    """
    local_names = {b.name for b in branches if not b.is_remote}

    result: list[BranchRecord] = []
    for branch in branches:
        if not branch.is_remote:
            result.append(branch)
            continue
        short_name = strip_remote_name(branch.name)
        if short_name is not None and short_name not in local_names:
            result.append(branch)
    return result


def tracking_branches(
    git: Git, repo_root: Path, *, include_remotes: bool = True
) -> list[BranchRecord]:
    """Enumerate branches and apply the tracking filter."""
    return filter_tracking_branches(all_branches(git, repo_root, include_remotes=include_remotes))
