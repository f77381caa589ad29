"""Locate the enclosing git repository by walking up the filesystem."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RepoContext:
    """A discovered repository.

    Attributes:
        root: Directory containing the `.git` entry
    """

    root: Path


@dataclass(frozen=True)
class NoRepoSentinel:
    """Marks that no enclosing repository was found."""

    message: str = "Not in a git repository"


def discover_repo(start: Path) -> RepoContext | NoRepoSentinel:
    """Find the nearest ancestor of `start` (inclusive) that holds a `.git` entry.

    `.git` may be a directory or a file, so linked worktrees and submodules are
    recognized. Only the filesystem is consulted; git is not invoked.

    Args:
        start: Directory to begin the search from, usually the process cwd

    Returns:
        RepoContext for the first match, or NoRepoSentinel if the filesystem
        root is reached without one
    """
    current = start
    while True:
        if (current / ".git").exists():
            return RepoContext(root=current)
        if current.parent == current:
            return NoRepoSentinel()
        current = current.parent
