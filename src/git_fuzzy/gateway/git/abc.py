"""Abstract interface for the git operations git-fuzzy needs.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
- DryRunGit: Wrapper that reports mutations instead of running them
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real, fake, dry-run) must implement this interface.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def list_remotes(self, repo_root: Path) -> list[str]:
        """List configured remote names in `git remote` order.

        Best-effort: returns an empty list if git fails for any reason.
        """
        ...

    @abstractmethod
    def list_refs(self, repo_root: Path, prefix: str) -> list[str]:
        """List short ref names under a ref namespace.

        Args:
            repo_root: Path to the repository root
            prefix: Ref namespace, e.g. "refs/heads/" or "refs/remotes/origin/"

        Returns:
            Short names in the order git reports them (e.g. "main",
            "origin/feature"). Empty if git fails for any reason.
        """
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def checkout(self, cwd: Path, ref: str) -> str:
        """Check out a branch, commit or any other ref.

        Returns:
            Everything git printed for a successful checkout: its stderr
            (e.g. "Switched to branch 'main'") followed by its stdout (e.g.
            "Your branch is up to date with 'origin/main'."), possibly empty

        Raises:
            SubprocessLaunchError: If git could not be started
            SubprocessFailure: If git rejected the checkout; the message is
                git's own error text
        """
        ...
