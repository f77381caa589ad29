"""No-op Git wrapper for dry-run mode."""

from pathlib import Path

from git_fuzzy.gateway.git.abc import Git
from git_fuzzy.output.output import user_output


class DryRunGit(Git):
    """No-op wrapper that prevents execution of mutating git operations.

    Query operations are delegated so branch matching behaves exactly as in a
    real run; checkout prints the command it would have run instead.

    Usage:
        noop_git = DryRunGit(RealGit())

        # Prints message instead of checking out
        noop_git.checkout(cwd, "develop")
    """

    def __init__(self, wrapped: Git) -> None:
        """Create a dry-run wrapper around a Git implementation.

        Args:
            wrapped: The Git implementation to wrap (usually RealGit)
        """
        self._wrapped = wrapped

    def checkout(self, cwd: Path, ref: str) -> str:
        """Print dry-run message instead of checking out."""
        user_output(f"[DRY RUN] Would run: git checkout {ref}")
        return ""

    # ============================================================================
    # Query Operations (pass-through delegation)
    # ============================================================================

    def list_remotes(self, repo_root: Path) -> list[str]:
        """List configured remote names."""
        return self._wrapped.list_remotes(repo_root)

    def list_refs(self, repo_root: Path, prefix: str) -> list[str]:
        """List short ref names under a ref namespace."""
        return self._wrapped.list_refs(repo_root, prefix)
