"""Production Git implementation using subprocess."""

import logging
from pathlib import Path

from git_fuzzy.gateway.git.abc import Git
from git_fuzzy.subprocess_utils import SubprocessError, run_subprocess_with_context

logger = logging.getLogger(__name__)


def _split_lines(output: str) -> list[str]:
    return [line.strip() for line in output.splitlines() if line.strip()]


class RealGit(Git):
    """Production implementation using subprocess.

    Query operations swallow failures so that one broken remote does not stop
    matching against the other branches. Checkout failures propagate.
    """

    def __init__(self, git_executable: str = "git") -> None:
        self._git = git_executable

    def list_remotes(self, repo_root: Path) -> list[str]:
        """List configured remote names."""
        try:
            result = run_subprocess_with_context(
                [self._git, "remote"],
                operation_context="list remotes",
                cwd=repo_root,
            )
        except SubprocessError as e:
            logger.debug("Ignoring failure to list remotes: %s", e)
            return []
        return _split_lines(result.stdout)

    def list_refs(self, repo_root: Path, prefix: str) -> list[str]:
        """List short ref names under a ref namespace."""
        try:
            result = run_subprocess_with_context(
                [self._git, "for-each-ref", "--format=%(refname:short)", prefix],
                operation_context=f"list refs under '{prefix}'",
                cwd=repo_root,
            )
        except SubprocessError as e:
            logger.debug("Ignoring failure to list refs under %s: %s", prefix, e)
            return []
        return _split_lines(result.stdout)

    def checkout(self, cwd: Path, ref: str) -> str:
        """Check out a branch, commit or any other ref."""
        result = run_subprocess_with_context(
            [self._git, "checkout", ref],
            operation_context=f"checkout '{ref}'",
            cwd=cwd,
        )
        # "Switched to branch ..." goes to stderr, upstream tracking status to stdout
        return result.stderr + result.stdout
