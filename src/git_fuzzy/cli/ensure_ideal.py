"""CLI error handling for non-ideal-state type narrowing.

This module provides the EnsureIdeal class for narrowing types from operations
that can return non-ideal states (repository discovery, branch resolution).
Each method either returns the narrowed value or reports the problem on stderr
and exits with status 1.
"""

from __future__ import annotations

from git_fuzzy.cli.formatting import error_prefix, highlight_match
from git_fuzzy.core.checkout import AmbiguousBranch, BranchTarget, CheckoutTarget, CommitTarget
from git_fuzzy.core.repo_discovery import NoRepoSentinel, RepoContext
from git_fuzzy.output.output import user_output


class EnsureIdeal:
    """Helper class for narrowing non-ideal-state discriminated unions."""

    @staticmethod
    def repo(result: RepoContext | NoRepoSentinel) -> RepoContext:
        """Ensure we are inside a git repository.

        Args:
            result: Outcome of repository discovery

        Returns:
            The RepoContext (type narrowed)

        Raises:
            SystemExit: If no repository was found (with exit code 1)
        """
        if isinstance(result, NoRepoSentinel):
            user_output(error_prefix() + result.message)
            raise SystemExit(1)
        return result

    @staticmethod
    def unambiguous(
        result: CheckoutTarget, *, highlight_color: str = "green"
    ) -> BranchTarget | CommitTarget:
        """Ensure the pattern resolved to at most one branch.

        On ambiguity every candidate is listed with the matched part
        highlighted, and nothing is checked out.

        Args:
            result: Outcome of resolve_checkout_target()
            highlight_color: click color name for the matched part

        Returns:
            The BranchTarget or CommitTarget (type narrowed)

        Raises:
            SystemExit: If several branches matched (with exit code 1)
        """
        if isinstance(result, AmbiguousBranch):
            user_output(result.message)
            for candidate in result.candidates:
                user_output(
                    "  " + highlight_match(candidate.name, result.pattern, color=highlight_color)
                )
            raise SystemExit(1)
        return result
