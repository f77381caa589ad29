"""Fake git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from git_fuzzy.gateway.git.abc import Git
from git_fuzzy.subprocess_utils import SubprocessFailure


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    State Management:
    - remotes: list[str] - Remote names, in `git remote` order
    - refs: dict[str, list[str]] - Mapping of ref prefix -> short names
    - checkout_failures: dict[str, str] - Mapping of ref -> git error text
    - checkout_messages: dict[str, str] - Mapping of ref -> git success output

    Refs are looked up by exact prefix, so a remote's branches are configured
    under "refs/remotes/<remote>/".

    Mutation Tracking:
    - checked_out_refs: list[tuple[Path, str]]

    Examples:
        git = FakeGit(
            remotes=["origin"],
            refs={
                "refs/heads/": ["main"],
                "refs/remotes/origin/": ["origin/main", "origin/develop"],
            },
        )
        git.checkout(repo, "origin/develop")
        assert git.checked_out_refs == [(repo, "origin/develop")]
    """

    def __init__(
        self,
        *,
        remotes: list[str] | None = None,
        refs: dict[str, list[str]] | None = None,
        checkout_failures: dict[str, str] | None = None,
        checkout_messages: dict[str, str] | None = None,
    ) -> None:
        self._remotes = remotes or []
        self._refs = refs or {}
        self._checkout_failures = checkout_failures or {}
        self._checkout_messages = checkout_messages or {}

        # Mutation tracking
        self._checked_out_refs: list[tuple[Path, str]] = []
        self._listed_prefixes: list[str] = []

    def list_remotes(self, repo_root: Path) -> list[str]:
        """List configured remote names."""
        return list(self._remotes)

    def list_refs(self, repo_root: Path, prefix: str) -> list[str]:
        """List short ref names configured for a prefix."""
        self._listed_prefixes.append(prefix)
        return list(self._refs.get(prefix, []))

    def checkout(self, cwd: Path, ref: str) -> str:
        """Record the checkout, or raise the configured failure for this ref."""
        if ref in self._checkout_failures:
            raise SubprocessFailure(
                ["git", "checkout", ref],
                returncode=1,
                stderr=self._checkout_failures[ref],
                operation_context=f"checkout '{ref}'",
            )
        self._checked_out_refs.append((cwd, ref))
        return self._checkout_messages.get(ref, "")

    # Read-only properties for test assertions
    @property
    def checked_out_refs(self) -> list[tuple[Path, str]]:
        """Get the list of (cwd, ref) checkouts performed during the test."""
        return self._checked_out_refs.copy()

    @property
    def listed_prefixes(self) -> list[str]:
        """Get the ref prefixes queried during the test, in call order."""
        return self._listed_prefixes.copy()
