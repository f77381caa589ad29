"""git-fuzzy CLI entry point.

This package provides a Click-based CLI that checks out a git branch from a
partial name. See `git-fuzzy --help` for details.
"""

from git_fuzzy.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `git-fuzzy` console script."""
    cli()
