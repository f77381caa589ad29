"""Pattern matching against branch names."""

from git_fuzzy.core.branches import BranchRecord


def match_exact(branches: list[BranchRecord], pattern: str) -> list[BranchRecord]:
    """Branches whose name equals the pattern (case-sensitive)."""
    return [b for b in branches if b.name == pattern]


def match_substring(branches: list[BranchRecord], pattern: str) -> list[BranchRecord]:
    """Branches whose name contains the pattern (case-sensitive)."""
    return [b for b in branches if pattern in b.name]


def match_branches(branches: list[BranchRecord], pattern: str) -> list[BranchRecord]:
    """Exact matches if there are any, otherwise substring matches.

    A branch named "dev" wins over "develop". Order follows the input list.
    """
    matches = match_exact(branches, pattern)
    if matches:
        return matches
    return match_substring(branches, pattern)
