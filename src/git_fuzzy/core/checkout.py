"""Decide what a pattern should check out.

resolve_checkout_target() returns one of three discriminated-union members,
keyed purely on how many branches matched:

- CommitTarget: nothing matched, try the pattern itself as a commit/ref
- BranchTarget: exactly one branch matched
- AmbiguousBranch: several matched; nothing should be checked out
"""

from dataclasses import dataclass

from git_fuzzy.core.branches import BranchRecord
from git_fuzzy.core.matching import match_branches


@dataclass(frozen=True)
class BranchTarget:
    """Exactly one branch matched the pattern."""

    branch: BranchRecord

    @property
    def ref(self) -> str:
        return self.branch.name


@dataclass(frozen=True)
class CommitTarget:
    """No branch matched; the pattern is passed to git checkout as-is."""

    ref: str


@dataclass(frozen=True)
class AmbiguousBranch:
    """Error result for a pattern matching several branches."""

    pattern: str
    candidates: tuple[BranchRecord, ...]

    @property
    def error_type(self) -> str:
        return "ambiguous-branch"

    @property
    def message(self) -> str:
        return f"Ambiguous branch name '{self.pattern}'. Multiple matches:"


CheckoutTarget = BranchTarget | CommitTarget | AmbiguousBranch


def resolve_checkout_target(branches: list[BranchRecord], pattern: str) -> CheckoutTarget:
    """Match the pattern and classify the result by match count."""
    matches = match_branches(branches, pattern)
    if not matches:
        return CommitTarget(ref=pattern)
    if len(matches) == 1:
        return BranchTarget(branch=matches[0])
    return AmbiguousBranch(pattern=pattern, candidates=tuple(matches))
