"""Git integration."""

from git_fuzzy.gateway.git.abc import Git
from git_fuzzy.gateway.git.dry_run import DryRunGit
from git_fuzzy.gateway.git.fake import FakeGit
from git_fuzzy.gateway.git.real import RealGit

__all__ = [
    "Git",
    "DryRunGit",
    "FakeGit",
    "RealGit",
]
