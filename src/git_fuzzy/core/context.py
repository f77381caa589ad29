"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from git_fuzzy.cli.config import GlobalConfig, default_config_path, load_config
from git_fuzzy.core.repo_discovery import NoRepoSentinel, RepoContext, discover_repo
from git_fuzzy.gateway.git.abc import Git
from git_fuzzy.gateway.git.dry_run import DryRunGit
from git_fuzzy.gateway.git.real import RealGit


@dataclass(frozen=True)
class FuzzyContext:
    """Immutable context holding all dependencies for a git-fuzzy run.

    Created at the CLI entry point and passed to the command. Tests build
    one with for_test() and hand it to CliRunner.invoke(obj=...).
    """

    git: Git
    cwd: Path  # Current working directory at CLI invocation
    repo: RepoContext | NoRepoSentinel
    config: GlobalConfig
    dry_run: bool

    @staticmethod
    def for_test(
        git: Git,
        cwd: Path,
        *,
        repo: RepoContext | NoRepoSentinel | None = None,
        config: GlobalConfig | None = None,
        dry_run: bool = False,
    ) -> "FuzzyContext":
        """Create a context for tests.

        The repository defaults to `cwd` itself so tests need no `.git`
        directory on disk.

        Example:
            >>> git = FakeGit(refs={"refs/heads/": ["main"]})
            >>> ctx = FuzzyContext.for_test(git, Path("/repo"))
        """
        return FuzzyContext(
            git=DryRunGit(git) if dry_run else git,
            cwd=cwd,
            repo=repo if repo is not None else RepoContext(root=cwd),
            config=config if config is not None else GlobalConfig(),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool, config_path: Path | None = None) -> FuzzyContext:
    """Create the production context.

    Raises:
        ValueError: If the config file is invalid
    """
    git: Git = RealGit()
    if dry_run:
        git = DryRunGit(git)

    repo: RepoContext | NoRepoSentinel
    try:
        cwd = Path.cwd()
    except FileNotFoundError:
        # The working directory was deleted out from under the shell
        cwd = Path(".")
        repo = NoRepoSentinel()
    else:
        repo = discover_repo(cwd)

    return FuzzyContext(
        git=git,
        cwd=cwd,
        repo=repo,
        config=load_config(config_path if config_path is not None else default_config_path()),
        dry_run=dry_run,
    )
