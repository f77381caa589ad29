import logging
from dataclasses import replace

import click

from git_fuzzy.cli.ensure_ideal import EnsureIdeal
from git_fuzzy.cli.formatting import error_prefix
from git_fuzzy.core.branches import tracking_branches
from git_fuzzy.core.checkout import CommitTarget, resolve_checkout_target
from git_fuzzy.core.context import FuzzyContext, create_context
from git_fuzzy.gateway.git.dry_run import DryRunGit
from git_fuzzy.output.output import status_output, user_output
from git_fuzzy.subprocess_utils import SubprocessError

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

logger = logging.getLogger(__name__)


def checkout_pattern(ctx: FuzzyContext, pattern: str) -> None:
    """Resolve `pattern` to a branch (or commit) and check it out.

    Raises:
        SystemExit: With status 1 outside a repository, on ambiguity, or when
            git refuses the checkout
    """
    repo = EnsureIdeal.repo(ctx.repo)

    branches = tracking_branches(ctx.git, repo.root, include_remotes=ctx.config.include_remotes)
    logger.debug("Matching %r against %d branches", pattern, len(branches))

    target = EnsureIdeal.unambiguous(
        resolve_checkout_target(branches, pattern),
        highlight_color=ctx.config.highlight_color,
    )

    if isinstance(target, CommitTarget):
        status_output(f"No branches match '{pattern}', trying as commit...")
    else:
        logger.debug("Resolved %r to branch %r", pattern, target.ref)

    try:
        git_message = ctx.git.checkout(ctx.cwd, target.ref)
    except SubprocessError as e:
        user_output(error_prefix() + str(e))
        raise SystemExit(1) from e

    if git_message.strip():
        user_output(git_message.rstrip())


@click.command("git-fuzzy", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="git-fuzzy")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show which ref would be checked out without checking it out",
)
@click.argument("pattern")
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool, pattern: str) -> None:
    """Fuzzy git branch checkout.

    PATTERN is a branch name or part of one (e.g. 'dev' to match 'develop').
    An exact branch name always wins; otherwise every branch containing
    PATTERN is a candidate. With no candidates, PATTERN is checked out as a
    commit or ref.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=dry_run)
        except ValueError as e:
            user_output(error_prefix() + str(e))
            raise SystemExit(1) from e
    elif dry_run and not ctx.obj.dry_run:
        ctx.obj = replace(ctx.obj, git=DryRunGit(ctx.obj.git), dry_run=True)

    checkout_pattern(ctx.obj, pattern)
