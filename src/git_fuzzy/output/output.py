"""Output routing for CLI messages.

- user_output: messages meant for the person at the terminal (stderr)
- status_output: progress lines that belong on stdout
"""

import click


def user_output(message: str = "", nl: bool = True, color: bool | None = None) -> None:
    """Write a user-facing message to stderr."""
    click.echo(message, nl=nl, err=True, color=color)


def status_output(message: str = "", nl: bool = True, color: bool | None = None) -> None:
    """Write a progress message to stdout."""
    click.echo(message, nl=nl, color=color)
