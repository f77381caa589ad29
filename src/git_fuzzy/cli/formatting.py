"""Terminal formatting helpers."""

import click


def highlight_match(branch_name: str, pattern: str, *, color: str = "green") -> str:
    """Emphasize the first occurrence of `pattern` inside `branch_name`.

    Returns the name unchanged if the pattern is empty or not present.
    click.unstyle() of the result always gives back `branch_name`.

    Example:
        >>> click.unstyle(highlight_match("feature-login", "login"))
        'feature-login'
    """
    pos = branch_name.find(pattern)
    if not pattern or pos == -1:
        return branch_name

    end = pos + len(pattern)
    before = branch_name[:pos]
    matched = branch_name[pos:end]
    after = branch_name[end:]
    return before + click.style(matched, fg=color, bold=True) + after


def error_prefix() -> str:
    """Red "Error: " label used in front of fatal messages."""
    return click.style("Error: ", fg="red")
