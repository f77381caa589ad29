import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

import click

CONFIG_ENV_VAR = "GIT_FUZZY_CONFIG"


@dataclass(frozen=True)
class GlobalConfig:
    """In-memory representation of `~/.git-fuzzy/config.toml`.

    Example config.toml:
      # Only match local branches
      include_remotes = false

      # Any click color name
      highlight_color = "cyan"
    """

    include_remotes: bool = True
    highlight_color: str = "green"


def default_config_path() -> Path:
    """Config file location: $GIT_FUZZY_CONFIG, else ~/.git-fuzzy/config.toml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".git-fuzzy" / "config.toml"


def load_config(cfg_path: Path) -> GlobalConfig:
    """Load config.toml if present; otherwise return defaults.

    Raises:
        ValueError: If the file is not valid TOML, a key has the wrong type, or
            highlight_color is not a click color name
    """
    if not cfg_path.exists():
        return GlobalConfig()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid config file {cfg_path}: {e}") from e

    include_remotes = data.get("include_remotes", True)
    if not isinstance(include_remotes, bool):
        raise ValueError(f"'include_remotes' in {cfg_path} must be true or false")

    highlight_color = data.get("highlight_color", "green")
    if not isinstance(highlight_color, str):
        raise ValueError(f"'highlight_color' in {cfg_path} must be a string")
    # click.style rejects names it has no ANSI code for
    try:
        click.style("", fg=highlight_color)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"'highlight_color' in {cfg_path} is not a known color: {highlight_color!r}"
        ) from e

    return GlobalConfig(include_remotes=include_remotes, highlight_color=highlight_color)
