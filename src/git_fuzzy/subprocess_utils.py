"""Subprocess execution with consistent error reporting.

Every git invocation goes through run_subprocess_with_context(), which turns
the two ways a command can fail into typed exceptions:

- SubprocessLaunchError: the executable could not be started at all
- SubprocessFailure: the command ran and exited non-zero
"""

import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

from git_fuzzy.debug_timing import timed_operation


class SubprocessError(RuntimeError):
    """Base class for failures of an external command."""


class SubprocessLaunchError(SubprocessError):
    """The external command could not be started (e.g. not on PATH)."""

    def __init__(self, cmd: Sequence[str], cause: OSError) -> None:
        self.cmd = list(cmd)
        self.cause = cause
        super().__init__(f"Failed to execute {self.cmd[0]}: {cause}")


class SubprocessFailure(SubprocessError):
    """The external command ran and returned a non-zero exit status.

    The message is the command's own stderr text so it can be shown to the
    user unmodified. When the command printed nothing, a short description of
    the operation is used instead.
    """

    def __init__(
        self,
        cmd: Sequence[str],
        *,
        returncode: int,
        stderr: str,
        operation_context: str,
    ) -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        self.operation_context = operation_context
        message = stderr.rstrip()
        if not message:
            message = f"Failed to {operation_context} (exit code {returncode})"
        super().__init__(message)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Copy of the current environment that keeps git non-interactive.

    GIT_TERMINAL_PROMPT=0 makes git fail instead of blocking on a credential
    prompt.
    """
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def run_subprocess_with_context(
    cmd: Sequence[str],
    *,
    operation_context: str,
    cwd: Path,
) -> subprocess.CompletedProcess[str]:
    """Run a command, capturing output, and raise typed errors on failure.

    Args:
        cmd: Argument vector; never interpreted by a shell
        operation_context: Short description used in fallback error messages,
            e.g. "checkout 'main'"
        cwd: Working directory for the command

    Returns:
        The completed process (returncode is always 0). Output is decoded as
        UTF-8 with undecodable bytes replaced, since ref names may hold any bytes

    Raises:
        SubprocessLaunchError: If the executable could not be started
        SubprocessFailure: If the command exited non-zero
    """
    with timed_operation(" ".join(cmd)):
        try:
            result = subprocess.run(
                list(cmd),
                cwd=cwd,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                env=copied_env_for_git_subprocess(),
            )
        except OSError as e:
            raise SubprocessLaunchError(cmd, e) from e

    if result.returncode != 0:
        raise SubprocessFailure(
            cmd,
            returncode=result.returncode,
            stderr=result.stderr,
            operation_context=operation_context,
        )
    return result
