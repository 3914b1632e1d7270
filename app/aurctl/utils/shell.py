"""Shell execution utilities.

Provides subprocess execution with proper error handling. External tools
run without a timeout by default: a build may legitimately take hours.
"""

import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from aurctl.core.errors import CommandError


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def _merged_env(env: dict[str, str] | None) -> dict[str, str] | None:
    if env is None:
        return None
    return {**os.environ, **env}


def run_command(
    args: Sequence[str],
    *,
    timeout: float | None = None,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> CommandResult:
    """Execute a command, capturing its output.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command. None waits forever.
        cwd: Working directory for the command. If None, uses current directory.
        env: Additional environment variables (merged with current env).

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        list(args),
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
        cwd=cwd,
        env=_merged_env(env),
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def run_interactive(
    args: Sequence[str],
    *,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> int:
    """Execute a command interactively, inheriting the terminal.

    Unlike run_command(), this does NOT capture stdout/stderr,
    allowing the subprocess to interact with the user's terminal
    directly (makepkg asking for a sudo password, an editor, a pager).

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Additional environment variables (merged with current env).

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    full_env = {**os.environ, **(env or {})}
    result = subprocess.run(
        list(args),
        check=False,
        cwd=cwd,
        env=full_env,
    )
    return result.returncode


def check_command(
    args: Sequence[str],
    *,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> CommandResult:
    """Run a command capturing output and fail on a non-zero exit.

    Raises:
        CommandError: If the command exits non-zero or cannot be started.
    """
    try:
        result = run_command(args, cwd=cwd, env=env)
    except OSError as e:
        raise CommandError(args, 127, str(e)) from e
    if not result.success:
        raise CommandError(args, result.returncode, result.stderr)
    return result


def check_interactive(
    args: Sequence[str],
    *,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> None:
    """Run a command attached to the terminal and fail on a non-zero exit.

    Raises:
        CommandError: If the command exits non-zero or cannot be started.
    """
    try:
        returncode = run_interactive(args, cwd=cwd, env=env)
    except OSError as e:
        raise CommandError(args, 127, str(e)) from e
    if returncode != 0:
        raise CommandError(args, returncode)

