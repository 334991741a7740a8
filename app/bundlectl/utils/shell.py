"""Shell execution utilities.

Provides subprocess execution with proper error handling. Package
queries are blocking and carry no timeout: a hung tool hangs the run.
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass

from bundlectl.core.errors import CommandError, ToolNotFoundError

logger = logging.getLogger(__name__)


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

    def lines(self) -> list[str]:
        """Return non-empty stdout lines with trailing whitespace removed."""
        return [line.rstrip() for line in self.stdout.splitlines() if line.strip()]


def run_command(args: list[str], *, cwd: str | None = None) -> CommandResult:
    """Execute a shell command and return the result.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command. If None, uses current directory.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        cwd=cwd,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def run_checked(args: list[str], *, cwd: str | None = None) -> CommandResult:
    """Execute a command and fail hard unless it exits with status zero.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command.

    Returns:
        CommandResult of the successful command.

    Raises:
        ToolNotFoundError: If the executable is not installed.
        CommandError: If the command exits non-zero.
    """
    logger.debug("Running: %s", " ".join(args))
    try:
        result = run_command(args, cwd=cwd)
    except FileNotFoundError as e:
        msg = f"Required tool not found: {args[0]}"
        raise ToolNotFoundError(msg) from e

    if not result.success:
        raise CommandError(args, result.returncode, result.stderr)
    return result


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def run_interactive(args: list[str], *, cwd: str | None = None) -> int:
    """Execute a command interactively, inheriting the terminal.

    Unlike run_command(), this does NOT capture stdout/stderr, so
    package installers can prompt for sudo passwords and long-running
    tools stream their progress straight into the CI log.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command.

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    result = subprocess.run(args, check=False, cwd=cwd)
    return result.returncode


def run_interactive_checked(args: list[str], *, cwd: str | None = None) -> None:
    """Execute a command interactively and fail hard on a non-zero exit.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command.

    Raises:
        ToolNotFoundError: If the executable is not installed.
        CommandError: If the command exits non-zero.
    """
    logger.info("Running: %s", " ".join(args))
    try:
        returncode = run_interactive(args, cwd=cwd)
    except FileNotFoundError as e:
        msg = f"Required tool not found: {args[0]}"
        raise ToolNotFoundError(msg) from e

    if returncode != 0:
        raise CommandError(args, returncode)
