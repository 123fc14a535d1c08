"""Shell execution utilities.

Provides subprocess execution with proper error handling.
"""

import os
import shutil
import subprocess
from dataclasses import dataclass


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


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
) -> CommandResult:
    """Execute a command and capture its output.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait for command.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=check,
        timeout=timeout,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def run_interactive(
    args: list[str],
    *,
    env: dict[str, str] | None = None,
) -> int:
    """Execute a command interactively, inheriting the terminal.

    Unlike run_command(), this does NOT capture stdout/stderr, so the
    command's own progress output and prompts reach the user verbatim.

    Args:
        args: Command and arguments to execute.
        env: Additional environment variables (merged with current env).

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    full_env = {**os.environ, **(env or {})}
    result = subprocess.run(
        args,
        check=False,
        env=full_env,
    )
    return result.returncode


def run_filter(
    args: list[str],
    input_text: str,
    *,
    env: dict[str, str] | None = None,
) -> CommandResult:
    """Pipe text into a full-screen filter and capture what it prints.

    The filter draws its UI on the controlling terminal, so only stdout is
    captured; stderr stays attached to the terminal.

    Args:
        args: Command and arguments to execute.
        input_text: Text fed to the command on stdin.
        env: Additional environment variables (merged with current env).

    Returns:
        CommandResult with the captured stdout and the exit code.

    Raises:
        FileNotFoundError: If command executable is not found.
    """
    full_env = {**os.environ, **(env or {})}
    result = subprocess.run(
        args,
        input=input_text,
        stdout=subprocess.PIPE,
        text=True,
        check=False,
        env=full_env,
    )
    return CommandResult(stdout=result.stdout or "", stderr="", returncode=result.returncode)
