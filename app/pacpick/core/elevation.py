"""Privilege elevation for native package actions.

pacman needs root for every mutating action. Credentials are validated
up front so a rejected password aborts the action before anything runs.
"""

import logging

from pacpick.utils.shell import run_interactive

logger = logging.getLogger(__name__)


class ElevationError(Exception):
    """Raised when elevated credentials could not be obtained."""


def ensure_elevation(command: str = "sudo") -> None:
    """Request or refresh cached elevated credentials.

    Runs ``<command> -v`` attached to the terminal so the user can type
    a password if needed.

    Args:
        command: Elevation command (sudo-compatible).

    Raises:
        ElevationError: If validation fails or the command cannot run.
    """
    logger.debug("Validating credentials with %s -v", command)
    try:
        returncode = run_interactive([command, "-v"])
    except (FileNotFoundError, OSError) as e:
        raise ElevationError(f"Cannot run {command}: {e}") from e

    if returncode != 0:
        raise ElevationError(f"{command} credential check failed (exit code {returncode})")
