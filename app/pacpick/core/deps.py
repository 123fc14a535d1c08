"""Required-tool checks.

pacpick delegates all real work to external programs. This module verifies
they are installed before any UI appears and explains how to get the
missing ones.
"""

import logging
from dataclasses import dataclass

from pacpick.core.config import PacpickConfig
from pacpick.utils.shell import command_exists

logger = logging.getLogger(__name__)

# Remediation hints keyed by the well-known tool names
_HINTS: dict[str, str] = {
    "pacman": "This tool is intended for Arch Linux or other Arch-based distributions.",
    "fzf": (
        "fzf is required for the interactive interface.\n"
        "You can install it with: sudo pacman -S fzf"
    ),
    "yay": (
        "yay is required for browsing AUR packages.\n"
        "You can find installation instructions at https://github.com/Jguer/yay"
    ),
    "paru": (
        "paru is required for browsing AUR packages.\n"
        "You can find installation instructions at https://github.com/Morganamilo/paru"
    ),
}


@dataclass(frozen=True, slots=True)
class Dependency:
    """An external program pacpick needs.

    Attributes:
        command: Executable name looked up in PATH.
        role: What the program is used for.
    """

    command: str
    role: str

    @property
    def hint(self) -> str:
        """Human-readable remediation hint."""
        return _HINTS.get(self.command, f"Install '{self.command}' ({self.role}).")


class MissingDependencyError(Exception):
    """Raised when a required external program is not installed."""

    def __init__(self, dependency: Dependency) -> None:
        self.dependency = dependency
        super().__init__(f"'{dependency.command}' command not found.")


def required_dependencies(config: PacpickConfig) -> list[Dependency]:
    """List the programs the session needs, in check order.

    Args:
        config: Active configuration.

    Returns:
        Dependencies for the native manager, the AUR helper and the selector.
    """
    return [
        Dependency(command=config.native_command, role="native package manager"),
        Dependency(command=config.aur_helper, role="AUR helper"),
        Dependency(command=config.selector, role="fuzzy selector"),
    ]


def check_dependencies(config: PacpickConfig) -> None:
    """Verify every required program is available.

    Args:
        config: Active configuration.

    Raises:
        MissingDependencyError: For the first program not found in PATH.
    """
    for dependency in required_dependencies(config):
        if not command_exists(dependency.command):
            logger.debug("Missing %s (%s)", dependency.command, dependency.role)
            raise MissingDependencyError(dependency)
