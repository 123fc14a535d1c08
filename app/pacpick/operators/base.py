"""Abstract base class for package operators.

This module defines the Operator interface that the native and foreign
action executors implement.
"""

import logging
from abc import ABC, abstractmethod

from pacpick.models.action import Action, ActionResult, ActionType
from pacpick.models.package import PackageSource
from pacpick.utils.shell import command_exists, run_interactive

logger = logging.getLogger(__name__)


class Operator(ABC):
    """Abstract base class for all package operators.

    Operators run install/upgrade and remove commands for one package at
    a time. Commands are attached to the terminal: progress, prompts and
    errors come from the package manager itself.

    Example:
        >>> operator = PacmanOperator()
        >>> if operator.is_available():
        ...     result = operator.install("htop")
        ...     print(result.success)
    """

    def __init__(self, command: str) -> None:
        """Initialize the operator.

        Args:
            command: Package manager executable.
        """
        self._command = command

    @property
    def command(self) -> str:
        """Package manager executable."""
        return self._command

    @property
    @abstractmethod
    def source(self) -> PackageSource:
        """Return the package source this operator handles."""

    @property
    @abstractmethod
    def requires_elevation(self) -> bool:
        """Whether credentials must be validated before mutating actions."""

    @abstractmethod
    def install_args(self, package: str) -> list[str]:
        """Return the install-or-upgrade command line for a package."""

    @abstractmethod
    def remove_args(self, package: str) -> list[str]:
        """Return the remove command line for a package.

        Removal also drops dependencies no longer needed and the
        package's configuration files.
        """

    def is_available(self) -> bool:
        """Check if the package manager is available on the system."""
        return command_exists(self._command)

    def install(self, package: str, label: str = "update") -> ActionResult:
        """Install or upgrade a package.

        Args:
            package: Exact package name.
            label: Verb shown to the user (update or reinstall).

        Returns:
            ActionResult carrying the command's exit code.
        """
        action = Action(
            action_type=ActionType.INSTALL,
            package=package,
            source=self.source,
            label=label,
        )
        return self._run(action, self.install_args(package))

    def remove(self, package: str) -> ActionResult:
        """Remove a package with its unneeded dependencies and config files.

        Args:
            package: Exact package name.

        Returns:
            ActionResult carrying the command's exit code.
        """
        action = Action(
            action_type=ActionType.REMOVE,
            package=package,
            source=self.source,
            label="remove",
        )
        return self._run(action, self.remove_args(package))

    def execute(self, action: Action) -> ActionResult:
        """Dispatch an action to install() or remove().

        Raises:
            ValueError: If the action's source doesn't match this operator.
        """
        if action.source != self.source:
            msg = (
                f"Action source {action.source.value} doesn't match "
                f"operator source {self.source.value}"
            )
            raise ValueError(msg)

        if action.is_remove:
            return self.remove(action.package)
        return self.install(action.package, label=action.label)

    def _run(self, action: Action, args: list[str]) -> ActionResult:
        """Run a command for an action attached to the terminal."""
        logger.info("Executing %s for %s: %s", action.label, action.package, " ".join(args))
        try:
            returncode = run_interactive(args)
        except (FileNotFoundError, OSError) as e:
            logger.error("Cannot run %s: %s", args[0], e)
            returncode = 127
        return ActionResult(action=action, returncode=returncode)
