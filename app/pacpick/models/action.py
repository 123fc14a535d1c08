"""Action models for package operations.

This module defines the keys that trigger package actions in the
selector, the actions themselves, and their execution results.
"""

from dataclasses import dataclass
from enum import Enum

from pacpick.models.package import PackageSource


class ActionKey(Enum):
    """Selector keys that terminate the selector with an action.

    Attributes:
        UPDATE: Upgrade the selected package.
        REMOVE: Remove the selected package after confirmation.
        REINSTALL: Reinstall the selected package.
    """

    UPDATE = "u"
    REMOVE = "d"
    REINSTALL = "r"

    @property
    def label(self) -> str:
        """User-facing verb for this key."""
        return self.name.lower()


class ActionType(Enum):
    """Type of package management action.

    Attributes:
        INSTALL: Install or upgrade a package (update and reinstall).
        REMOVE: Remove a package with unneeded dependencies and config files.
    """

    INSTALL = "install"
    REMOVE = "remove"


@dataclass(frozen=True, slots=True)
class Action:
    """Represents a single package management action to be executed.

    Attributes:
        action_type: The type of action (install or remove).
        package: Name of the package to operate on.
        source: Package source whose executor handles this package.
        label: Verb shown to the user (update, reinstall, remove).
    """

    action_type: ActionType
    package: str
    source: PackageSource
    label: str

    def __post_init__(self) -> None:
        """Validate action data after initialization."""
        if not self.package:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    @property
    def is_remove(self) -> bool:
        """Check if this is a remove action."""
        return self.action_type == ActionType.REMOVE


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Result of executing a package management action.

    The executor's own output goes straight to the terminal, so only the
    exit code is recorded.

    Attributes:
        action: The action that was executed.
        returncode: Exit code of the executor command.
    """

    action: Action
    returncode: int

    @property
    def success(self) -> bool:
        """Check if the action completed successfully."""
        return self.returncode == 0


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Outcome of one pass through the selector.

    Attributes:
        key: Action key pressed instead of plain confirm, if any.
        name: Package name of the chosen line, if one resolved.
    """

    key: ActionKey | None = None
    name: str | None = None

    @property
    def cancelled(self) -> bool:
        """True when the user left the selector without choosing anything."""
        return self.key is None and self.name is None


def create_action(key: ActionKey, package: str, source: PackageSource) -> Action:
    """Create the action a selector key stands for.

    Update and reinstall share the install/upgrade action; only the
    label differs.

    Args:
        key: The pressed action key.
        package: Name of the package to operate on.
        source: Package source whose executor handles this package.

    Returns:
        Action configured for the key.
    """
    action_type = ActionType.REMOVE if key is ActionKey.REMOVE else ActionType.INSTALL
    return Action(
        action_type=action_type,
        package=package,
        source=source,
        label=key.label,
    )
