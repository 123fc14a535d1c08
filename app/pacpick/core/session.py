"""Interactive session loop.

One pass lists the packages of the current source, lets the user pick
one in the selector, then runs the chosen action:

- Enter: show full package details (always from the local database)
- u / r: upgrade or reinstall through the source's package manager
- d: remove after an explicit confirmation

In the persistent shape the session pauses after each action and shows
the list again; in the single-shot shape it ends after one pass.
"""

import logging

import typer

from pacpick.cli.display import render_header
from pacpick.core.config import PacpickConfig
from pacpick.core.elevation import ElevationError, ensure_elevation
from pacpick.core.selector import FzfSelector
from pacpick.core.state import SessionState, load_state, scratch_state
from pacpick.models.action import ActionResult, SelectionResult, create_action
from pacpick.operators import get_operator
from pacpick.scanners import get_scanner
from pacpick.scanners.pacman import PacmanScanner
from pacpick.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

logger = logging.getLogger(__name__)


def confirm_removal(package: str) -> bool:
    """Ask the user to confirm a removal.

    Only an explicit "y" or "Y" confirms; an empty reply means no.

    Args:
        package: Package about to be removed.

    Returns:
        True if the user confirmed.
    """
    reply: str = typer.prompt(
        f"Remove {package} with its unneeded dependencies and config files? [y/N]",
        default="",
        show_default=False,
    )
    return reply.strip() in ("y", "Y")


class Session:
    """Drives the list, select, act cycle until the user exits.

    Attributes:
        config: Active configuration.
        persistent: Loop back to the list after each action.
    """

    def __init__(
        self,
        config: PacpickConfig,
        selector: FzfSelector | None = None,
        persistent: bool | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            config: Active configuration.
            selector: Selector to use. Defaults to fzf with config settings.
            persistent: Override config.persistent (False for single-shot).
        """
        self.config = config
        self.persistent = config.persistent if persistent is None else persistent
        self._selector = selector or FzfSelector(config)
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        """Current session state."""
        return self._state

    def run(self) -> None:
        """Run passes until the user cancels (or once, when not persistent)."""
        while self.run_once():
            if not self.persistent:
                break
            typer.pause("Press any key to return to the package list...")

    def run_once(self) -> bool:
        """Run a single list, select, act pass.

        Returns:
            False when the user cancelled the selector, True otherwise.

        Raises:
            SelectorError: If the selector fails; the screen is not cleared.
        """
        selection = self.select()
        console.clear()

        if selection.cancelled:
            print_info("No package selected. Exiting.")
            return False

        if selection.name is None:
            print_warning("No package selected. Nothing to do.")
            return True

        self.handle(selection)
        return True

    def select(self) -> SelectionResult:
        """Show the selector for the current source.

        Source switches and preview toggles made inside the selector are
        read back into the session state once it exits.
        """
        scanner = get_scanner(self._state.source, self.config)
        try:
            entries = scanner.list_text()
        except RuntimeError as e:
            logger.warning("Listing %s packages failed: %s", self._state.source.value, e)
            entries = ""

        with scratch_state(self._state) as state_path:
            selection = self._selector.select(entries, state_path, render_header(scanner.label))
            self._state = load_state(state_path)

        logger.debug("Selection %s with state %s", selection, self._state)
        return selection

    def handle(self, selection: SelectionResult) -> ActionResult | None:
        """Run what a resolved selection asks for.

        Args:
            selection: Selection with a package name.

        Returns:
            ActionResult for upgrade/remove actions, None otherwise.
        """
        name = selection.name
        if name is None:
            msg = "Selection has no package name"
            raise ValueError(msg)

        if selection.key is None:
            self.show_details(name)
            return None

        operator = get_operator(self._state.source, self.config)
        if operator.requires_elevation:
            try:
                ensure_elevation(self.config.elevation_command)
            except ElevationError as e:
                print_error(f"{e}. Nothing was changed.")
                return None

        action = create_action(selection.key, name, self._state.source)
        if action.is_remove:
            console.print(f"Package to remove: [package]{name}[/]")
            if not confirm_removal(name):
                print_info("Removal cancelled.")
                return None
        else:
            console.print(
                f"Running {action.label} for [package]{name}[/] via {operator.command}..."
            )

        result = operator.execute(action)
        self._report(result)
        return result

    def show_details(self, name: str) -> int:
        """Print full metadata for a package from the local database.

        Args:
            name: Exact package name.

        Returns:
            Exit code of the detail query.
        """
        console.print(f"[success]You selected:[/] [package]{name}[/]")
        console.print()
        console.print("Full details:")
        returncode = PacmanScanner(self.config.native_command).show_info(name)
        console.print()
        return returncode

    def _report(self, result: ActionResult) -> None:
        """Print a one-line summary of an action result."""
        action = result.action
        if result.success:
            print_success(f"{action.label.capitalize()} of {action.package} finished.")
        else:
            print_error(
                f"{action.label.capitalize()} of {action.package} failed "
                f"(exit code {result.returncode})."
            )
