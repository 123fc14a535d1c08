"""pacman package scanner implementation.

Lists explicitly installed native packages and answers detail queries
against the local package database.
"""

from pacpick.models.package import PackageSource
from pacpick.scanners.base import Scanner
from pacpick.utils.shell import CommandResult, run_command, run_interactive


class PacmanScanner(Scanner):
    """Scanner for native packages.

    ``pacman -Qen`` lists explicitly installed packages found in the sync
    databases. Detail queries use ``pacman -Qi``, which covers foreign
    packages too since they are registered in the same local database.
    """

    def __init__(self, command: str = "pacman") -> None:
        super().__init__(command)

    @property
    def source(self) -> PackageSource:
        """Return NATIVE as the package source."""
        return PackageSource.NATIVE

    def list_args(self) -> list[str]:
        """Explicit, native packages."""
        return [self._command, "-Qen"]

    def info_args(self, name: str) -> list[str]:
        """Return the command line of the detail query for a package."""
        return [self._command, "-Qi", name]

    def info(self, name: str) -> CommandResult:
        """Query full metadata for an installed package.

        Args:
            name: Exact package name.

        Returns:
            CommandResult; a non-zero exit code means the package is unknown.
        """
        return run_command(self.info_args(name), timeout=None)

    def show_info(self, name: str) -> int:
        """Print full metadata for a package straight to the terminal.

        Args:
            name: Exact package name.

        Returns:
            Exit code of the detail query.
        """
        return run_interactive(self.info_args(name))
