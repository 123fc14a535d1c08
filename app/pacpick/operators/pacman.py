"""pacman package operator implementation.

Executes package upgrades and removals using pacman under sudo.
"""

from pacpick.models.package import PackageSource
from pacpick.operators.base import Operator


class PacmanOperator(Operator):
    """Operator for native packages.

    pacman needs root for every mutating action, so commands are wrapped
    in the elevation command and the session validates credentials first.
    """

    def __init__(self, command: str = "pacman", elevation_command: str = "sudo") -> None:
        super().__init__(command)
        self._elevation_command = elevation_command

    @property
    def source(self) -> PackageSource:
        """Return NATIVE as the package source."""
        return PackageSource.NATIVE

    @property
    def requires_elevation(self) -> bool:
        return True

    @property
    def elevation_command(self) -> str:
        """Command that runs pacman with root privileges."""
        return self._elevation_command

    def install_args(self, package: str) -> list[str]:
        return [self._elevation_command, self._command, "-S", package]

    def remove_args(self, package: str) -> list[str]:
        return [self._elevation_command, self._command, "-Rns", package]
