"""AUR package operator implementation.

Executes package upgrades and removals through an AUR helper.
"""

from pacpick.models.package import PackageSource
from pacpick.operators.base import Operator


class AurOperator(Operator):
    """Operator for foreign (AUR) packages.

    AUR helpers refuse to run as root and elevate internally when they
    hand the built package to pacman, so no credentials are requested
    up front.
    """

    def __init__(self, command: str = "yay") -> None:
        super().__init__(command)

    @property
    def source(self) -> PackageSource:
        """Return FOREIGN as the package source."""
        return PackageSource.FOREIGN

    @property
    def requires_elevation(self) -> bool:
        return False

    def install_args(self, package: str) -> list[str]:
        return [self._command, "-S", package]

    def remove_args(self, package: str) -> list[str]:
        return [self._command, "-Rns", package]
