"""AUR package scanner implementation.

Lists explicitly installed foreign packages through an AUR helper.
"""

from pacpick.models.package import PackageSource
from pacpick.scanners.base import Scanner


class AurScanner(Scanner):
    """Scanner for foreign (AUR) packages.

    Uses ``<helper> -Qem``; yay and paru pass query operations through
    to pacman.
    """

    def __init__(self, command: str = "yay") -> None:
        super().__init__(command)

    @property
    def source(self) -> PackageSource:
        """Return FOREIGN as the package source."""
        return PackageSource.FOREIGN

    def list_args(self) -> list[str]:
        """Explicit, foreign packages."""
        return [self._command, "-Qem"]
