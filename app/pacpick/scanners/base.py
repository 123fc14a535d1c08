"""Abstract base class for package list providers.

This module defines the Scanner interface that the native and foreign
package listings implement.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Iterator

from pacpick.models.package import PackageEntry, PackageSource
from pacpick.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


class Scanner(ABC):
    """Abstract base class for all package list providers.

    Scanners query a package manager for explicitly installed packages
    that are not dependencies of other packages, one entry per line.

    Example:
        >>> scanner = PacmanScanner()
        >>> if scanner.is_available():
        ...     for entry in scanner.scan():
        ...         print(entry.name)
    """

    def __init__(self, command: str) -> None:
        """Initialize the scanner.

        Args:
            command: Executable queried for the package list.
        """
        self._command = command

    @property
    def command(self) -> str:
        """Executable queried for the package list."""
        return self._command

    @property
    def label(self) -> str:
        """Name shown in the header and preview for this source."""
        return self._command

    @property
    @abstractmethod
    def source(self) -> PackageSource:
        """Return the package source this scanner lists."""

    @abstractmethod
    def list_args(self) -> list[str]:
        """Return the command line that prints the package list."""

    def is_available(self) -> bool:
        """Check if the package manager is available on the system."""
        return command_exists(self._command)

    def scan(self) -> Iterator[PackageEntry]:
        """Yield the installed, non-dependency packages of this source.

        An empty listing is valid. pacman-style queries exit non-zero
        when nothing matches, so a failure only counts when the command
        printed an error.

        Yields:
            PackageEntry for each listed package.

        Raises:
            RuntimeError: If the package manager is missing, cannot run or reports
                an error.
        """
        if not self.is_available():
            msg = f"{self._command} is not available on this system"
            raise RuntimeError(msg)

        args = self.list_args()
        logger.debug("Listing %s packages: %s", self.source.value, " ".join(args))
        try:
            result = run_command(args, timeout=None)
        except (subprocess.SubprocessError, OSError) as e:
            msg = f"{' '.join(args)} could not run: {e}"
            raise RuntimeError(msg) from e

        if not result.success and result.stderr.strip():
            msg = f"{' '.join(args)} failed: {result.stderr.strip()}"
            raise RuntimeError(msg)

        for line in result.stdout.splitlines():
            entry = PackageEntry.from_line(line)
            if entry is not None:
                yield entry

    def list_text(self) -> str:
        """Return the package list as newline-delimited selector input."""
        return "".join(f"{entry.line}\n" for entry in self.scan())
