"""Package models for browsing installed packages.

This module defines the package sources pacpick can list, the preview
modes of the detail pane, and the entries shown in the selector.
"""

from dataclasses import dataclass, field
from enum import Enum


class PackageSource(Enum):
    """Which package universe is currently listed.

    NATIVE packages come from the configured repositories and are handled
    by pacman; FOREIGN packages were built from the AUR and are handled by
    an AUR helper.
    """

    NATIVE = "native"
    FOREIGN = "foreign"

    def toggled(self) -> "PackageSource":
        """Return the other source."""
        if self is PackageSource.NATIVE:
            return PackageSource.FOREIGN
        return PackageSource.NATIVE


class PreviewMode(Enum):
    """Content rendered in the selector's preview pane."""

    INFO = "info"
    HELP = "help"

    def toggled(self) -> "PreviewMode":
        """Return the other preview mode."""
        if self is PreviewMode.INFO:
            return PreviewMode.HELP
        return PreviewMode.INFO


@dataclass(frozen=True, slots=True)
class PackageEntry:
    """A single line of list-provider output.

    Only the first whitespace-delimited token is interpreted (the package
    name); the remainder is kept verbatim for display.

    Attributes:
        name: Package name (e.g., 'vim', 'visual-studio-code-bin')
        details: Opaque remainder of the line (version, flags)
    """

    name: str
    details: str = field(default="")

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name or any(c.isspace() for c in self.name):
            msg = f"Invalid package name: {self.name!r}"
            raise ValueError(msg)

    @classmethod
    def from_line(cls, line: str) -> "PackageEntry | None":
        """Parse a list-provider line into an entry.

        Args:
            line: Raw line, e.g. "vim 9.0-1 [installed]".

        Returns:
            PackageEntry, or None for a blank line.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return None
        details = parts[1] if len(parts) > 1 else ""
        return cls(name=parts[0], details=details)

    @property
    def line(self) -> str:
        """Render the entry as the selector shows it."""
        if self.details:
            return f"{self.name} {self.details}"
        return self.name


def extract_package_name(line: str) -> str | None:
    """Return the package name from a selector line, if any.

    Args:
        line: Line as echoed back by the selector.

    Returns:
        First whitespace-delimited token, or None for a blank line.
    """
    entry = PackageEntry.from_line(line)
    return entry.name if entry is not None else None
