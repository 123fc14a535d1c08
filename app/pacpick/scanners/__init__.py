"""Package list providers for native and foreign packages.

This module exports the scanner classes and a factory keyed by source.
"""

from pacpick.core.config import PacpickConfig
from pacpick.models.package import PackageSource
from pacpick.scanners.aur import AurScanner
from pacpick.scanners.base import Scanner
from pacpick.scanners.pacman import PacmanScanner


def get_scanner(source: PackageSource, config: PacpickConfig) -> Scanner:
    """Get the list provider for a package source.

    Args:
        source: Package source to list.
        config: Active configuration.

    Returns:
        Scanner instance for the source.
    """
    if source is PackageSource.FOREIGN:
        return AurScanner(config.aur_helper)
    return PacmanScanner(config.native_command)


__all__ = ["AurScanner", "PacmanScanner", "Scanner", "get_scanner"]
