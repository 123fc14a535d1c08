"""Package operators for executing upgrade and removal actions.

This module exports the operator classes and a factory keyed by source.
"""

from pacpick.core.config import PacpickConfig
from pacpick.models.package import PackageSource
from pacpick.operators.aur import AurOperator
from pacpick.operators.base import Operator
from pacpick.operators.pacman import PacmanOperator


def get_operator(source: PackageSource, config: PacpickConfig) -> Operator:
    """Get the action executor for a package source.

    Args:
        source: Package source of the selected package.
        config: Active configuration.

    Returns:
        Operator instance for the source.
    """
    if source is PackageSource.FOREIGN:
        return AurOperator(config.aur_helper)
    return PacmanOperator(config.native_command, config.elevation_command)


__all__ = ["AurOperator", "Operator", "PacmanOperator", "get_operator"]
