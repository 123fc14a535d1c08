"""Data models for pacpick.

This module exports the core data structures used throughout the application.
"""

from pacpick.models.action import (
    Action,
    ActionKey,
    ActionResult,
    ActionType,
    SelectionResult,
    create_action,
)
from pacpick.models.package import (
    PackageEntry,
    PackageSource,
    PreviewMode,
    extract_package_name,
)

__all__ = [
    "Action",
    "ActionKey",
    "ActionResult",
    "ActionType",
    "PackageEntry",
    "PackageSource",
    "PreviewMode",
    "SelectionResult",
    "create_action",
    "extract_package_name",
]
