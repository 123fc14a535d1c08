"""CLI commands for pacpick.

This package contains all subcommand implementations.
"""

from pacpick.cli.commands import config, hook

__all__ = ["config", "hook"]
