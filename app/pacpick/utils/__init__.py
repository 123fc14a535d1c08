"""Utility modules for pacpick.

This module exports commonly used utility functions.
"""

from pacpick.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from pacpick.utils.shell import (
    CommandResult,
    command_exists,
    run_command,
    run_filter,
    run_interactive,
)

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "run_filter",
    "run_interactive",
]
