"""Utility modules for bundlectl.

This module exports commonly used utility functions.
"""

from bundlectl.utils.formatting import (
    configure_logging,
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from bundlectl.utils.shell import CommandResult, command_exists, run_checked, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "configure_logging",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_checked",
    "run_command",
]
