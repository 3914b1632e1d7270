"""Utility modules for aurctl.

This module exports commonly used utility functions.
"""

from aurctl.utils.formatting import (
    console,
    err_console,
    print_action,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from aurctl.utils.shell import (
    CommandResult,
    check_command,
    check_interactive,
    run_command,
    run_interactive,
)

__all__ = [
    "CommandResult",
    "check_command",
    "check_interactive",
    "console",
    "err_console",
    "print_action",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "run_interactive",
]
