"""Utility modules for sdkmgr.

This module exports commonly used utility functions.
"""

from sdkmgr.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
)
from sdkmgr.utils.shell import CommandResult, run_command, run_confirming

__all__ = [
    "CommandResult",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "run_command",
    "run_confirming",
]
