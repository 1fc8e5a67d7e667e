"""Utility modules for eha.

This module exports commonly used utility functions.
"""

from eha.utils.formatting import (
    configure_logging,
    console,
    create_entries_table,
    err_console,
    print_error,
    print_error_chain,
    print_info,
    print_success,
)

__all__ = [
    "configure_logging",
    "console",
    "create_entries_table",
    "err_console",
    "print_error",
    "print_error_chain",
    "print_info",
    "print_success",
]
