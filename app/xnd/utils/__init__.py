"""Utility modules for xnd.

This module exports commonly used utility functions.
"""

from xnd.utils.files import dump_json, write_atomic
from xnd.utils.formatting import (
    configure_logging,
    console,
    create_package_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "configure_logging",
    "console",
    "create_package_table",
    "dump_json",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "write_atomic",
]
