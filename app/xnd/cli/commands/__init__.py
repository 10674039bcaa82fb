"""CLI commands for xnd.

This package contains all command implementations.
"""

from xnd.cli.commands import account, create, edit, init, install, listing, publish, uninstall

__all__ = ["account", "create", "edit", "init", "install", "listing", "publish", "uninstall"]
