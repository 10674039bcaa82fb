"""CLI package for xnd.

This package contains the Typer application and all subcommands.
"""

from xnd.cli.main import app

__all__ = ["app"]
