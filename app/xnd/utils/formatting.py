"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich, and the
logging setup behind the global --verbose flag.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from xnd.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Use truecolor on interactive terminals, let Rich auto-detect otherwise."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose, markup=False)],
        force=True,
    )
    # httpx logs every request at INFO; keep it for --verbose only
    logging.getLogger("httpx").setLevel(level)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def create_package_table(title: str | None = None) -> Table:
    """Create a pre-configured table for listing packages.

    Args:
        title: Optional table title.

    Returns:
        Rich Table with Package and Version columns.
    """
    table = Table(
        title=title,
        title_justify="left",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Package", style="package", no_wrap=True)
    table.add_column("Version", style="version")
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
