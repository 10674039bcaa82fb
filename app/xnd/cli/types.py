"""Shared helpers for CLI commands.

Commands read the global options stored on the Typer context through
these helpers instead of touching ctx.obj directly.
"""

import typer

from xnd.core.config import ConfigError, load_config
from xnd.core.project import ProjectContext
from xnd.models.config import XndConfig
from xnd.utils.formatting import print_error


def get_project(ctx: typer.Context) -> ProjectContext:
    """Project selected with --project, or the current directory."""
    obj = ctx.ensure_object(dict)
    project = obj.get("project")
    if project is None:
        project = ProjectContext.from_path()
        obj["project"] = project
    return project


def is_quiet(ctx: typer.Context) -> bool:
    """Check if --quiet was given."""
    return bool(ctx.ensure_object(dict).get("quiet", False))


def require_config() -> XndConfig:
    """Load the user configuration or exit with an error message.

    Raises:
        typer.Exit: If the configuration file is invalid.
    """
    try:
        return load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
