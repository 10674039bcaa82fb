"""Main CLI application entry point.

Defines the Typer application, global options and command registration.
"""

from pathlib import Path
from typing import Annotated

import typer

from xnd import __version__
from xnd.cli.commands import account, create, edit, init, install, listing, publish, uninstall
from xnd.core.project import ProjectContext
from xnd.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="xnd",
    help="A simple package manager.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"xnd version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    project: Annotated[
        Path | None,
        typer.Option(
            "--project",
            "-C",
            help="Project directory (default: current directory).",
            file_okay=False,
        ),
    ] = None,
) -> None:
    """xnd - a simple package manager.

    Installs packages from an npm-compatible registry into node_modules
    and keeps package.json up to date.
    """
    configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["project"] = ProjectContext.from_path(project)


# Register commands (aliases are hidden from the command list)
app.command("init")(init.init)
app.command("install")(install.install)
app.command("i", hidden=True, help="Alias for install.")(install.install)
app.command("uninstall")(uninstall.uninstall)
app.command("un", hidden=True, help="Alias for uninstall.")(uninstall.uninstall)
app.command("list")(listing.list_packages)
app.command("ls", hidden=True, help="Alias for list.")(listing.list_packages)
app.command("create")(create.create)
app.command("c", hidden=True, help="Alias for create.")(create.create)
app.command("edit")(edit.edit)
app.command("e", hidden=True, help="Alias for edit.")(edit.edit)
app.command("login")(account.login)
app.command("logout")(account.logout)
app.command("whoami")(account.whoami)
app.command("set-tier")(account.set_tier)
app.command("publish")(publish.publish)


if __name__ == "__main__":
    app()
