"""Init command implementation.

Creates package.json for the current project from a few prompts.
"""

from typing import Annotated

import typer

from xnd.cli.types import get_project
from xnd.core.manifest import ManifestError, manifest_exists, save_manifest
from xnd.core.scaffold import DEFAULT_LICENSE, DEFAULT_MAIN, DEFAULT_VERSION, init_manifest
from xnd.utils.formatting import print_error, print_info, print_success, print_warning


def init(
    ctx: typer.Context,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Accept all defaults without prompting.",
        ),
    ] = False,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing package.json.",
        ),
    ] = False,
) -> None:
    """Initialize a new project.

    Asks for the package name, version, description, entry point, author
    and license, then writes package.json to the project root.

    Examples:
        xnd init            # Answer the prompts
        xnd init --yes      # Use defaults for everything
        xnd init --force    # Replace an existing package.json
    """
    project = get_project(ctx)
    path = project.manifest_path

    if manifest_exists(path):
        if not force:
            print_error(f"{project.manifest_name} already exists: {path}")
            print_info("Use --force to overwrite.")
            raise typer.Exit(code=1)
        print_warning(f"Overwriting existing {project.manifest_name}: {path}")

    defaults = {
        "name": project.root.name,
        "version": DEFAULT_VERSION,
        "description": "",
        "main": DEFAULT_MAIN,
        "author": "",
        "license": DEFAULT_LICENSE,
    }

    if yes:
        answers = defaults
    else:
        answers = {
            "name": typer.prompt("Package name", default=defaults["name"]),
            "version": typer.prompt("Version", default=defaults["version"]),
            "description": typer.prompt("Description", default="", show_default=False),
            "main": typer.prompt("Entry point", default=defaults["main"]),
            "author": typer.prompt("Author", default="", show_default=False),
            "license": typer.prompt("License", default=defaults["license"]),
        }

    try:
        save_manifest(init_manifest(**answers), path)
    except ManifestError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"{project.manifest_name} created successfully!")
