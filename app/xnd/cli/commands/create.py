"""Create command implementation.

Scaffolds a new package directory next to the current project.
"""

from typing import Annotated

import typer

from xnd.cli.types import get_project
from xnd.core.manifest import ManifestError
from xnd.core.scaffold import create_package
from xnd.utils.formatting import print_error, print_info, print_success


def create(
    ctx: typer.Context,
    package_name: Annotated[str, typer.Argument(help="Name of the new package.")],
) -> None:
    """Create a new XND package.

    Makes a directory named after the package containing package.json,
    index.js with an example function, and README.md.
    """
    project = get_project(ctx)
    print_info(f"Creating new package: {package_name}...")

    if (project.root / package_name).exists():
        print_error(f"Directory '{package_name}' already exists.")
        raise typer.Exit(code=1)

    try:
        created = create_package(project.root, package_name)
    except (OSError, ManifestError) as e:
        print_error(f"Could not create package '{package_name}': {e}")
        raise typer.Exit(code=1) from e

    for path in created:
        print_info(f"{path.name} created.")
    print_success(f"Package '{package_name}' created successfully!")
