"""Uninstall command implementation.

Removes a package from node_modules and from package.json dependencies.
"""

from typing import Annotated

import typer

from xnd.cli.types import get_project
from xnd.core.manifest import ManifestError, load_manifest, remove_dependency, save_manifest
from xnd.core.store import PackageStore, StoreError
from xnd.utils.formatting import print_error, print_info, print_success


def uninstall(
    ctx: typer.Context,
    package: Annotated[str, typer.Argument(help="Package to uninstall.")],
) -> None:
    """Uninstall a package.

    Deletes the package's store entry and, if package.json lists it as
    a dependency, removes it from there as well.
    """
    project = get_project(ctx)
    store = PackageStore(project.store_root)

    try:
        store.remove(package)
    except StoreError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Successfully uninstalled {package}.")

    try:
        manifest = load_manifest(project.manifest_path)
        if manifest is None or package not in (manifest.dependencies or {}):
            return
        save_manifest(remove_dependency(manifest, package), project.manifest_path)
    except ManifestError as e:
        print_error(f"Could not update {project.manifest_name}: {e}")
        raise typer.Exit(code=1) from e

    print_info(f"Removed {package} from {project.manifest_name} dependencies.")
