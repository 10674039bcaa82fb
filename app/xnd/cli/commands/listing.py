"""List command implementation.

Shows what is in node_modules and what package.json declares.
"""

import typer

from xnd.cli.types import get_project
from xnd.core.manifest import ManifestError, load_manifest
from xnd.core.store import PackageStore
from xnd.utils.formatting import console, create_package_table, print_error


def list_packages(ctx: typer.Context) -> None:
    """List installed packages and dependencies."""
    project = get_project(ctx)
    store = PackageStore(project.store_root)

    console.print(f"[bold]Installed Packages[/bold] [muted]({project.store_name})[/muted]")
    if not store.root.is_dir():
        console.print(f"  [muted]{project.store_name} directory not found.[/muted]")
    else:
        installed = store.installed()
        if installed:
            table = create_package_table()
            for pkg in installed:
                table.add_row(pkg.name, pkg.version or "?")
            console.print(table)
        else:
            console.print(f"  [muted]No packages installed in {project.store_name}.[/muted]")

    console.print()
    console.print(f"[bold]Dependencies[/bold] [muted]({project.manifest_name})[/muted]")
    try:
        manifest = load_manifest(project.manifest_path)
    except ManifestError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if manifest is None:
        console.print(f"  [muted]{project.manifest_name} not found.[/muted]")
        return

    dependencies = manifest.all_dependencies()
    if not dependencies:
        console.print(f"  [muted]No dependencies listed in {project.manifest_name}.[/muted]")
        return

    table = create_package_table()
    for name, spec in dependencies.items():
        table.add_row(name, spec)
    console.print(table)
