"""Edit command implementation.

Points the user at an installed package's directory.
"""

from typing import Annotated

import typer

from xnd.cli.types import get_project
from xnd.core.store import PackageStore, StoreError
from xnd.utils.formatting import console, print_error

EDITOR_HINTS: tuple[tuple[str, str], ...] = (
    ("VS Code", "code"),
    ("Sublime Text", "subl"),
    ("Windows Notepad", "notepad"),
)


def edit(
    ctx: typer.Context,
    package_name: Annotated[str, typer.Argument(help="Installed package to edit.")],
) -> None:
    """Open an installed package for editing.

    Prints the package's location in node_modules along with example
    editor commands.
    """
    project = get_project(ctx)
    store = PackageStore(project.store_root)

    try:
        path = store.entry_path(package_name)
    except StoreError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not path.is_dir():
        print_error(f"Package '{package_name}' not found in {project.store_name}.")
        raise typer.Exit(code=1)

    console.print(f"Package '{package_name}' found at: {path}", soft_wrap=True)
    console.print(
        "You can now modify the files in this directory using your preferred text editor."
    )
    for editor, command in EDITOR_HINTS:
        console.print(f"  Example ({editor}): {command} {path}", soft_wrap=True, highlight=False)
