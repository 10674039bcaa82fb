"""Install command implementation.

Installs named packages, or every dependency listed in package.json
when no names are given.
"""

import asyncio
from collections.abc import Callable
from typing import Annotated

import typer

from xnd.cli.display import print_outcome, print_report_summary
from xnd.cli.types import get_project, is_quiet, require_config
from xnd.core.config import ConfigError, registry_url
from xnd.core.installer import InstallOptions, Installer
from xnd.core.manifest import manifest_exists
from xnd.core.project import ProjectContext
from xnd.core.registry import RegistryClient
from xnd.models.outcome import InstallOutcome, InstallReport
from xnd.utils.formatting import print_error, print_info


async def _run_installer(
    project: ProjectContext,
    url: str,
    names: list[str],
    options: InstallOptions,
    on_outcome: Callable[[InstallOutcome], None],
) -> InstallReport:
    """Run one install batch with a registry client open for its duration."""
    async with RegistryClient(url) as registry:
        installer = Installer(project, registry)
        return await installer.run(names, options, on_outcome=on_outcome)


def install(
    ctx: typer.Context,
    packages: Annotated[
        list[str] | None,
        typer.Argument(
            help="Packages to install. Omit to install package.json dependencies.",
            show_default=False,
        ),
    ] = None,
    save: Annotated[
        bool,
        typer.Option(
            "--save",
            "-S",
            help="Save installed packages to package.json dependencies.",
        ),
    ] = False,
) -> None:
    """Install one or more packages.

    Each package is resolved to the registry's latest version and its
    metadata is written to node_modules/<name>/package.json. A package
    that fails does not stop the others; the exit code is 1 if any failed.

    Examples:
        xnd install left-pad           # Install one package
        xnd i left-pad chalk --save    # Install and record in package.json
        xnd install                    # Install everything in package.json
    """
    project = get_project(ctx)
    quiet = is_quiet(ctx)
    config = require_config()

    try:
        url = registry_url(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    names = packages or []
    if not names and manifest_exists(project.manifest_path) and not quiet:
        print_info(f"Installing dependencies from {project.manifest_name}...")

    report = asyncio.run(
        _run_installer(
            project,
            url,
            names,
            InstallOptions(save=save),
            lambda outcome: print_outcome(outcome, quiet=quiet),
        )
    )

    print_report_summary(report)

    if report.has_failures:
        raise typer.Exit(code=1)
