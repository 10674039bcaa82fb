"""Publish command implementation.

Checks that the current session may publish and that the project has a
manifest. The upload itself is simulated.
"""

import logging

import typer

from xnd.cli.types import get_project, require_config
from xnd.core.auth import AuthorizationError, require_publisher
from xnd.core.manifest import require_manifest
from xnd.utils.formatting import print_error, print_info, print_success

logger = logging.getLogger(__name__)


def publish(ctx: typer.Context) -> None:
    """Publish a package to the registry."""
    config = require_config()

    try:
        session = require_publisher(config.user)
    except AuthorizationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    project = get_project(ctx)
    manifest = require_manifest(project.manifest_path)
    if not manifest.name or not manifest.version:
        print_error(f"{project.manifest_name} needs a name and a version to be published.")
        raise typer.Exit(code=1)

    logger.debug("Publishing as %s (%s)", session.username, session.tier.value)
    print_info(f"Publishing {manifest.name}@{manifest.version}...")
    print_success("Package published successfully!")
