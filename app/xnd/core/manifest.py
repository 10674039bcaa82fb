"""Manifest file I/O operations.

This module provides functions for loading and saving the project's
package.json, validated with the Pydantic Manifest model. A missing
manifest is an ordinary state and is reported as None, never as an error.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from xnd.models.manifest import Manifest
from xnd.utils.files import dump_json, write_atomic

logger = logging.getLogger(__name__)


class ManifestError(Exception):
    """Base exception for manifest-related errors."""


class ManifestParseError(ManifestError):
    """Raised when the manifest file is not valid JSON."""


class ManifestValidationError(ManifestError):
    """Raised when the manifest content doesn't match the schema."""


def load_manifest(path: Path) -> Manifest | None:
    """Load and validate a manifest from a JSON file.

    Args:
        path: Path to the manifest file.

    Returns:
        Validated Manifest object, or None if the file doesn't exist.

    Raises:
        ManifestParseError: If the JSON syntax is invalid.
        ManifestValidationError: If the content doesn't match the schema.
        ManifestError: If the file exists but cannot be read.
    """
    if not path.exists():
        return None

    try:
        with open(path, "rb") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"Invalid JSON in {path.name}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Failed to read manifest: {e}") from e

    try:
        return Manifest.model_validate(data)
    except ValidationError as e:
        raise ManifestValidationError(f"Invalid manifest content: {e}") from e


def save_manifest(manifest: Manifest, path: Path) -> Path:
    """Save a manifest, fully overwriting the file.

    The file is written atomically with 2-space indentation.

    Args:
        manifest: The Manifest object to save.
        path: Destination path.

    Returns:
        Path where the manifest was saved.

    Raises:
        ManifestError: If the file cannot be written.
    """
    try:
        write_atomic(path, dump_json(manifest_to_dict(manifest)))
    except OSError as e:
        raise ManifestError(f"Failed to write manifest: {e}") from e

    logger.debug("Saved manifest %s (%d dependencies)", path, manifest.dependency_count)
    return path


def manifest_exists(path: Path) -> bool:
    """Check if a manifest file exists."""
    return path.exists()


def add_dependency(manifest: Manifest, name: str, version: str) -> Manifest:
    """Return a copy of the manifest depending on ``^<version>`` of a package.

    Inserts or overwrites the entry for name. The version is not checked
    for being valid semver.

    Args:
        manifest: Manifest to start from (left unchanged).
        name: Package name.
        version: Resolved version the caret range is derived from.

    Returns:
        New Manifest with the updated dependencies mapping.
    """
    dependencies = dict(manifest.dependencies or {})
    dependencies[name] = f"^{version}"
    return manifest.model_copy(update={"dependencies": dependencies})


def remove_dependency(manifest: Manifest, name: str) -> Manifest:
    """Return a copy of the manifest without a runtime dependency.

    The manifest is returned unchanged if name is not a dependency.
    """
    if not manifest.dependencies or name not in manifest.dependencies:
        return manifest
    dependencies = {k: v for k, v in manifest.dependencies.items() if k != name}
    return manifest.model_copy(update={"dependencies": dependencies})


def require_manifest(path: Path) -> Manifest:
    """Load manifest or exit with helpful error message.

    This is a convenience wrapper around load_manifest() for commands
    that cannot do anything without a manifest.

    Args:
        path: Manifest path.

    Returns:
        Loaded and validated Manifest.

    Raises:
        typer.Exit: If manifest is missing or cannot be loaded.
    """
    import typer

    from xnd.utils.formatting import print_error, print_info

    try:
        manifest = load_manifest(path)
    except ManifestError as e:
        print_error(f"Failed to load manifest: {e}")
        raise typer.Exit(code=1) from e

    if manifest is None:
        print_error(f"No {path.name} found in {path.parent}.")
        print_info("Run 'xnd init' to create one.")
        raise typer.Exit(code=1)
    return manifest


def manifest_to_dict(manifest: Manifest) -> dict[str, Any]:
    """Convert a Manifest to a dictionary suitable for JSON serialization.

    Declared fields come first, followed by any extra fields in the order
    they were loaded. Declared fields that were never set are omitted;
    explicit nulls are written back as loaded.
    """
    return manifest.model_dump(mode="json", by_alias=True, exclude_unset=True)
