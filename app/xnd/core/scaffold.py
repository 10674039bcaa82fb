"""Scaffolding for new projects and packages.

Builds the default manifests used by `xnd init` and `xnd create`, and
writes the starter files of a new package directory.
"""

import logging
from pathlib import Path

from xnd.core.manifest import save_manifest
from xnd.core.paths import MANIFEST_FILENAME
from xnd.models.manifest import Manifest

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "1.0.0"
DEFAULT_MAIN = "index.js"
DEFAULT_LICENSE = "ISC"

INDEX_JS = """\
// A simple example function
export function add(a, b) {
  return a + b;
}
"""


def init_manifest(
    name: str,
    version: str = DEFAULT_VERSION,
    description: str = "",
    main: str = DEFAULT_MAIN,
    author: str = "",
    license: str = DEFAULT_LICENSE,
) -> Manifest:
    """Build the manifest written by `xnd init`."""
    return Manifest.model_validate(
        {
            "name": name,
            "version": version,
            "description": description,
            "main": main,
            "author": author,
            "license": license,
        }
    )


def package_manifest(name: str) -> Manifest:
    """Build the template manifest of a package made by `xnd create`."""
    return Manifest.model_validate(
        {
            "name": name,
            "version": DEFAULT_VERSION,
            "description": f"A new XND package: {name}",
            "main": DEFAULT_MAIN,
            "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
            "keywords": ["xnd-package", name],
            "author": "",
            "license": DEFAULT_LICENSE,
            "repository": {"type": "git", "url": ""},
            "bugs": {"url": ""},
            "homepage": "",
        }
    )


def create_package(parent: Path, name: str) -> list[Path]:
    """Create a new package directory with starter files.

    Args:
        parent: Directory to create the package in.
        name: Package name, also used as the directory name.

    Returns:
        Paths of the created files (manifest, index.js, README.md).

    Raises:
        FileExistsError: If the package directory already exists.
        ManifestError: If the manifest cannot be written.
        OSError: If the directory or another file cannot be written.
    """
    package_dir = parent / name
    package_dir.mkdir()

    manifest_path = save_manifest(package_manifest(name), package_dir / MANIFEST_FILENAME)

    index_path = package_dir / DEFAULT_MAIN
    index_path.write_text(INDEX_JS, encoding="utf-8")

    readme_path = package_dir / "README.md"
    readme_path.write_text(f"# {name}\n\n", encoding="utf-8")

    logger.debug("Created package %s in %s", name, package_dir)
    return [manifest_path, index_path, readme_path]
