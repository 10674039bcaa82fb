"""Project-local package store.

The store is a node_modules-style directory with one subdirectory per
package name, each holding the package's version metadata as package.json.
Scoped names ("@scope/name") nest one level deeper.
"""

import json
import logging
import shutil
from pathlib import Path, PurePosixPath
from typing import Any

from xnd.core.paths import METADATA_FILENAME
from xnd.models.package import InstalledPackage
from xnd.utils.files import dump_json, write_atomic

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the store cannot be created, written or modified.

    Attributes:
        package: Name of the package involved, if any.
    """

    def __init__(self, message: str, package: str | None = None) -> None:
        super().__init__(message)
        self.package = package


class PackageStore:
    """Directory of installed package metadata.

    Attributes:
        root: Store root directory (e.g. <project>/node_modules).
    """

    def __init__(self, root: Path) -> None:
        """Initialize the store.

        Args:
            root: Store root directory. It is created lazily.
        """
        self._root = root

    @property
    def root(self) -> Path:
        """Store root directory."""
        return self._root

    def entry_path(self, name: str) -> Path:
        """Directory holding a package's metadata.

        Args:
            name: Package name.

        Returns:
            Path under the store root.

        Raises:
            StoreError: If the name is empty or would escape the store root.
        """
        parts = PurePosixPath(name).parts
        if not name or not parts or any(p in ("", ".", "..") for p in parts) or "\\" in name:
            raise StoreError(f"Invalid package name for store: '{name}'", package=name)
        if PurePosixPath(name).is_absolute():
            raise StoreError(f"Invalid package name for store: '{name}'", package=name)
        return self._root.joinpath(*parts)

    def metadata_path(self, name: str) -> Path:
        """Path of a package's metadata file."""
        return self.entry_path(name) / METADATA_FILENAME

    def has(self, name: str) -> bool:
        """Check if a package has a store entry."""
        try:
            return self.entry_path(name).is_dir()
        except StoreError:
            return False

    def ensure_root(self) -> Path:
        """Create the store root if it doesn't exist.

        Returns:
            The store root.

        Raises:
            StoreError: If the directory cannot be created.
        """
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Cannot create store directory {self._root}: {e}") from e
        return self._root

    def persist(self, name: str, metadata: dict[str, Any]) -> Path:
        """Write a package's metadata into its store entry.

        Creates the entry directory if needed and overwrites any existing
        metadata file. Nothing is compared with what was there before.

        Args:
            name: Package name.
            metadata: Version metadata record, written verbatim.

        Returns:
            Path of the written metadata file.

        Raises:
            StoreError: If the directory or file cannot be written.
        """
        entry = self.entry_path(name)
        try:
            entry.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            msg = f"Cannot create store entry {entry}: {e}"
            raise StoreError(msg, package=name) from e

        target = entry / METADATA_FILENAME
        try:
            write_atomic(target, dump_json(metadata))
        except (OSError, TypeError, ValueError) as e:
            msg = f"Cannot write metadata for {name}: {e}"
            raise StoreError(msg, package=name) from e

        logger.debug("Persisted metadata for %s to %s", name, target)
        return target

    def read_metadata(self, name: str) -> dict[str, Any] | None:
        """Read a package's stored metadata.

        Returns:
            The metadata record, or None if missing or unreadable.
        """
        try:
            path = self.metadata_path(name)
            with open(path, "rb") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, ValueError, StoreError) as e:
            logger.warning("Unreadable metadata for %s: %s", name, e)
            return None
        return data if isinstance(data, dict) else None

    def installed(self) -> list[InstalledPackage]:
        """List packages present in the store, sorted by name.

        Hidden entries (".bin", ".cache", ...) are skipped. A scope
        directory ("@types") contributes one entry per package inside it.

        Returns:
            Installed packages with the version from their metadata.
        """
        if not self._root.is_dir():
            return []

        names: list[str] = []
        for child in sorted(self._root.iterdir()):
            if not child.is_dir() or child.name.startswith("."):
                continue
            if child.name.startswith("@"):
                names.extend(
                    f"{child.name}/{scoped.name}"
                    for scoped in sorted(child.iterdir())
                    if scoped.is_dir()
                )
            else:
                names.append(child.name)

        packages: list[InstalledPackage] = []
        for name in names:
            metadata = self.read_metadata(name)
            version = metadata.get("version") if metadata else None
            packages.append(
                InstalledPackage(name=name, version=version if isinstance(version, str) else None)
            )
        return packages

    def remove(self, name: str) -> Path:
        """Delete a package's store entry.

        Args:
            name: Package name.

        Returns:
            Path of the removed directory.

        Raises:
            StoreError: If the package isn't installed or removal fails.
        """
        entry = self.entry_path(name)
        if not entry.is_dir():
            raise StoreError(f"Package '{name}' not found in {self._root.name}.", package=name)
        parent = entry.parent
        try:
            shutil.rmtree(entry)
            # Drop an emptied scope directory
            is_scope = parent != self._root and parent.name.startswith("@")
            if is_scope and not any(parent.iterdir()):
                parent.rmdir()
        except OSError as e:
            raise StoreError(f"Cannot remove {entry}: {e}", package=name) from e

        logger.debug("Removed store entry %s", entry)
        return entry
