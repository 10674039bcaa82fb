"""Dependency installation engine.

The Installer drives the registry client, the package store and the
manifest for each requested package, one package at a time. Every
package ends in its own outcome; no failure stops the rest of the batch.

Per package:
    resolve -> (ensure store root, persist metadata) -> [save to manifest]

Packages are processed strictly in sequence. The manifest is re-read
from disk before each save, so a long batch always writes on top of the
latest file content.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from xnd.core.manifest import ManifestError, add_dependency, load_manifest, save_manifest
from xnd.core.registry import ResolutionError
from xnd.core.store import PackageStore, StoreError
from xnd.models.outcome import (
    InstallMode,
    InstallOutcome,
    InstallReport,
    InstallStage,
    create_failure,
    create_success,
    create_warning,
)

if TYPE_CHECKING:
    from xnd.core.project import ProjectContext
    from xnd.core.registry import RegistryClient
    from xnd.models.package import Resolution

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InstallOptions:
    """Options for an install run.

    Attributes:
        save: Record each installed package in the manifest's dependencies.
    """

    save: bool = False


class Installer:
    """Installs packages into a project's store.

    Example:
        >>> async with RegistryClient() as registry:
        ...     installer = Installer(ProjectContext.from_path(), registry)
        ...     report = await installer.run(["left-pad"], InstallOptions(save=True))
    """

    def __init__(
        self,
        project: ProjectContext,
        registry: RegistryClient,
        store: PackageStore | None = None,
    ) -> None:
        """Initialize the installer.

        Args:
            project: Project whose manifest and store are used.
            registry: Client used to resolve package names.
            store: Package store. Defaults to the project's store root.
        """
        self._project = project
        self._registry = registry
        self._store = store or PackageStore(project.store_root)

    @property
    def store(self) -> PackageStore:
        """Package store written by this installer."""
        return self._store

    async def run(
        self,
        names: Sequence[str],
        options: InstallOptions | None = None,
        on_outcome: Callable[[InstallOutcome], None] | None = None,
    ) -> InstallReport:
        """Install packages.

        With names, installs exactly those in the given order. Without,
        installs the manifest's dependencies in manifest order; a missing
        manifest or an empty dependency list installs nothing and sets
        the report's note.

        Args:
            names: Package names to install, or empty for manifest mode.
            options: Install options.
            on_outcome: Called with each outcome as soon as it is recorded.

        Returns:
            Report of all outcomes, in order.
        """
        options = options or InstallOptions()

        if names:
            report = InstallReport(mode=InstallMode.EXPLICIT, on_outcome=on_outcome)
            targets = list(names)
        else:
            report = InstallReport(mode=InstallMode.MANIFEST, on_outcome=on_outcome)
            targets = self._manifest_targets(report)

        logger.info("Installing %d package(s) (%s mode)", len(targets), report.mode.value)

        for name in targets:
            await self._install_one(name, options, report)

        return report

    def _manifest_targets(self, report: InstallReport) -> list[str]:
        """Dependency names to install in manifest mode."""
        path = self._project.manifest_path

        try:
            manifest = load_manifest(path)
        except ManifestError as e:
            logger.warning("Cannot read %s: %s", path, e)
            report.record(create_failure(path.name, InstallStage.LOAD, str(e)))
            return []

        if manifest is None:
            report.note = f"No {path.name} found."
            return []

        names = manifest.dependency_names()
        if not names:
            report.note = f"No dependencies found in {path.name}"
        return names

    async def _install_one(
        self,
        name: str,
        options: InstallOptions,
        report: InstallReport,
    ) -> None:
        """Run the pipeline for one package and record its outcome(s)."""
        try:
            resolution = await self._registry.resolve(name)
        except ResolutionError as e:
            logger.warning("Resolution of %s failed: %s", name, e)
            report.record(create_failure(name, InstallStage.RESOLVE, str(e)))
            return

        try:
            self._store.ensure_root()
            self._store.persist(name, resolution.metadata)
        except StoreError as e:
            logger.warning("Persisting %s failed: %s", resolution.spec, e)
            report.record(
                create_failure(name, InstallStage.PERSIST, str(e), version=resolution.version)
            )
            return

        message = None
        if options.save:
            saved = self._save_dependency(resolution, report)
            if saved is None:
                return
            if saved:
                message = f"saved to {self._project.manifest_name}"

        report.record(create_success(name, resolution.version, message))

    def _save_dependency(self, resolution: Resolution, report: InstallReport) -> bool | None:
        """Record a resolved package in the manifest.

        Returns:
            True if the manifest was updated, False if there is no manifest
            (a warning is recorded), None if updating it failed (a failure
            is recorded).
        """
        path = self._project.manifest_path

        try:
            manifest = load_manifest(path)
            if manifest is None:
                report.record(
                    create_warning(
                        resolution.name,
                        InstallStage.SAVE,
                        f"No {path.name} found. Cannot save dependency.",
                        version=resolution.version,
                    )
                )
                return False
            save_manifest(add_dependency(manifest, resolution.name, resolution.version), path)
        except ManifestError as e:
            logger.warning("Saving %s to %s failed: %s", resolution.spec, path, e)
            report.record(
                create_failure(
                    resolution.name,
                    InstallStage.SAVE,
                    str(e),
                    version=resolution.version,
                )
            )
            return None

        logger.debug("Saved %s to %s", resolution.spec, path)
        return True
