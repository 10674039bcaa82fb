"""Install outcome models.

This module defines the per-package outcomes recorded by the installer
and the report that collects them for a single run.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class OutcomeKind(Enum):
    """Kind of per-package outcome.

    Attributes:
        SUCCESS: The package was resolved and persisted.
        FAILURE: The package stopped at one of the pipeline stages.
        WARNING: Something was skipped, but the install itself stands.
    """

    SUCCESS = "success"
    FAILURE = "failure"
    WARNING = "warning"


class InstallStage(Enum):
    """Pipeline stage an outcome refers to.

    Attributes:
        LOAD: Reading the manifest to find what to install.
        RESOLVE: Looking the package up in the registry.
        PERSIST: Writing metadata into the store.
        SAVE: Recording the dependency in the manifest.
    """

    LOAD = "load"
    RESOLVE = "resolve"
    PERSIST = "persist"
    SAVE = "save"


class InstallMode(Enum):
    """How the target package list was chosen.

    Attributes:
        EXPLICIT: Names were given on the command line.
        MANIFEST: Names were taken from the manifest's dependencies.
    """

    EXPLICIT = "explicit"
    MANIFEST = "manifest"


@dataclass(frozen=True, slots=True)
class InstallOutcome:
    """Outcome of one step of installing one package.

    Attributes:
        kind: Success, failure or warning.
        package: Package name the outcome is about.
        message: Human-readable detail (error cause, warning text, ...).
        version: Resolved version, when resolution got that far.
        stage: Pipeline stage the outcome refers to.
    """

    kind: OutcomeKind
    package: str
    message: str | None = None
    version: str | None = None
    stage: InstallStage | None = None

    @property
    def is_success(self) -> bool:
        """Check if this is a success outcome."""
        return self.kind == OutcomeKind.SUCCESS

    @property
    def is_failure(self) -> bool:
        """Check if this is a failure outcome."""
        return self.kind == OutcomeKind.FAILURE

    @property
    def is_warning(self) -> bool:
        """Check if this is a warning outcome."""
        return self.kind == OutcomeKind.WARNING


@dataclass
class InstallReport:
    """Ordered outcomes of a single install run.

    Attributes:
        mode: Whether names were explicit or taken from the manifest.
        outcomes: Outcomes in the order they were recorded.
        note: Why nothing was installed, for empty manifest-mode runs.
        on_outcome: Optional callback invoked as each outcome is recorded.
    """

    mode: InstallMode
    outcomes: list[InstallOutcome] = field(default_factory=lambda: [])
    note: str | None = None
    on_outcome: Callable[[InstallOutcome], None] | None = field(default=None, repr=False)

    def record(self, outcome: InstallOutcome) -> None:
        """Append an outcome and notify the listener, if any."""
        self.outcomes.append(outcome)
        if self.on_outcome is not None:
            self.on_outcome(outcome)

    @property
    def succeeded(self) -> list[InstallOutcome]:
        """Success outcomes, in order."""
        return [o for o in self.outcomes if o.is_success]

    @property
    def failed(self) -> list[InstallOutcome]:
        """Failure outcomes, in order."""
        return [o for o in self.outcomes if o.is_failure]

    @property
    def warnings(self) -> list[InstallOutcome]:
        """Warning outcomes, in order."""
        return [o for o in self.outcomes if o.is_warning]

    @property
    def has_failures(self) -> bool:
        """Check if any package failed."""
        return any(o.is_failure for o in self.outcomes)

    @property
    def is_empty(self) -> bool:
        """Check if nothing was attempted."""
        return not self.outcomes


def create_success(package: str, version: str, message: str | None = None) -> InstallOutcome:
    """Create a success outcome for a package."""
    return InstallOutcome(
        kind=OutcomeKind.SUCCESS,
        package=package,
        message=message,
        version=version,
    )


def create_failure(
    package: str,
    stage: InstallStage,
    message: str,
    version: str | None = None,
) -> InstallOutcome:
    """Create a failure outcome for a package at a given stage."""
    return InstallOutcome(
        kind=OutcomeKind.FAILURE,
        package=package,
        message=message,
        version=version,
        stage=stage,
    )


def create_warning(
    package: str,
    stage: InstallStage,
    message: str,
    version: str | None = None,
) -> InstallOutcome:
    """Create a warning outcome for a package at a given stage."""
    return InstallOutcome(
        kind=OutcomeKind.WARNING,
        package=package,
        message=message,
        version=version,
        stage=stage,
    )
