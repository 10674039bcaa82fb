"""Package models for registry resolution and the local store.

This module defines data structures for a package resolved against the
registry and for a package found in the project's store.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Resolution:
    """A package name resolved to the registry's latest version.

    Attributes:
        name: Package name as requested (no normalization).
        version: Version string the registry tags as "latest".
        metadata: Per-version metadata record, persisted verbatim.
    """

    name: str
    version: str
    metadata: dict[str, Any] = field(default_factory=lambda: {})

    def __post_init__(self) -> None:
        """Validate resolution data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)
        if not self.version:
            msg = "Resolved version cannot be empty"
            raise ValueError(msg)

    @property
    def spec(self) -> str:
        """Display form name@version."""
        return f"{self.name}@{self.version}"


@dataclass(frozen=True, slots=True)
class InstalledPackage:
    """A package present in the local store.

    Attributes:
        name: Package name (scoped names include the scope, e.g. "@types/node").
        version: Version read from the stored metadata, or None if unreadable.
    """

    name: str
    version: str | None = None
