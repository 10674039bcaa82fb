"""Data models for xnd.

This module exports the core data structures used throughout the application.
"""

from xnd.models.config import (
    DEFAULT_REGISTRY_URL,
    RegistryConfig,
    Session,
    Tier,
    XndConfig,
)
from xnd.models.manifest import Manifest
from xnd.models.outcome import (
    InstallMode,
    InstallOutcome,
    InstallReport,
    InstallStage,
    OutcomeKind,
    create_failure,
    create_success,
    create_warning,
)
from xnd.models.package import InstalledPackage, Resolution

__all__ = [
    "DEFAULT_REGISTRY_URL",
    "InstallMode",
    "InstallOutcome",
    "InstallReport",
    "InstallStage",
    "InstalledPackage",
    "Manifest",
    "OutcomeKind",
    "RegistryConfig",
    "Resolution",
    "Session",
    "Tier",
    "XndConfig",
    "create_failure",
    "create_success",
    "create_warning",
]
