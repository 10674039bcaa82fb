"""Project context.

Names the files an install run touches so that callers pass the project
explicitly instead of relying on the process working directory.
"""

from dataclasses import dataclass
from pathlib import Path

from xnd.core.paths import MANIFEST_FILENAME, STORE_DIRNAME


@dataclass(frozen=True, slots=True)
class ProjectContext:
    """Location of a project on disk.

    Attributes:
        root: Project root directory.
        manifest_name: Manifest file name inside the root.
        store_name: Store directory name inside the root.
    """

    root: Path
    manifest_name: str = MANIFEST_FILENAME
    store_name: str = STORE_DIRNAME

    @property
    def manifest_path(self) -> Path:
        """Path of the project manifest."""
        return self.root / self.manifest_name

    @property
    def store_root(self) -> Path:
        """Path of the package store root."""
        return self.root / self.store_name

    @classmethod
    def from_path(cls, root: Path | None = None) -> "ProjectContext":
        """Build a context for root, defaulting to the current directory."""
        return cls(root=(root or Path.cwd()).resolve())
