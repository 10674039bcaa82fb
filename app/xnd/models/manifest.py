"""Manifest model for the project's package.json.

This module defines the Pydantic model representing the declared state
of a project: its identity and the dependencies it asks for.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class Manifest(BaseModel):
    """Project manifest (package.json).

    Only the fields xnd reads or writes are declared. Everything else a
    package.json may carry (author, license, scripts, ...) is kept as extra
    data so that a load/save cycle never drops it.

    Attributes:
        name: Package name. Optional for applications that are never published.
        version: Package version. Optional like name.
        description: Optional one-line description.
        main: Optional entry point module.
        dependencies: Mapping of package name to version range.
        dev_dependencies: Development-only dependencies (listed, never installed).
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: Annotated[str | None, Field(description="Package name")] = None
    version: Annotated[str | None, Field(description="Package version")] = None
    description: Annotated[str | None, Field(description="Package description")] = None
    main: Annotated[str | None, Field(description="Entry point")] = None
    dependencies: Annotated[
        dict[str, str] | None,
        Field(description="Runtime dependencies"),
    ] = None
    dev_dependencies: Annotated[
        dict[str, str] | None,
        Field(alias="devDependencies", description="Development dependencies"),
    ] = None

    def dependency_names(self) -> list[str]:
        """Names of runtime dependencies, in manifest order."""
        return list(self.dependencies or {})

    def all_dependencies(self) -> dict[str, str]:
        """Runtime and development dependencies merged.

        Development entries win on a name clash, matching how the two
        mappings are displayed together.
        """
        return {**(self.dependencies or {}), **(self.dev_dependencies or {})}

    @property
    def dependency_count(self) -> int:
        """Number of runtime dependencies."""
        return len(self.dependencies or {})
