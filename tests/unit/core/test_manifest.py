"""Unit tests for manifest I/O operations.

Tests for loading, saving and transforming package.json.
"""

import json
import stat
from pathlib import Path

import pytest
from xnd.core.manifest import (
    ManifestError,
    ManifestParseError,
    ManifestValidationError,
    add_dependency,
    load_manifest,
    manifest_exists,
    remove_dependency,
    save_manifest,
)
from xnd.models.manifest import Manifest


@pytest.fixture
def sample_manifest() -> Manifest:
    """Create a sample manifest for testing."""
    return Manifest.model_validate(
        {
            "name": "my-app",
            "version": "1.0.0",
            "description": "Test app",
            "main": "index.js",
            "author": "someone",
            "license": "ISC",
            "dependencies": {"left-pad": "^1.0.0"},
        }
    )


class TestLoadManifest:
    """Tests for load_manifest function."""

    def test_missing_file_returns_none(self, tmp_path: Path) -> None:
        """A missing manifest is None, not an error."""
        assert load_manifest(tmp_path / "package.json") is None

    def test_load_valid_manifest(self, tmp_path: Path) -> None:
        """load_manifest parses a package.json."""
        path = tmp_path / "package.json"
        data = {"name": "app", "version": "0.1.0", "dependencies": {"a": "^1"}}
        path.write_text(json.dumps(data))

        manifest = load_manifest(path)

        assert manifest is not None
        assert manifest.name == "app"
        assert manifest.dependencies == {"a": "^1"}

    def test_dependencies_optional(self, tmp_path: Path) -> None:
        """A manifest without dependencies loads with dependencies unset."""
        path = tmp_path / "package.json"
        path.write_text('{"name": "app", "version": "0.1.0"}')

        manifest = load_manifest(path)

        assert manifest is not None
        assert manifest.dependencies is None
        assert manifest.dependency_names() == []

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON raises ManifestParseError."""
        path = tmp_path / "package.json"
        path.write_text('{"name": "app",')

        with pytest.raises(ManifestParseError):
            load_manifest(path)

    def test_name_and_version_optional(self, tmp_path: Path) -> None:
        """An app manifest without name or version still loads."""
        path = tmp_path / "package.json"
        path.write_text('{"private": true, "dependencies": {"left-pad": "^1.0.0"}}')

        manifest = load_manifest(path)

        assert manifest is not None
        assert manifest.name is None
        assert manifest.version is None
        assert manifest.dependency_names() == ["left-pad"]

    def test_not_an_object(self, tmp_path: Path) -> None:
        """A top-level array is not a manifest."""
        path = tmp_path / "package.json"
        path.write_text("[]")

        with pytest.raises(ManifestValidationError):
            load_manifest(path)

    def test_non_string_range(self, tmp_path: Path) -> None:
        """Dependency ranges must be strings."""
        path = tmp_path / "package.json"
        path.write_text('{"name": "a", "version": "1.0.0", "dependencies": {"b": 1}}')

        with pytest.raises(ManifestValidationError):
            load_manifest(path)

    def test_errors_share_base_class(self) -> None:
        """Parse and validation errors are ManifestErrors."""
        assert issubclass(ManifestParseError, ManifestError)
        assert issubclass(ManifestValidationError, ManifestError)


class TestSaveManifest:
    """Tests for save_manifest function."""

    def test_save_creates_file(self, tmp_path: Path, sample_manifest: Manifest) -> None:
        """save_manifest writes the file and returns its path."""
        path = tmp_path / "package.json"

        result = save_manifest(sample_manifest, path)

        assert result == path
        assert manifest_exists(path)

    def test_two_space_indentation(self, tmp_path: Path) -> None:
        """Output is indented with two spaces and ends with a newline."""
        path = tmp_path / "package.json"

        save_manifest(Manifest(name="a", version="1.0.0"), path)

        assert path.read_text() == '{\n  "name": "a",\n  "version": "1.0.0"\n}\n'

    def test_preserves_unknown_fields(self, tmp_path: Path, sample_manifest: Manifest) -> None:
        """Fields the model doesn't declare survive a round-trip."""
        path = tmp_path / "package.json"
        save_manifest(sample_manifest, path)

        data = json.loads(path.read_text())

        assert data["author"] == "someone"
        assert data["license"] == "ISC"

    def test_preserves_null_fields(self, tmp_path: Path) -> None:
        """Explicit nulls survive a load/save cycle, declared or not."""
        path = tmp_path / "package.json"
        path.write_text(
            '{"name": "app", "version": "1.0.0", "author": null, "description": null}'
        )

        manifest = load_manifest(path)
        assert manifest is not None
        save_manifest(add_dependency(manifest, "left-pad", "1.3.0"), path)

        assert json.loads(path.read_text()) == {
            "name": "app",
            "version": "1.0.0",
            "description": None,
            "dependencies": {"left-pad": "^1.3.0"},
            "author": None,
        }

    def test_keeps_file_mode(self, tmp_path: Path, sample_manifest: Manifest) -> None:
        """Rewriting a shared manifest keeps its permissions."""
        path = tmp_path / "package.json"
        path.write_text("{}")
        path.chmod(0o644)

        save_manifest(sample_manifest, path)

        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_dev_dependencies_alias(self, tmp_path: Path) -> None:
        """devDependencies is read and written under its JSON name."""
        path = tmp_path / "package.json"
        path.write_text('{"name": "a", "version": "1.0.0", "devDependencies": {"jest": "^29.0.0"}}')

        manifest = load_manifest(path)
        assert manifest is not None
        save_manifest(manifest, path)

        data = json.loads(path.read_text())
        assert data["devDependencies"] == {"jest": "^29.0.0"}
        assert "dev_dependencies" not in data

    def test_write_failure(self, tmp_path: Path, sample_manifest: Manifest) -> None:
        """Writing into a missing directory raises ManifestError."""
        with pytest.raises(ManifestError, match="Failed to write"):
            save_manifest(sample_manifest, tmp_path / "missing" / "package.json")

    def test_round_trip(self, tmp_path: Path, sample_manifest: Manifest) -> None:
        """Save then load returns an equal manifest."""
        path = tmp_path / "package.json"
        save_manifest(sample_manifest, path)

        assert load_manifest(path) == sample_manifest


class TestAddDependency:
    """Tests for add_dependency function."""

    def test_adds_caret_range(self, sample_manifest: Manifest) -> None:
        """The new entry is ^<version>."""
        updated = add_dependency(sample_manifest, "chalk", "5.3.0")

        assert updated.dependencies == {"left-pad": "^1.0.0", "chalk": "^5.3.0"}

    def test_overwrites_existing_entry(self, sample_manifest: Manifest) -> None:
        """An existing range is replaced."""
        updated = add_dependency(sample_manifest, "left-pad", "1.3.0")

        assert updated.dependencies == {"left-pad": "^1.3.0"}

    def test_creates_mapping(self) -> None:
        """A manifest without dependencies gets a new mapping."""
        updated = add_dependency(Manifest(name="a", version="1.0.0"), "left-pad", "1.3.0")

        assert updated.dependencies == {"left-pad": "^1.3.0"}

    def test_is_pure(self, sample_manifest: Manifest) -> None:
        """The input manifest is not modified."""
        add_dependency(sample_manifest, "chalk", "5.3.0")

        assert sample_manifest.dependencies == {"left-pad": "^1.0.0"}

    def test_version_not_validated(self, sample_manifest: Manifest) -> None:
        """Any version string is accepted."""
        updated = add_dependency(sample_manifest, "odd", "not-semver")

        assert updated.dependencies is not None
        assert updated.dependencies["odd"] == "^not-semver"


class TestRemoveDependency:
    """Tests for remove_dependency function."""

    def test_removes_entry(self, sample_manifest: Manifest) -> None:
        """The named dependency is dropped."""
        updated = remove_dependency(sample_manifest, "left-pad")

        assert updated.dependencies == {}
        assert sample_manifest.dependencies == {"left-pad": "^1.0.0"}

    def test_unknown_name_is_noop(self, sample_manifest: Manifest) -> None:
        """Removing a name that isn't listed returns the manifest unchanged."""
        assert remove_dependency(sample_manifest, "chalk") is sample_manifest
