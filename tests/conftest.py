"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules. Registry
traffic never leaves the process: tests build an httpx.MockTransport
that serves npm-style package documents from a dict.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
from xnd.core.project import ProjectContext

REGISTRY_URL = "https://registry.test"

RegistryTransportFactory = Callable[..., httpx.MockTransport]


def npm_document(name: str, versions: list[str], latest: str | None = None) -> dict[str, Any]:
    """Build a registry document with the given versions."""
    return {
        "name": name,
        "dist-tags": {"latest": latest or versions[-1]},
        "versions": {
            v: {
                "name": name,
                "version": v,
                "main": "index.js",
                "dist": {"tarball": f"{REGISTRY_URL}/{name}/-/{name}-{v}.tgz"},
            }
            for v in versions
        },
    }


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config directory at a temporary location."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("XND_REGISTRY", raising=False)
    return config_home / "xnd"


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty project directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def project(project_dir: Path) -> ProjectContext:
    """Project context rooted at the temporary project directory."""
    return ProjectContext(root=project_dir)


@pytest.fixture
def make_document() -> Callable[..., dict[str, Any]]:
    """Builder for registry documents."""
    return npm_document


@pytest.fixture
def registry_documents() -> dict[str, dict[str, Any]]:
    """Sample registry contents."""
    return {
        "left-pad": npm_document("left-pad", ["1.0.0", "1.1.0", "1.3.0"]),
        "chalk": npm_document("chalk", ["4.1.2", "5.3.0"]),
        "lodash": npm_document("lodash", ["4.17.21"]),
        "@types/node": npm_document("@types/node", ["20.11.0"]),
    }


@pytest.fixture
def registry_transport(
    registry_documents: dict[str, dict[str, Any]],
) -> RegistryTransportFactory:
    """Factory for a mock registry transport.

    Keyword Args:
        documents: Registry contents (defaults to registry_documents).
        statuses: Package name -> HTTP status to answer with instead.
        unreachable: Package names whose request raises ConnectError.
        requests: List that receives every requested package name.
    """

    def factory(
        documents: dict[str, dict[str, Any]] | None = None,
        statuses: dict[str, int] | None = None,
        unreachable: set[str] | None = None,
        requests: list[str] | None = None,
    ) -> httpx.MockTransport:
        served = registry_documents if documents is None else documents

        def handler(request: httpx.Request) -> httpx.Response:
            name = request.url.path.lstrip("/")
            if requests is not None:
                requests.append(name)
            if unreachable and name in unreachable:
                raise httpx.ConnectError("Connection refused", request=request)
            if statuses and name in statuses:
                return httpx.Response(statuses[name], json={"error": "nope"})
            if name not in served:
                return httpx.Response(404, json={"error": "Not found"})
            return httpx.Response(200, json=served[name])

        return httpx.MockTransport(handler)

    return factory
