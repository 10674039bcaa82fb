"""Registry client for npm-compatible package registries.

Resolves a package name to the version the registry tags as "latest"
and returns that version's metadata record. One GET per name, no retries.
"""

import logging
from types import TracebackType
from typing import Any, Self

import httpx

from xnd.models.config import DEFAULT_REGISTRY_URL
from xnd.models.package import Resolution

logger = logging.getLogger(__name__)


class ResolutionError(Exception):
    """Raised when a package cannot be resolved against the registry.

    The underlying exception, if any, is chained as ``__cause__``.

    Attributes:
        package: Name of the package that failed to resolve.
    """

    def __init__(self, package: str, message: str) -> None:
        super().__init__(message)
        self.package = package


class RegistryClient:
    """Async client for the registry's package document endpoint.

    Use as an async context manager so that one HTTP connection pool
    serves a whole install run:

        >>> async with RegistryClient("https://registry.npmjs.org") as registry:
        ...     resolution = await registry.resolve("left-pad")
        ...     print(resolution.version)

    Attributes:
        base_url: Registry base URL without trailing slash.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_REGISTRY_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Registry base URL.
            transport: Optional httpx transport (used by tests).
        """
        self._base_url = base_url.rstrip("/")
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        """Registry base URL."""
        return self._base_url

    async def __aenter__(self) -> Self:
        self._get_client()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                follow_redirects=True,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def package_url(self, name: str) -> str:
        """URL of a package's registry document. The name is used verbatim."""
        return f"{self._base_url}/{name}"

    async def fetch_document(self, name: str) -> dict[str, Any]:
        """Fetch the full registry document for a package.

        Args:
            name: Package name.

        Returns:
            Parsed JSON document.

        Raises:
            ResolutionError: On transport failure, non-2xx status or a
                body that isn't a JSON object.
        """
        if not name:
            raise ResolutionError(name, "Package name cannot be empty")

        url = self.package_url(name)
        logger.debug("GET %s", url)
        try:
            response = await self._get_client().get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 404:
                msg = f"Package '{name}' not found in registry"
            else:
                msg = f"Registry returned HTTP {status} for '{name}'"
            raise ResolutionError(name, msg) from e
        except httpx.HTTPError as e:
            msg = f"Registry request for '{name}' failed: {e}"
            raise ResolutionError(name, msg) from e

        try:
            document = response.json()
        except ValueError as e:
            raise ResolutionError(name, f"Registry sent invalid JSON for '{name}'") from e

        if not isinstance(document, dict):
            raise ResolutionError(name, f"Unexpected registry document for '{name}'")
        return document

    async def resolve(self, name: str) -> Resolution:
        """Resolve a package to its latest version and metadata.

        Args:
            name: Package name (non-empty, case-sensitive).

        Returns:
            Resolution with the latest version and its metadata record.

        Raises:
            ResolutionError: If the lookup fails or the document lacks
                dist-tags.latest or the matching versions entry.
        """
        document = await self.fetch_document(name)

        dist_tags = document.get("dist-tags")
        latest = dist_tags.get("latest") if isinstance(dist_tags, dict) else None
        if not isinstance(latest, str) or not latest:
            raise ResolutionError(name, f"No latest version published for '{name}'")

        versions = document.get("versions")
        metadata = versions.get(latest) if isinstance(versions, dict) else None
        if not isinstance(metadata, dict):
            raise ResolutionError(name, f"Registry has no metadata for {name}@{latest}")

        logger.info("Resolved %s to %s", name, latest)
        return Resolution(name=name, version=latest, metadata=metadata)
