"""User configuration models.

This module defines the Pydantic models representing config.toml: the
registry settings and the local login session.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"


class Tier(str, Enum):
    """Permission tier of a logged-in user, lowest first."""

    USER = "user"
    PACKAGE_MAKER = "package-maker"
    MODERATOR = "moderator"
    CREATOR = "creator"


class Session(BaseModel):
    """Local login session.

    Attributes:
        username: Name the user logged in with.
        tier: Permission tier of the user.
    """

    model_config = ConfigDict(extra="forbid")

    username: Annotated[str, Field(min_length=1, description="Logged-in user")]
    tier: Annotated[Tier, Field(description="Permission tier")] = Tier.USER


class RegistryConfig(BaseModel):
    """Registry section of the configuration.

    Attributes:
        url: Base URL of the npm-compatible registry.
    """

    model_config = ConfigDict(extra="forbid")

    url: Annotated[str, Field(description="Registry base URL")] = DEFAULT_REGISTRY_URL

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        url = v.strip()
        if not url.startswith(("http://", "https://")):
            msg = f"registry url must start with http:// or https://, got '{v}'"
            raise ValueError(msg)
        return url.rstrip("/")


class XndConfig(BaseModel):
    """Complete user configuration.

    Attributes:
        registry: Registry settings.
        user: Current session, or None when logged out.
    """

    model_config = ConfigDict(extra="forbid")

    registry: Annotated[RegistryConfig, Field(default_factory=RegistryConfig)]
    user: Annotated[Session | None, Field(description="Current login session")] = None

    @property
    def logged_in(self) -> bool:
        """Check if a session is present."""
        return self.user is not None
