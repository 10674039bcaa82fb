"""User configuration and session persistence.

Loads and saves ~/.config/xnd/config.toml, which holds the registry
settings and the login session. The XND_REGISTRY environment variable
overrides the configured registry URL without being written back.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from xnd.core.paths import get_config_path
from xnd.models.config import RegistryConfig, Session, Tier, XndConfig
from xnd.utils.files import write_atomic

logger = logging.getLogger(__name__)

REGISTRY_ENV_VAR = "XND_REGISTRY"

# The session makes the config private to its owner
CONFIG_FILE_MODE = 0o600


class ConfigError(Exception):
    """Raised when the user configuration cannot be read or written."""


def load_config(path: Path | None = None) -> XndConfig:
    """Load the user configuration.

    A missing file yields the default configuration (logged out, default
    registry).

    Args:
        path: Config file path. If None, uses the default XDG location.

    Returns:
        Validated XndConfig.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return XndConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return XndConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: XndConfig, path: Path | None = None) -> Path:
    """Save the user configuration atomically.

    Args:
        config: Configuration to save.
        path: Config file path. If None, uses the default XDG location.

    Returns:
        Path where the configuration was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        data = tomli_w.dumps(_config_to_dict(config)).encode("utf-8")
        write_atomic(config_path, data, mode=CONFIG_FILE_MODE)
    except OSError as e:
        raise ConfigError(f"Failed to write config: {e}") from e

    logger.debug("Saved config to %s", config_path)
    return config_path


def registry_url(config: XndConfig) -> str:
    """Effective registry URL, honouring the XND_REGISTRY override.

    Raises:
        ConfigError: If the override is not an http(s) URL.
    """
    override = os.environ.get(REGISTRY_ENV_VAR)
    if not override:
        return config.registry.url
    try:
        return RegistryConfig(url=override).url
    except ValidationError as e:
        raise ConfigError(f"Invalid {REGISTRY_ENV_VAR}: {override}") from e


def login(config: XndConfig, username: str, tier: Tier = Tier.USER) -> XndConfig:
    """Return a copy of the configuration with a new session."""
    return config.model_copy(update={"user": Session(username=username, tier=tier)})


def logout(config: XndConfig) -> XndConfig:
    """Return a copy of the configuration without a session."""
    return config.model_copy(update={"user": None})


def _config_to_dict(config: XndConfig) -> dict[str, Any]:
    """Convert an XndConfig to a dictionary for TOML serialization.

    TOML has no null, so a missing session is left out entirely.
    """
    result: dict[str, Any] = {"registry": {"url": config.registry.url}}
    if config.user is not None:
        result["user"] = {
            "username": config.user.username,
            "tier": config.user.tier.value,
        }
    return result
