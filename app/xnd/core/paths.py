"""Path management for xnd.

User-level files follow the XDG Base Directory Specification:
- Config: ~/.config/xnd/config.toml
- Theme: ~/.config/xnd/theme.toml

Project-level files live in the project root:
- Manifest: <project>/package.json
- Store: <project>/node_modules/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "xnd"

# Project-level names
MANIFEST_FILENAME = "package.json"
STORE_DIRNAME = "node_modules"
METADATA_FILENAME = "package.json"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/xnd/ (or XDG_CONFIG_HOME/xnd/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the user configuration file path.

    The file holds the registry settings and the login session.

    Returns:
        Path to ~/.config/xnd/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/xnd/theme.toml.
    """
    return get_config_dir() / "theme.toml"

