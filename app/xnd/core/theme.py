"""Theme management for the xnd CLI.

Colors come from the bundled data/theme.toml, optionally overridden key
by key from ~/.config/xnd/theme.toml.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from xnd.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Color configuration for the xnd CLI.

    All colors must be hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#9aa5ab"
    header: str = "#cb3837"
    border: str = "#5a2a2a"

    success: str = "#2fbf71"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#3fa7d6"

    package: str = "#e8e8e8"
    version: str = "#c1ff62"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are hex codes."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        digits = color.removeprefix("#")
        if color == digits or len(digits) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(digits, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


def get_bundled_theme_path() -> Path:
    """Path to the bundled data/theme.toml."""
    return Path(str(resources.files("xnd.data").joinpath("theme.toml")))


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Load the [colors] table from a TOML file.

    Returns:
        Mapping of color name to value, or None if the file is missing
        or unreadable.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Failed to read theme file %s: %s", path, e)
        return None

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Invalid 'colors' section in %s", path)
        return None
    return {k: v for k, v in colors.items() if isinstance(v, str)}


def load_theme() -> ThemeColors:
    """Load theme colors, user overrides on top of bundled defaults.

    Falls back to the built-in defaults if the merged colors don't validate.
    """
    merged = _load_toml_colors(get_bundled_theme_path()) or {}

    user_colors = _load_toml_colors(get_user_theme_path())
    if user_colors:
        logger.debug("Loaded user theme overrides from %s", get_user_theme_path())
        merged.update(user_colors)

    try:
        return ThemeColors(**merged)
    except ValidationError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme."""
    if colors is None:
        colors = load_theme()

    return Theme(
        {
            "text": colors.text,
            "muted": colors.muted,
            "header": colors.header,
            "border": colors.border,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "package": f"bold {colors.package}",
            "version": colors.version,
            "bold_header": f"bold {colors.header}",
        }
    )


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, loading and caching it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
