"""Console colours for sdkmgr.

The default palette lives on :class:`ThemeColors`. Any subset of it can be
overridden in ``~/.config/sdkmgr/theme.toml``::

    [colors]
    update = "#ff00ff"
"""

import logging
import re
import tomllib
from functools import cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from sdkmgr.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-f]{3}){1,2}", re.IGNORECASE)

# Rich style name -> (colour role, modifier)
_STYLES: dict[str, tuple[str, str]] = {
    "text": ("text", ""),
    "muted": ("muted", ""),
    "dim": ("muted", ""),
    "border": ("border", ""),
    "header": ("header", ""),
    "bold_header": ("header", "bold"),
    "info": ("info", ""),
    "success": ("success", ""),
    "warning": ("warning", ""),
    "error": ("error", "bold"),
    "installed": ("installed", "bold"),
    "available": ("available", ""),
    "update": ("update", "bold"),
}


class ThemeColors(BaseModel):
    """Hex colours (#RGB or #RRGGBB) per console role."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    info: str = "#0ec1c8"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"

    installed: str = "#69B9A1"
    available: str = "#0e8ac8"
    update: str = "#c1ff62"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, value: object) -> str:
        if not isinstance(value, str) or not _HEX_COLOR.fullmatch(value.strip()):
            raise ValueError(f"expected a #RGB or #RRGGBB colour, got {value!r}")
        return value.strip()

    def styles(self) -> dict[str, str]:
        """Map every Rich style name to its style definition."""
        return {
            name: f"{modifier} {getattr(self, role)}".lstrip()
            for name, (role, modifier) in _STYLES.items()
        }


def _read_overrides(path: Path) -> dict[str, object]:
    """Return the ``[colors]`` table of a theme file, or {} if unusable."""
    try:
        with open(path, "rb") as f:
            colors = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return colors


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load the palette with user overrides applied.

    An override file with any invalid colour is ignored as a whole.

    Args:
        path: Theme file. If None, uses the default location.

    Returns:
        ThemeColors with overrides merged over the defaults.
    """
    theme_path = path or get_theme_path()
    overrides = _read_overrides(theme_path)
    if not overrides:
        return ThemeColors()

    try:
        colors = ThemeColors.model_validate(overrides)
    except ValidationError as e:
        logger.warning("Invalid colours in %s, using defaults: %s", theme_path, e)
        return ThemeColors()

    logger.debug("Applied %d colour override(s) from %s", len(overrides), theme_path)
    return colors


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build a Rich theme, loading the palette when none is given."""
    return Theme((colors or load_theme()).styles())


@cache
def get_theme() -> Theme:
    """Return the console theme, loaded once per process."""
    return get_rich_theme()
