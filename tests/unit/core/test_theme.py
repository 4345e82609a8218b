"""Unit tests for theme management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from rich.theme import Theme
from sdkmgr.core.theme import ThemeColors, get_rich_theme, load_theme


class TestThemeColors:
    """Tests for the ThemeColors model."""

    @pytest.mark.parametrize("value", ["red", "#12", "#gggggg", 42])
    def test_invalid_colors(self, value: object) -> None:
        """Non-hex colors are rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(error=value)  # type: ignore[arg-type]

    def test_short_hex_accepted(self) -> None:
        """#RGB colors are accepted and surrounding whitespace is trimmed."""
        assert ThemeColors(info=" #0cf ").info == "#0cf"

    def test_styles_apply_modifiers(self) -> None:
        """Styles pair each role's colour with its modifier."""
        styles = ThemeColors(update="#ff00ff", available="#00ff00").styles()

        assert styles["update"] == "bold #ff00ff"
        assert styles["available"] == "#00ff00"
        assert styles["dim"] == styles["muted"]


class TestLoadTheme:
    """Tests for load_theme."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Without a theme file the default palette is used."""
        assert load_theme(tmp_path / "theme.toml") == ThemeColors()

    def test_user_override(self, tmp_path: Path) -> None:
        """User colors override the defaults they name."""
        theme_dir = tmp_path / "sdkmgr"
        theme_dir.mkdir()
        (theme_dir / "theme.toml").write_text('[colors]\nupdate = "#ff00ff"\n')

        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            colors = load_theme()

        assert colors.update == "#ff00ff"
        assert colors.installed == ThemeColors().installed

    @pytest.mark.parametrize(
        "content",
        [
            '[colors]\nerror = "crimson"\n',
            '[colors]\nsparkle = "#ffffff"\n',
            'colors = "#ffffff"\n',
            "[colors\n",
        ],
    )
    def test_unusable_file_falls_back(self, tmp_path: Path, content: str) -> None:
        """Invalid colours, unknown roles or broken TOML fall back to the defaults."""
        path = tmp_path / "theme.toml"
        path.write_text(content)

        assert load_theme(path) == ThemeColors()


def test_get_rich_theme_styles() -> None:
    """Section styles are available to the console."""
    theme = get_rich_theme(ThemeColors())

    assert isinstance(theme, Theme)
    for style in ("installed", "available", "update", "error", "bold_header"):
        assert style in theme.styles
