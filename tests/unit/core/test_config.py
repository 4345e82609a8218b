"""Unit tests for settings file I/O."""

import os
import tomllib
from pathlib import Path
from unittest.mock import patch

import pytest
from sdkmgr.core.config import load_settings, load_settings_or_default, save_settings
from sdkmgr.core.errors import SettingsError, SettingsNotFoundError, SettingsParseError
from sdkmgr.core.settings import Channel, SdkManagerSettings


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises SettingsNotFoundError."""
        with pytest.raises(SettingsNotFoundError):
            load_settings(tmp_path / "settings.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises SettingsParseError."""
        path = tmp_path / "settings.toml"
        path.write_text("sdk_root = [unclosed")

        with pytest.raises(SettingsParseError, match="Invalid TOML"):
            load_settings(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise SettingsError."""
        path = tmp_path / "settings.toml"
        path.write_text('proxy_type = "ftp"\n')

        with pytest.raises(SettingsError, match="Invalid settings content"):
            load_settings(path)

    def test_valid_file(self, tmp_path: Path) -> None:
        """A valid file is loaded into settings."""
        path = tmp_path / "settings.toml"
        path.write_text('sdk_root = "/opt/android-sdk"\nchannel = 1\nfail_on_error = true\n')

        settings = load_settings(path)

        assert settings.sdk_root == Path("/opt/android-sdk")
        assert settings.channel == Channel.BETA
        assert settings.fail_on_error is True

    def test_default_path_from_xdg(self, tmp_path: Path) -> None:
        """Without a path, the XDG config location is used."""
        config_dir = tmp_path / "sdkmgr"
        config_dir.mkdir()
        (config_dir / "settings.toml").write_text("no_https = true\n")

        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            settings = load_settings()

        assert settings.no_https is True


class TestLoadSettingsOrDefault:
    """Tests for load_settings_or_default."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Defaults are returned when no file exists."""
        assert load_settings_or_default(tmp_path / "missing.toml") == SdkManagerSettings()

    def test_invalid_file_still_raises(self, tmp_path: Path) -> None:
        """Parse errors are not hidden."""
        path = tmp_path / "settings.toml"
        path.write_text("=")

        with pytest.raises(SettingsParseError):
            load_settings_or_default(path)


class TestSaveSettings:
    """Tests for save_settings."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """Saved settings load back unchanged."""
        path = tmp_path / "nested" / "settings.toml"
        settings = SdkManagerSettings(
            sdk_root=Path("/opt/android-sdk"),
            channel=Channel.CANARY,
            proxy_type="http",
            proxy_host="proxy",
            proxy_port=8080,
        )

        saved = save_settings(settings, path)

        assert saved == path
        assert load_settings(path) == settings

    def test_defaults_are_omitted(self, tmp_path: Path) -> None:
        """Only non-default values are written."""
        path = tmp_path / "settings.toml"

        save_settings(SdkManagerSettings(include_obsolete=True), path)

        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert data == {"include_obsolete": True}

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        """The atomic write leaves no temporary files."""
        save_settings(SdkManagerSettings(), tmp_path / "settings.toml")

        assert [p.name for p in tmp_path.iterdir()] == ["settings.toml"]

    def test_write_failure(self, tmp_path: Path) -> None:
        """OS errors are wrapped in SettingsError."""
        path = tmp_path / "settings.toml"

        with (
            patch("sdkmgr.core.config.os.replace", side_effect=OSError("disk full")),
            pytest.raises(SettingsError, match="disk full"),
        ):
            save_settings(SdkManagerSettings(), path)

        assert list(tmp_path.iterdir()) == []
