"""Settings file I/O.

Settings are stored in ~/.config/sdkmgr/settings.toml and validated
against :class:`~sdkmgr.core.settings.SdkManagerSettings`.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile

import tomli_w
from pydantic import ValidationError

from sdkmgr.core.errors import SettingsError, SettingsNotFoundError, SettingsParseError
from sdkmgr.core.paths import get_settings_path
from sdkmgr.core.settings import SdkManagerSettings

logger = logging.getLogger(__name__)


def load_settings(path: Path | None = None) -> SdkManagerSettings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated SdkManagerSettings object.

    Raises:
        SettingsNotFoundError: If the settings file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        raise SettingsNotFoundError(f"Settings file not found: {settings_path}")

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return SdkManagerSettings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def load_settings_or_default(path: Path | None = None) -> SdkManagerSettings:
    """Load settings, falling back to defaults when no file exists.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Loaded settings, or default settings if the file is missing.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    try:
        return load_settings(path)
    except SettingsNotFoundError:
        logger.debug("No settings file, using defaults")
        return SdkManagerSettings()


def save_settings(settings: SdkManagerSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The settings to save.
        path: Path to save the settings. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    data = _settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def _settings_to_dict(settings: SdkManagerSettings) -> dict[str, object]:
    """Convert settings to a dictionary for TOML serialization.

    Only values that differ from the defaults are included, and None
    values are omitted since TOML has no null.

    Args:
        settings: The settings to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    data = settings.model_dump(mode="json", exclude_defaults=True, exclude_none=True)
    return {key: value for key, value in data.items() if value is not None}
