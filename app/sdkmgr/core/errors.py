"""Exception hierarchy for sdkmgr."""


class SdkManagerError(Exception):
    """Base exception for all sdkmgr errors."""


class ToolNotFoundError(SdkManagerError):
    """Raised when the sdkmanager executable cannot be located."""


class SettingsError(SdkManagerError):
    """Base exception for settings file errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""
