"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from typing import Any

import typer

from sdkmgr.core.config import load_settings_or_default
from sdkmgr.core.errors import SettingsError
from sdkmgr.core.settings import SdkManagerSettings
from sdkmgr.utils.formatting import print_error


class SectionChoice(str, Enum):
    """Listing sections selectable from the CLI."""

    INSTALLED = "installed"
    AVAILABLE = "available"
    UPDATES = "updates"
    ALL = "all"


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def get_settings(ctx: typer.Context) -> SdkManagerSettings:
    """Load stored settings and apply the global command-line overrides.

    Args:
        ctx: Typer context carrying the overrides in ``ctx.obj``.

    Returns:
        Effective settings for this invocation.

    Raises:
        typer.Exit: If the settings file is invalid.
    """
    try:
        settings = load_settings_or_default()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    obj: dict[str, Any] = ctx.find_root().obj or {}
    overrides = {key: value for key, value in obj.get("overrides", {}).items() if value is not None}
    if not overrides:
        return settings

    return SdkManagerSettings.model_validate({**settings.model_dump(), **overrides})
