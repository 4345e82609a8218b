"""Settings management commands.

Shows and edits the stored sdkmanager settings in
~/.config/sdkmgr/settings.toml.
"""

from typing import Annotated

import typer
from pydantic import ValidationError
from rich.table import Table

from sdkmgr.core.config import load_settings_or_default, save_settings
from sdkmgr.core.errors import SettingsError
from sdkmgr.core.paths import get_settings_path
from sdkmgr.core.settings import SdkManagerSettings
from sdkmgr.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Show and edit stored settings.",
    no_args_is_help=True,
)


def _load_or_exit() -> SdkManagerSettings:
    try:
        return load_settings_or_default()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def show() -> None:
    """Show the effective stored settings."""
    settings = _load_or_exit()

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="info", no_wrap=True)
    table.add_column("Value", style="text")
    table.add_column("Description", style="muted")

    for name, field in SdkManagerSettings.model_fields.items():
        value = getattr(settings, name)
        display = "-" if value is None else str(int(value) if name == "channel" else value)
        table.add_row(name, display, field.description or "")

    console.print(table)


@app.command()
def path() -> None:
    """Print the settings file location."""
    console.print(str(get_settings_path()))


@app.command("set")
def set_value(
    key: Annotated[str, typer.Argument(help="Setting name, e.g. sdk_root.")],
    value: Annotated[str, typer.Argument(help="New value; an empty string restores the default.")],
) -> None:
    """Change a stored setting."""
    if key not in SdkManagerSettings.model_fields:
        known = ", ".join(SdkManagerSettings.model_fields)
        print_error(f"Unknown setting '{key}'. Known settings: {known}")
        raise typer.Exit(code=1)

    data = _load_or_exit().model_dump(exclude_defaults=True)
    if value == "":
        data.pop(key, None)
    else:
        data[key] = value

    try:
        settings = SdkManagerSettings.model_validate(data)
    except ValidationError as e:
        print_error(f"Invalid value for {key}: {e.errors()[0]['msg']}")
        raise typer.Exit(code=1) from e

    try:
        saved_path = save_settings(settings)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Saved {key} to {saved_path}")
