"""Console output for the sdkmgr CLI.

One table per listing section, plus message helpers that print in the
theme's semantic styles. Table cells come from tool output and are
escaped so stray brackets are not read as Rich markup.
"""

import sys
from collections.abc import Iterable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sdkmgr.core.theme import get_theme
from sdkmgr.models.package import AvailablePackage, AvailableUpdate, InstalledPackage

# Hex theme colours are downsampled unless truecolor is forced on a TTY
_COLOR_SYSTEM = "truecolor" if sys.stdout.isatty() else None

console = Console(theme=get_theme(), color_system=_COLOR_SYSTEM)
err_console = Console(theme=get_theme(), stderr=True, color_system=_COLOR_SYSTEM)

# (header, style) per column; the first column holds the package path
_INSTALLED_COLUMNS = (
    ("Path", "installed"),
    ("Version", "muted"),
    ("Description", "text"),
    ("Location", "info"),
)
_AVAILABLE_COLUMNS = (("Path", "available"), ("Version", "muted"), ("Description", "text"))
_UPDATE_COLUMNS = (("Path", "update"), ("Installed", "muted"), ("Available", "success"))


def _section_table(
    title: str,
    columns: Sequence[tuple[str, str]],
    rows: Iterable[Sequence[str]],
) -> Table:
    table = Table(
        title=title,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    for index, (header, style) in enumerate(columns):
        table.add_column(header, style=style, no_wrap=index == 0, overflow="fold")
    for row in rows:
        table.add_row(*(escape(cell) for cell in row))
    return table


def create_installed_table(packages: Iterable[InstalledPackage]) -> Table:
    """Create the table of installed packages, in listing order."""
    return _section_table(
        "Installed Packages",
        _INSTALLED_COLUMNS,
        ((p.path, p.version, p.description or "-", p.location) for p in packages),
    )


def create_available_table(packages: Iterable[AvailablePackage]) -> Table:
    """Create the table of packages offered by the repository."""
    return _section_table(
        "Available Packages",
        _AVAILABLE_COLUMNS,
        ((p.path, p.version, p.description or "-") for p in packages),
    )


def create_updates_table(updates: Iterable[AvailableUpdate]) -> Table:
    """Create the table of pending updates."""
    return _section_table(
        "Available Updates",
        _UPDATE_COLUMNS,
        ((u.path, u.installed_version, u.available_version) for u in updates),
    )


def print_info(message: str) -> None:
    console.print(f"[info]{message}[/]")


def print_error(message: str) -> None:
    """Print an error message on stderr."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    console.print(f"[success]{message}[/]")
