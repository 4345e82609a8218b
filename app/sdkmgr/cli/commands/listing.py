"""List command implementation.

Shows installed packages, available packages and pending updates.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from sdkmgr.cli.types import OutputFormat, SectionChoice, get_settings
from sdkmgr.core.errors import SdkManagerError
from sdkmgr.models.listing import ListingResult
from sdkmgr.scanners.sdkmanager import SdkManagerScanner
from sdkmgr.utils.formatting import (
    console,
    create_available_table,
    create_installed_table,
    create_updates_table,
    print_error,
    print_info,
)

app = typer.Typer(
    help="List installed and available SDK packages.",
    invoke_without_command=True,
)


def _select_sections(listing: ListingResult, section: SectionChoice) -> ListingResult:
    """Return a copy of the listing restricted to the chosen section."""
    if section == SectionChoice.ALL:
        return listing

    return ListingResult(
        installed_packages=(
            listing.installed_packages if section == SectionChoice.INSTALLED else []
        ),
        available_packages=(
            listing.available_packages if section == SectionChoice.AVAILABLE else []
        ),
        available_updates=listing.available_updates if section == SectionChoice.UPDATES else [],
    )


@app.callback(invoke_without_command=True)
def list_packages(
    ctx: typer.Context,
    section: Annotated[
        SectionChoice,
        typer.Option(
            "--section",
            "-s",
            help="Section to show: installed, available, updates, or all.",
            case_sensitive=False,
        ),
    ] = SectionChoice.ALL,
    count_only: Annotated[
        bool,
        typer.Option(
            "--count",
            "-c",
            help="Only show package counts.",
        ),
    ] = False,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export the listing to a JSON file.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List SDK packages reported by sdkmanager.

    Examples:
        sdkmgr list                          # All sections as tables
        sdkmgr list --section updates        # Pending updates only
        sdkmgr list --format json            # Output as JSON
        sdkmgr list --export listing.json    # Export to JSON file
    """
    if ctx.invoked_subcommand is not None:
        return

    scanner = SdkManagerScanner(get_settings(ctx))

    try:
        listing = scanner.list_packages()
    except (SdkManagerError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    listing = _select_sections(listing, section)

    if export_path is not None:
        export_path = export_path.resolve()
        if export_path.is_dir():
            print_error(f"Export path is a directory: {export_path}")
            raise typer.Exit(code=1)

        try:
            export_path.parent.mkdir(parents=True, exist_ok=True)
            export_path.write_text(json.dumps(listing.to_dict(), indent=2))
            print_info(f"Listing exported to {export_path}")
        except OSError as e:
            print_error(f"Failed to export: {e}")
            raise typer.Exit(code=1) from e

    if count_only:
        counts = listing.summary()
        console.print(f"[installed]Installed:[/] {counts['installed']}")
        console.print(f"[available]Available:[/] {counts['available']}")
        console.print(f"[update]Updates:[/] {counts['updates']}")
        return

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(listing.to_dict()))
        return

    if listing.is_empty:
        print_info("No packages reported.")
        return

    if section in (SectionChoice.INSTALLED, SectionChoice.ALL):
        console.print(create_installed_table(listing.installed_packages))
    if section in (SectionChoice.AVAILABLE, SectionChoice.ALL):
        console.print(create_available_table(listing.available_packages))
    if section in (SectionChoice.UPDATES, SectionChoice.ALL):
        console.print(create_updates_table(listing.available_updates))

    counts = listing.summary()
    console.print(
        f"\n[dim]{counts['installed']} installed, {counts['available']} available, "
        f"{counts['updates']} updates[/]"
    )
