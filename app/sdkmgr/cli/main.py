"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from sdkmgr import __version__
from sdkmgr.cli.commands import config, listing, packages
from sdkmgr.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="sdkmgr",
    help="Typed front-end for the Android SDK package manager.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"sdkmgr version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route library logging to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    sdk_root: Annotated[
        Path | None,
        typer.Option(
            "--sdk-root",
            help="Android SDK root (overrides stored settings).",
        ),
    ] = None,
    channel: Annotated[
        int | None,
        typer.Option(
            "--channel",
            min=0,
            max=3,
            help="Update channel: 0=stable, 1=beta, 2=dev, 3=canary.",
        ),
    ] = None,
    tool: Annotated[
        Path | None,
        typer.Option(
            "--tool",
            help="Path to the sdkmanager executable.",
        ),
    ] = None,
) -> None:
    """sdkmgr - list, install and update Android SDK packages.

    Wraps the sdkmanager command-line tool and turns its console
    output into structured package listings.
    """
    _configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["overrides"] = {
        "sdk_root": sdk_root,
        "channel": channel,
        "tool_path": tool,
    }


# Register commands
app.add_typer(listing.app, name="list")
app.add_typer(config.app, name="config")
app.command(name="install")(packages.install)
app.command(name="uninstall")(packages.uninstall)
app.command(name="update")(packages.update)


if __name__ == "__main__":
    app()
