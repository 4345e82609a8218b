"""CLI package for sdkmgr.

This package contains the Typer application and all subcommands.
"""

from sdkmgr.cli.main import app

__all__ = ["app"]
