"""CLI commands for sdkmgr.

This package contains all subcommand implementations.
"""

from sdkmgr.cli.commands import config, listing, packages

__all__ = ["config", "listing", "packages"]
