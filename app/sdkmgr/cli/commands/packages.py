"""Install, uninstall and update commands.

Each command runs one sdkmanager invocation, answers its confirmation
prompt and prints the tool's "Info:" lines as they arrive.
"""

from collections.abc import Callable
from typing import Annotated

import typer
from rich.markup import escape

from sdkmgr.cli.types import get_settings
from sdkmgr.core.errors import SdkManagerError
from sdkmgr.operators.sdkmanager import SdkManagerOperator
from sdkmgr.utils.formatting import console, print_error, print_success

YesOption = Annotated[
    bool,
    typer.Option(
        "--yes",
        "-y",
        help="Skip confirmation prompt and proceed.",
    ),
]

PackagesArgument = Annotated[
    list[str],
    typer.Argument(
        help="SDK package paths, e.g. 'platforms;android-34'.",
        show_default=False,
    ),
]


def _print_info_line(line: str) -> None:
    console.print(f"[muted]{escape(line)}[/]")


def _confirm(message: str) -> bool:
    """Prompt the user to confirm an operation."""
    return typer.confirm(message, default=False)


def _run_operation(
    ctx: typer.Context,
    operation: Callable[[SdkManagerOperator], bool],
    done_message: str,
) -> None:
    """Run an operator call and translate its outcome into CLI output.

    Raises:
        typer.Exit: With code 1 if the operation fails or cannot start.
    """
    operator = SdkManagerOperator(get_settings(ctx), on_info_line=_print_info_line)

    try:
        succeeded = operation(operator)
    except (SdkManagerError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not succeeded:
        print_error("sdkmanager reported errors, see output above")
        raise typer.Exit(code=1)

    print_success(done_message)


def install(
    ctx: typer.Context,
    packages: PackagesArgument,
    yes: YesOption = False,
) -> None:
    """Install SDK packages (licenses are accepted automatically)."""
    if not yes and not _confirm(f"Install {len(packages)} package(s)?"):
        console.print("[muted]Aborted.[/]")
        raise typer.Exit(code=0)

    _run_operation(ctx, lambda op: op.install(packages), "Install completed.")


def uninstall(
    ctx: typer.Context,
    packages: PackagesArgument,
    yes: YesOption = False,
) -> None:
    """Uninstall SDK packages."""
    if not yes and not _confirm(f"Uninstall {len(packages)} package(s)?"):
        console.print("[muted]Aborted.[/]")
        raise typer.Exit(code=0)

    _run_operation(ctx, lambda op: op.uninstall(packages), "Uninstall completed.")


def update(
    ctx: typer.Context,
    yes: YesOption = False,
) -> None:
    """Update all installed SDK packages."""
    if not yes and not _confirm("Update all installed packages?"):
        console.print("[muted]Aborted.[/]")
        raise typer.Exit(code=0)

    _run_operation(ctx, lambda op: op.update_all(), "Update completed.")
