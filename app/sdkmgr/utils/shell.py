"""Shell execution utilities.

Provides subprocess execution for captured commands and for commands
that block on a single interactive confirmation prompt.
"""

import logging
import subprocess
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Sink for informational lines forwarded from a running command
LineSink = Callable[[str], None]

CONFIRMATION_TOKEN = "y"

_INFO_PREFIX = "info:"
_ERROR_PREFIX = "error:"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = None,
    cwd: str | None = None,
) -> CommandResult:
    """Execute a command to completion and capture its output.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait for command (None = no limit).
        cwd: Working directory for the command. If None, uses current directory.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        stdin=subprocess.DEVNULL,
        text=True,
        errors="replace",
        check=check,
        timeout=timeout,
        cwd=cwd,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def run_confirming(
    args: list[str],
    on_info_line: LineSink | None = None,
    *,
    fail_on_error: bool = False,
    confirmation: str = CONFIRMATION_TOKEN,
    cwd: str | None = None,
) -> bool:
    """Run a command that asks for confirmation exactly once.

    The confirmation line is written as soon as the process starts, not
    when the prompt appears: the tool is expected to prompt once, before
    any further work, and the prompt text cannot be told apart from other
    early output. Output is then drained until the process exits. Lines
    starting with "Info:" (case-insensitive) are forwarded to
    ``on_info_line`` in order; everything else is discarded.

    There is no timeout. A process that never exits blocks the caller.

    Args:
        args: Command and arguments to execute.
        on_info_line: Callback receiving each "Info:" line.
        fail_on_error: If True, return False when any line starts with "Error:".
        confirmation: Answer written to the prompt.
        cwd: Working directory for the command.

    Returns:
        True once the process has exited. False only when ``fail_on_error``
        is set and the command printed an "Error:" line. The exit code is
        logged but not interpreted.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If the command cannot be started.
    """
    saw_error = False

    with subprocess.Popen(
        args,
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
        cwd=cwd,
    ) as process:
        if process.stdin is not None:
            try:
                process.stdin.write(f"{confirmation}\n")
                process.stdin.close()
            except BrokenPipeError:
                logger.debug("Process closed its input before confirmation was written")

        if process.stdout is not None:
            for raw_line in process.stdout:
                line = raw_line.rstrip("\r\n")
                prefix = line[: len(_INFO_PREFIX)].lower()

                if prefix == _INFO_PREFIX:
                    if on_info_line is not None:
                        on_info_line(line)
                    continue

                if line.lower().startswith(_ERROR_PREFIX):
                    saw_error = True
                    logger.warning("%s", line)
                elif line.strip():
                    logger.debug("Discarded output: %s", line)

        returncode = process.wait()

    logger.info("Command %s exited with code %d", args[0], returncode)

    if fail_on_error and saw_error:
        return False
    return True
