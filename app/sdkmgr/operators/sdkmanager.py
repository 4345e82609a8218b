"""sdkmanager package operator.

Executes package installation, removal and updates. Every mutating
sdkmanager command asks for license/confirmation once before doing any
work; the operator answers it through :func:`run_confirming`.
"""

import logging
from collections.abc import Iterable

from sdkmgr.core.locator import find_sdkmanager
from sdkmgr.core.locator import is_available as tool_is_available
from sdkmgr.core.settings import SdkManagerSettings, build_standard_options
from sdkmgr.utils.shell import LineSink, run_confirming

logger = logging.getLogger(__name__)


def _log_info_line(line: str) -> None:
    logger.info("%s", line)


class SdkManagerOperator:
    """Operator for Android SDK packages.

    Attributes:
        settings: Invocation settings.
        on_info_line: Receives the tool's "Info:" lines while a command runs.

    Example:
        >>> operator = SdkManagerOperator(on_info_line=print)
        >>> operator.install(["platforms;android-34", "build-tools;34.0.0"])
        True
    """

    def __init__(
        self,
        settings: SdkManagerSettings | None = None,
        on_info_line: LineSink | None = None,
    ) -> None:
        """Initialize the operator.

        Args:
            settings: Invocation settings. If None, defaults are used.
            on_info_line: Sink for informational lines. Defaults to logging.
        """
        self._settings = settings or SdkManagerSettings()
        self._on_info_line = on_info_line or _log_info_line

    @property
    def settings(self) -> SdkManagerSettings:
        """Return the invocation settings."""
        return self._settings

    def is_available(self) -> bool:
        """Check if sdkmanager can be located."""
        return tool_is_available(self._settings)

    def install(self, package_ids: Iterable[str]) -> bool:
        """Install packages.

        Args:
            package_ids: SDK component paths to install.

        Returns:
            True when the command completed (see :meth:`install_or_uninstall`).
        """
        return self.install_or_uninstall(True, package_ids)

    def uninstall(self, package_ids: Iterable[str]) -> bool:
        """Uninstall packages.

        Args:
            package_ids: SDK component paths to remove.

        Returns:
            True when the command completed (see :meth:`install_or_uninstall`).
        """
        return self.install_or_uninstall(False, package_ids)

    def install_or_uninstall(self, install: bool, package_ids: Iterable[str]) -> bool:
        """Install or uninstall packages in a single sdkmanager run.

        Args:
            install: True to install, False to uninstall.
            package_ids: SDK component paths.

        Returns:
            True once the tool has exited. False only when the settings
            enable ``fail_on_error`` and the tool reported an error. An
            empty package list returns True without running anything.

        Raises:
            ToolNotFoundError: If sdkmanager cannot be located.
            OSError: If sdkmanager cannot be started.
        """
        packages = list(package_ids)
        if not packages:
            return True

        command = [] if install else ["--uninstall"]
        logger.info(
            "%s SDK packages: %s",
            "Installing" if install else "Uninstalling",
            ", ".join(packages),
        )
        return self._run([*command, *packages])

    def update_all(self) -> bool:
        """Update all installed packages.

        Returns:
            True once the tool has exited, with the same ``fail_on_error``
            caveat as :meth:`install_or_uninstall`.

        Raises:
            ToolNotFoundError: If sdkmanager cannot be located.
            OSError: If sdkmanager cannot be started.
        """
        logger.info("Updating all installed SDK packages")
        return self._run(["update"])

    def _run(self, command_args: list[str]) -> bool:
        """Run sdkmanager with the standard options and confirm its prompt."""
        tool = find_sdkmanager(self._settings)
        args = [str(tool), *command_args, *build_standard_options(self._settings)]

        return run_confirming(
            args,
            self._on_info_line,
            fail_on_error=self._settings.fail_on_error,
        )


def install_or_uninstall(
    install: bool,
    package_ids: Iterable[str],
    settings: SdkManagerSettings | None = None,
    on_info_line: LineSink | None = None,
) -> bool:
    """Install or uninstall packages with the given settings."""
    return SdkManagerOperator(settings, on_info_line).install_or_uninstall(install, package_ids)


def update_all(
    settings: SdkManagerSettings | None = None,
    on_info_line: LineSink | None = None,
) -> bool:
    """Update all installed packages with the given settings."""
    return SdkManagerOperator(settings, on_info_line).update_all()
