"""sdkmanager listing scanner.

Runs ``sdkmanager --list`` and parses its output into a ListingResult.
"""

import logging

from sdkmgr.core.locator import find_sdkmanager
from sdkmgr.core.locator import is_available as tool_is_available
from sdkmgr.core.settings import SdkManagerSettings, build_standard_options
from sdkmgr.models.listing import ListingResult
from sdkmgr.parsers.listing import parse_listing
from sdkmgr.utils.shell import run_command

logger = logging.getLogger(__name__)


class SdkManagerScanner:
    """Scanner for Android SDK packages.

    The listing is captured in full and parsed after the process has
    exited.

    Example:
        >>> scanner = SdkManagerScanner(SdkManagerSettings(sdk_root=Path("~/Android/Sdk")))
        >>> if scanner.is_available():
        ...     for pkg in scanner.list_packages().installed_packages:
        ...         print(f"{pkg.path}: {pkg.version}")
    """

    def __init__(self, settings: SdkManagerSettings | None = None) -> None:
        """Initialize the scanner.

        Args:
            settings: Invocation settings. If None, defaults are used.
        """
        self._settings = settings or SdkManagerSettings()

    @property
    def settings(self) -> SdkManagerSettings:
        """Return the invocation settings."""
        return self._settings

    def is_available(self) -> bool:
        """Check if sdkmanager can be located."""
        return tool_is_available(self._settings)

    def build_args(self) -> list[str]:
        """Build the full listing command line."""
        tool = find_sdkmanager(self._settings)
        return [str(tool), "--list", *build_standard_options(self._settings)]

    def list_packages(self) -> ListingResult:
        """List installed packages, available packages and updates.

        A run that produces no output yields an empty result. The exit
        code is logged but not treated as an error.

        Returns:
            ListingResult parsed from the tool output.

        Raises:
            ToolNotFoundError: If sdkmanager cannot be located.
            OSError: If sdkmanager cannot be started.
        """
        args = self.build_args()
        logger.info("Listing SDK packages: %s", " ".join(args))

        result = run_command(args)

        if not result.success:
            logger.warning(
                "sdkmanager --list exited with code %d: %s",
                result.returncode,
                result.stderr.strip() or "no error output",
            )

        listing = parse_listing(result.stdout.splitlines())
        logger.debug("Parsed listing: %s", listing.summary())
        return listing


def list_packages(settings: SdkManagerSettings | None = None) -> ListingResult:
    """List SDK packages with the given settings.

    Args:
        settings: Invocation settings. If None, defaults are used.

    Returns:
        ListingResult parsed from the tool output.
    """
    return SdkManagerScanner(settings).list_packages()
