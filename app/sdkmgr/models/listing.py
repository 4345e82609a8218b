"""Listing result model.

Aggregates the three record collections produced by a single
``sdkmanager --list`` parse pass.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from sdkmgr.models.package import (
    AvailablePackage,
    AvailableUpdate,
    InstalledPackage,
    PackagePath,
)


@dataclass(slots=True)
class ListingResult:
    """Inventory reported by one listing invocation.

    The collections are append-only and keep the order in which the
    tool printed the records. No sorting or de-duplication is applied.

    Attributes:
        installed_packages: Packages present in the SDK root.
        available_packages: Packages offered by the repository.
        available_updates: Installed packages with a newer version available.
    """

    installed_packages: list[InstalledPackage] = field(default_factory=list)
    available_packages: list[AvailablePackage] = field(default_factory=list)
    available_updates: list[AvailableUpdate] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Check if no records were parsed at all."""
        return not (self.installed_packages or self.available_packages or self.available_updates)

    def summary(self) -> dict[str, int]:
        """Count records per section."""
        return {
            "installed": len(self.installed_packages),
            "available": len(self.available_packages),
            "updates": len(self.available_updates),
        }

    def find_installed(self, path: PackagePath) -> InstalledPackage | None:
        """Return the first installed package with the given path, if any."""
        for pkg in self.installed_packages:
            if pkg.path == path:
                return pkg
        return None

    def find_update(self, path: PackagePath) -> AvailableUpdate | None:
        """Return the first pending update for the given path, if any."""
        for update in self.available_updates:
            if update.path == path:
                return update
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        A generation timestamp is included so exported files can be
        told apart.
        """
        from sdkmgr import __version__

        return {
            "metadata": {
                "timestamp": datetime.now(UTC).isoformat(),
                "sdkmgr_version": __version__,
            },
            "installed_packages": [pkg.to_dict() for pkg in self.installed_packages],
            "available_packages": [pkg.to_dict() for pkg in self.available_packages],
            "available_updates": [update.to_dict() for update in self.available_updates],
            "summary": self.summary(),
        }
