"""Package models for sdkmanager listings.

This module defines the immutable records produced when parsing
``sdkmanager --list`` output: installed packages, packages offered by
the remote repository, and pending updates.
"""

from dataclasses import dataclass
from typing import Any

# SDK component path, e.g. 'platforms;android-30' or 'build-tools;34.0.0'
PackagePath = str


def _require_path(path: PackagePath) -> None:
    if not path:
        msg = "Package path cannot be empty"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class InstalledPackage:
    """A package already present in the SDK root.

    Attributes:
        path: SDK component path (e.g., 'platforms;android-30').
        description: Human-readable description reported by the tool.
        version: Installed version string.
        location: Directory the package is installed in.
    """

    path: PackagePath
    description: str
    version: str
    location: str

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        _require_path(self.path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "description": self.description,
            "version": self.version,
            "location": self.location,
        }


@dataclass(frozen=True, slots=True)
class AvailablePackage:
    """A package offered by the remote repository.

    Attributes:
        path: SDK component path.
        description: Human-readable description reported by the tool.
        version: Latest version offered.
    """

    path: PackagePath
    description: str
    version: str

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        _require_path(self.path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "description": self.description,
            "version": self.version,
        }


@dataclass(frozen=True, slots=True)
class AvailableUpdate:
    """An installed package for which a newer version is offered.

    Attributes:
        path: SDK component path.
        installed_version: Version currently installed.
        available_version: Version offered by the repository.
    """

    path: PackagePath
    installed_version: str
    available_version: str

    def __post_init__(self) -> None:
        """Validate update data after initialization."""
        _require_path(self.path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "installed_version": self.installed_version,
            "available_version": self.available_version,
        }
