"""Data models for sdkmgr.

This module exports the core data structures used throughout the application.
"""

from sdkmgr.models.listing import ListingResult
from sdkmgr.models.package import (
    AvailablePackage,
    AvailableUpdate,
    InstalledPackage,
    PackagePath,
)

__all__ = [
    "AvailablePackage",
    "AvailableUpdate",
    "InstalledPackage",
    "ListingResult",
    "PackagePath",
]
