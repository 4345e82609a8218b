"""Package scanners.

This module exports the scanner used to query the SDK package inventory.
"""

from sdkmgr.scanners.sdkmanager import SdkManagerScanner, list_packages

__all__ = ["SdkManagerScanner", "list_packages"]
