"""sdkmgr - typed wrapper around the Android SDK command-line package manager."""

__version__ = "0.1.0"
