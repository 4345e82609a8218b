"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def mock_listing_output() -> str:
    """Sample ``sdkmanager --list --verbose`` output for testing."""
    return """Loading package information...
Info: Parsing /sdk/platforms/android-30/package.xml
Installed packages:
--------------------------------------
build-tools;30.0.3
    Description:        Android SDK Build-Tools 30.0.3
    Version:            30.0.3
    Installed Location: /sdk/build-tools/30.0.3

platforms;android-30
    Description:        Android SDK Platform 30
    Version:            3
    Installed Location: /sdk/platforms/android-30

Available Packages:
--------------------------------------
add-ons;addon-google_apis-google-24
    Description:        Google APIs
    Version:            1
    Dependencies:
        patcher;v4

platforms;android-34
    Description:        Android SDK Platform 34
    Version:            2

Available Updates:
--------------------------------------
build-tools;30.0.3
    Installed Version: 30.0.3
    Available Version: 34.0.0
platforms;android-30
    Installed Version: 3
    Available Version: 4
"""


@pytest.fixture
def mock_table_header_output() -> str:
    """Installed section with a table header, as printed by newer tools."""
    return """Installed packages:
  Path   | Version | Description | Location
  -------|---------|-------------|--------
platforms;android-30
      Description:    Android SDK Platform 30
      Version:        3
      Installed Location: /sdk/platforms/android-30

Available Packages:
"""


@pytest.fixture
def mock_install_output() -> list[str]:
    """Sample output of a mutating sdkmanager command."""
    return [
        "License android-sdk-license:",
        "Accept? (y/N): Info: Downloading platforms;android-34",
        "Info: Installing platforms;android-34 in /sdk/platforms/android-34",
        "Warning: Observed package id 'emulator' in inconsistent location",
        "[=======================================] 100% Unzipping...",
        "INFO: Installed platforms;android-34",
    ]


@pytest.fixture
def fake_sdk_root(tmp_path: Path) -> Path:
    """Create an SDK root containing a cmdline-tools sdkmanager."""
    bin_dir = tmp_path / "sdk" / "cmdline-tools" / "latest" / "bin"
    bin_dir.mkdir(parents=True)
    tool = bin_dir / "sdkmanager"
    tool.write_text("#!/bin/sh\n")
    tool.chmod(0o755)
    return tmp_path / "sdk"
