"""Discovery of the sdkmanager executable.

Lookup order:
1. ``tool_path`` from the settings
2. The SDK root (``sdk_root`` setting, then $ANDROID_HOME, then
   $ANDROID_SDK_ROOT), probing the cmdline-tools and legacy tools layouts
3. ``sdkmanager`` on PATH
"""

import logging
import os
import shutil
import sys
from pathlib import Path

from sdkmgr.core.errors import ToolNotFoundError
from sdkmgr.core.settings import SdkManagerSettings

logger = logging.getLogger(__name__)

TOOL_NAME = "sdkmanager"

_SDK_ROOT_ENV_VARS: tuple[str, ...] = ("ANDROID_HOME", "ANDROID_SDK_ROOT")

# Tool locations relative to the SDK root
_TOOL_SUBDIRS: tuple[tuple[str, ...], ...] = (
    ("cmdline-tools", "latest", "bin"),
    ("tools", "bin"),
)


def _executable_name() -> str:
    return f"{TOOL_NAME}.bat" if sys.platform == "win32" else TOOL_NAME


def resolve_sdk_root(settings: SdkManagerSettings) -> Path | None:
    """Determine the SDK root directory to search for the tool.

    Args:
        settings: Settings that may carry an explicit SDK root.

    Returns:
        Existing SDK root directory, or None if none is configured.
    """
    if settings.sdk_root is not None:
        root = settings.sdk_root.expanduser()
        if root.is_dir():
            return root
        logger.debug("Configured sdk_root %s does not exist", root)

    for env_var in _SDK_ROOT_ENV_VARS:
        value = os.environ.get(env_var)
        if value and Path(value).is_dir():
            return Path(value)

    return None


def find_sdkmanager(settings: SdkManagerSettings) -> Path:
    """Locate the sdkmanager executable.

    Args:
        settings: Settings used for the lookup.

    Returns:
        Path to the sdkmanager executable.

    Raises:
        ToolNotFoundError: If the executable cannot be found.
    """
    if settings.tool_path is not None:
        tool_path = settings.tool_path.expanduser()
        if tool_path.is_file():
            return tool_path
        raise ToolNotFoundError(f"Configured sdkmanager not found: {tool_path}")

    exe = _executable_name()
    sdk_root = resolve_sdk_root(settings)
    if sdk_root is not None:
        for subdir in _TOOL_SUBDIRS:
            candidate = sdk_root.joinpath(*subdir, exe)
            if candidate.is_file():
                logger.debug("Found sdkmanager at %s", candidate)
                return candidate

    on_path = shutil.which(exe)
    if on_path is not None:
        return Path(on_path)

    msg = "Could not find sdkmanager; set tool_path or sdk_root, or export ANDROID_HOME"
    raise ToolNotFoundError(msg)


def is_available(settings: SdkManagerSettings) -> bool:
    """Check if sdkmanager can be located with the given settings."""
    try:
        find_sdkmanager(settings)
    except ToolNotFoundError:
        return False
    return True
