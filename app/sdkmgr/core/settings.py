"""sdkmanager invocation settings.

Defines the settings model shared by listing and mutating operations,
and the translation of those settings into sdkmanager command-line
options.
"""

from enum import IntEnum
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

ProxyType = Literal["none", "http", "socks"]


class Channel(IntEnum):
    """Update channel understood by ``sdkmanager --channel``."""

    STABLE = 0
    BETA = 1
    DEV = 2
    CANARY = 3


class SdkManagerSettings(BaseModel):
    """Settings for invoking sdkmanager.

    Attributes:
        tool_path: Explicit path to the sdkmanager executable.
        sdk_root: Android SDK root directory passed as ``--sdk_root``.
        channel: Update channel to use.
        include_obsolete: Include obsolete packages in listings and updates.
        no_https: Force plain HTTP connections.
        proxy_type: Proxy protocol ("none", "http" or "socks").
        proxy_host: Proxy host name.
        proxy_port: Proxy port (0 means unset).
        fail_on_error: Report mutating operations as failed when the tool
            prints "Error:" lines.
    """

    model_config = ConfigDict(extra="forbid")

    tool_path: Annotated[
        Path | None,
        Field(description="Path to the sdkmanager executable (None = discover)"),
    ] = None
    sdk_root: Annotated[
        Path | None,
        Field(description="Android SDK root directory"),
    ] = None
    channel: Annotated[
        Channel,
        Field(description="Update channel (0=stable, 1=beta, 2=dev, 3=canary)"),
    ] = Channel.STABLE
    include_obsolete: bool = False
    no_https: bool = False
    proxy_type: Annotated[
        ProxyType,
        Field(description="Proxy protocol"),
    ] = "none"
    proxy_host: str | None = None
    proxy_port: Annotated[
        int,
        Field(ge=0, le=65535, description="Proxy port (0 = unset)"),
    ] = 0
    fail_on_error: Annotated[
        bool,
        Field(description="Treat 'Error:' output of mutating commands as failure"),
    ] = False


def build_standard_options(settings: SdkManagerSettings) -> list[str]:
    """Build the options appended to every sdkmanager invocation.

    Arguments are returned as separate argv entries, so values are not
    shell-quoted.

    Args:
        settings: Settings to translate.

    Returns:
        List of command-line options.
    """
    args = ["--verbose"]

    if settings.channel != Channel.STABLE:
        args.append(f"--channel={int(settings.channel)}")

    if settings.sdk_root is not None:
        args.append(f"--sdk_root={settings.sdk_root.expanduser().resolve()}")

    if settings.include_obsolete:
        args.append("--include_obsolete")

    if settings.no_https:
        args.append("--no_https")

    if settings.proxy_type != "none":
        args.append(f"--proxy={settings.proxy_type}")

        if settings.proxy_host:
            args.append(f"--proxy_host={settings.proxy_host}")

        if settings.proxy_port > 0:
            args.append(f"--proxy_port={settings.proxy_port}")

    return args
