"""Unit tests for SdkManagerSettings and option building."""

from pathlib import Path

import pytest
from pydantic import ValidationError
from sdkmgr.core.settings import Channel, SdkManagerSettings, build_standard_options


class TestSdkManagerSettings:
    """Tests for the SdkManagerSettings model."""

    def test_default_values(self) -> None:
        """Settings have correct default values."""
        settings = SdkManagerSettings()

        assert settings.tool_path is None
        assert settings.sdk_root is None
        assert settings.channel == Channel.STABLE
        assert settings.include_obsolete is False
        assert settings.no_https is False
        assert settings.proxy_type == "none"
        assert settings.proxy_host is None
        assert settings.proxy_port == 0
        assert settings.fail_on_error is False

    def test_channel_from_int(self) -> None:
        """Channels can be given as their numeric value."""
        assert SdkManagerSettings(channel=3).channel == Channel.CANARY  # type: ignore[arg-type]

    def test_invalid_channel(self) -> None:
        """Unknown channels are rejected."""
        with pytest.raises(ValidationError):
            SdkManagerSettings(channel=7)  # type: ignore[arg-type]

    def test_invalid_proxy_type(self) -> None:
        """Unknown proxy types are rejected."""
        with pytest.raises(ValidationError):
            SdkManagerSettings(proxy_type="ftp")  # type: ignore[arg-type]

    @pytest.mark.parametrize("port", [-1, 65536])
    def test_proxy_port_range(self, port: int) -> None:
        """Proxy ports outside 0-65535 are rejected."""
        with pytest.raises(ValidationError):
            SdkManagerSettings(proxy_port=port)

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            SdkManagerSettings(android_home="/sdk")  # type: ignore[call-arg]


class TestBuildStandardOptions:
    """Tests for build_standard_options."""

    def test_defaults_only_verbose(self) -> None:
        """Default settings only add --verbose."""
        assert build_standard_options(SdkManagerSettings()) == ["--verbose"]

    def test_channel(self) -> None:
        """Non-stable channels are passed by number."""
        options = build_standard_options(SdkManagerSettings(channel=Channel.DEV))

        assert "--channel=2" in options

    def test_sdk_root_is_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Relative SDK roots are made absolute."""
        monkeypatch.chdir(tmp_path)

        options = build_standard_options(SdkManagerSettings(sdk_root=Path("android-sdk")))

        assert f"--sdk_root={(tmp_path / 'android-sdk').resolve()}" in options

    def test_flags(self) -> None:
        """Boolean flags are appended in a fixed order."""
        settings = SdkManagerSettings(include_obsolete=True, no_https=True)

        assert build_standard_options(settings) == [
            "--verbose",
            "--include_obsolete",
            "--no_https",
        ]

    def test_proxy_options(self) -> None:
        """Proxy host and port follow the proxy type."""
        settings = SdkManagerSettings(
            proxy_type="http",
            proxy_host="proxy.example.com",
            proxy_port=3128,
        )

        assert build_standard_options(settings) == [
            "--verbose",
            "--proxy=http",
            "--proxy_host=proxy.example.com",
            "--proxy_port=3128",
        ]

    def test_proxy_host_ignored_without_type(self) -> None:
        """Proxy details are ignored when no proxy type is set."""
        settings = SdkManagerSettings(proxy_host="proxy.example.com", proxy_port=3128)

        assert build_standard_options(settings) == ["--verbose"]

    def test_proxy_without_port(self) -> None:
        """A zero port is not passed."""
        settings = SdkManagerSettings(proxy_type="socks", proxy_host="localhost")

        assert build_standard_options(settings) == [
            "--verbose",
            "--proxy=socks",
            "--proxy_host=localhost",
        ]
