"""
Unit tests for the platform detection module.

Tests cover:
- PlatformInfo dataclass methods
- OS detection with mocking
- Architecture detection and normalization
- OS version detection
- Platform validation
- Cache behavior
"""

import pytest
from unittest.mock import patch

from driverkit.core.platform import (
    PlatformInfo,
    clear_platform_cache,
    detect_platform,
    is_supported_platform,
    _detect_architecture,
    _detect_os,
    _detect_os_version,
)


class TestPlatformInfo:
    """Tests for PlatformInfo dataclass."""

    def test_platform_string_linux_x64(self):
        info = PlatformInfo("linux", "x64", "5.15")
        assert info.platform_string() == "linux-x64"

    def test_platform_string_macos_arm64(self):
        info = PlatformInfo("macos", "arm64", "14.1")
        assert info.platform_string() == "macos-arm64"

    def test_is_windows(self):
        assert PlatformInfo("windows", "x64").is_windows is True
        assert PlatformInfo("linux", "x64").is_windows is False

    def test_str(self):
        assert str(PlatformInfo("linux", "x64", "6.5.0")) == "linux-x64 v6.5.0"

    def test_default_version(self):
        assert PlatformInfo("linux", "x64").os_version == "unknown"

    def test_hashable(self):
        assert len({PlatformInfo("linux", "x64"), PlatformInfo("linux", "x64")}) == 1


class TestDetectOS:
    """Tests for OS detection."""

    @pytest.mark.parametrize(
        "system,expected",
        [
            ("Windows", "windows"),
            ("Linux", "linux"),
            ("Darwin", "macos"),
            ("CYGWIN_NT-10.0", "windows"),
            ("MSYS_NT-10.0", "windows"),
        ],
    )
    def test_known_systems(self, system, expected):
        with patch("platform.system", return_value=system):
            assert _detect_os() == expected

    def test_unsupported_system(self):
        with patch("platform.system", return_value="SunOS"):
            with pytest.raises(RuntimeError, match="Unsupported operating system"):
                _detect_os()


class TestDetectArchitecture:
    """Tests for architecture normalization."""

    @pytest.mark.parametrize(
        "machine,expected",
        [
            ("x86_64", "x64"),
            ("AMD64", "x64"),
            ("aarch64", "arm64"),
            ("arm64", "arm64"),
            ("i686", "x86"),
            ("armv7l", "arm"),
            ("riscv64", "riscv64"),
        ],
    )
    def test_normalization(self, machine, expected):
        with patch("platform.machine", return_value=machine):
            assert _detect_architecture() == expected


class TestDetectOSVersion:
    """Tests for OS version detection."""

    def test_linux_uses_release(self):
        with patch("platform.system", return_value="Linux"), patch(
            "platform.release", return_value="6.5.0-14-generic"
        ):
            assert _detect_os_version() == "6.5.0-14-generic"

    def test_macos_uses_mac_ver(self):
        with patch("platform.system", return_value="Darwin"), patch(
            "platform.mac_ver", return_value=("14.1", ("", "", ""), "arm64")
        ):
            assert _detect_os_version() == "14.1"

    def test_macos_empty_version(self):
        with patch("platform.system", return_value="Darwin"), patch(
            "platform.mac_ver", return_value=("", ("", "", ""), "")
        ):
            assert _detect_os_version() == "unknown"

    def test_windows_uses_version(self):
        with patch("platform.system", return_value="Windows"), patch(
            "platform.version", return_value="10.0.19041"
        ):
            assert _detect_os_version() == "10.0.19041"


class TestDetectPlatform:
    """Tests for detect_platform caching."""

    def setup_method(self):
        clear_platform_cache()

    def teardown_method(self):
        clear_platform_cache()

    def test_cached(self):
        assert detect_platform() is detect_platform()

    def test_clear_cache(self):
        with patch("driverkit.core.platform._detect_os", return_value="linux"), patch(
            "driverkit.core.platform._detect_architecture", return_value="x64"
        ), patch("driverkit.core.platform._detect_os_version", return_value="1"):
            first = detect_platform()

        clear_platform_cache()

        with patch("driverkit.core.platform._detect_os", return_value="macos"), patch(
            "driverkit.core.platform._detect_architecture", return_value="arm64"
        ), patch("driverkit.core.platform._detect_os_version", return_value="14"):
            second = detect_platform()

        assert first.platform_string() == "linux-x64"
        assert second.platform_string() == "macos-arm64"


class TestIsSupportedPlatform:
    def test_supported(self):
        assert is_supported_platform(PlatformInfo("linux", "arm64")) is True
        assert is_supported_platform(PlatformInfo("windows", "x86")) is True

    def test_unsupported(self):
        assert is_supported_platform(PlatformInfo("linux", "riscv64")) is False
        assert is_supported_platform(PlatformInfo("freebsd", "x64")) is False
