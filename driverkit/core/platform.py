"""
Platform detection for DriverKit.

This module detects the current platform (OS and architecture) so the driver
locator can pick the right executable name and filesystem behaviour.

Usage:
    from driverkit.core.platform import detect_platform

    platform_info = detect_platform()
    print(f"Platform string: {platform_info.platform_string()}")
"""

import functools
import platform
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PlatformInfo:
    """
    Platform information.

    Attributes:
        os: Operating system ('windows', 'linux', 'macos')
        arch: CPU architecture ('x64', 'arm64', 'x86', 'arm')
        os_version: OS version string (e.g., '10.0.19041', '6.5.0', '14.1')
    """

    os: str
    arch: str
    os_version: str = "unknown"

    def platform_string(self) -> str:
        """
        Get canonical platform string (e.g., 'linux-x64', 'macos-arm64').

        Example:
            >>> PlatformInfo('linux', 'x64').platform_string()
            'linux-x64'
        """
        return f"{self.os}-{self.arch}"

    @property
    def is_windows(self) -> bool:
        return self.os == "windows"

    def __str__(self) -> str:
        return f"{self.os}-{self.arch} v{self.os_version}"


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current platform information.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformInfo instance with detected platform information
    """
    return PlatformInfo(
        os=_detect_os(), arch=_detect_architecture(), os_version=_detect_os_version()
    )


def _detect_os() -> str:
    """
    Detect operating system.

    Returns:
        Normalized OS name: 'windows', 'linux', 'macos'

    Raises:
        RuntimeError: If OS is not supported
    """
    system = platform.system().lower()

    if system == "windows" or system.startswith(("cygwin", "msys")):
        return "windows"
    elif system == "linux":
        return "linux"
    elif system == "darwin":
        return "macos"
    else:
        raise RuntimeError(f"Unsupported operating system: {system}")


def _detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        Normalized architecture: 'x64', 'arm64', 'x86', 'arm'
    """
    machine = platform.machine().lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("aarch64", "arm64"):
        return "arm64"
    elif machine in ("i386", "i686", "x86"):
        return "x86"
    elif machine.startswith("arm"):
        return "arm"
    else:
        # Return original for unknown architectures
        return machine


def _detect_os_version() -> str:
    system = platform.system().lower()

    if system == "darwin":
        version = platform.mac_ver()[0]
        return version if version else "unknown"
    elif system == "linux":
        return platform.release()
    else:
        return platform.version() or "unknown"


def is_supported_platform(info: Optional[PlatformInfo] = None) -> bool:
    """
    Check if a driver can be resolved on the platform.

    Args:
        info: PlatformInfo to check. If None, detects current platform.

    Returns:
        True if platform is supported
    """
    if info is None:
        info = detect_platform()

    return info.os in ("windows", "linux", "macos") and info.arch in (
        "x64",
        "arm64",
        "x86",
        "arm",
    )


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to detect_platform() to re-detect.
    """
    detect_platform.cache_clear()


__all__ = [
    "PlatformInfo",
    "detect_platform",
    "is_supported_platform",
    "clear_platform_cache",
]
