"""Platform capability matrix.

This module provides a centralized database of the filesystem capabilities
the driver locator relies on, plus the ``FilesystemCapabilities`` value
object that is injected into the locator.

Capabilities:
- symlinks: Whether unprivileged processes can create file symlinks
- supports_execute_bit: Whether files carry a POSIX execute permission
- executable_extension: Suffix of native executables
- versioned_names_invocable: Whether a version-qualified driver file can be
  launched as-is when it cannot be placed under its canonical name
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .platform import PlatformInfo, detect_platform

_UNIX = {
    "symlinks": True,
    "supports_execute_bit": True,
    "executable_extension": "",
    "versioned_names_invocable": False,
}

_WINDOWS = {
    "symlinks": False,  # Requires developer mode or admin privileges
    "supports_execute_bit": False,
    "executable_extension": ".exe",
    "versioned_names_invocable": True,
}

# Platform capability database
PLATFORM_CAPABILITIES: Dict[str, Dict[str, Any]] = {
    "linux-x64": dict(_UNIX),
    "linux-arm64": dict(_UNIX),
    "linux-x86": dict(_UNIX),
    "linux-arm": dict(_UNIX),
    "macos-x64": dict(_UNIX),
    "macos-arm64": dict(_UNIX),
    "windows-x64": dict(_WINDOWS),
    "windows-x86": dict(_WINDOWS),
    "windows-arm64": dict(_WINDOWS),
}

# Used when the architecture is not in the matrix
_OS_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "linux": _UNIX,
    "macos": _UNIX,
    "windows": _WINDOWS,
}


def get_platform_capabilities(platform: PlatformInfo) -> Dict[str, Any]:
    """
    Get all capabilities for a platform.

    Architectures missing from the matrix use their OS defaults. Returns an
    empty dict for unknown operating systems.

    Example:
        >>> get_platform_capabilities(PlatformInfo('windows', 'x64'))['symlinks']
        False
    """
    caps = PLATFORM_CAPABILITIES.get(platform.platform_string())
    if caps is None:
        caps = _OS_DEFAULTS.get(platform.os, {})
    return dict(caps)


@dataclass(frozen=True)
class FilesystemCapabilities:
    """
    Filesystem behaviour the driver locator branches on.

    Tests construct this directly to exercise the link and no-link code
    paths on any host.

    Attributes:
        supports_links: Create symlinks when repairing version-qualified names
        supports_execute_bit: chmod located drivers to 0o755
        executable_extension: Suffix appended to the canonical driver name
        versioned_names_invocable: A version-qualified file may be returned
            unmodified when neither linking nor copying succeeds
    """

    supports_links: bool
    supports_execute_bit: bool
    executable_extension: str = ""
    versioned_names_invocable: bool = False

    @classmethod
    def for_platform(
        cls, platform: Optional[PlatformInfo] = None
    ) -> "FilesystemCapabilities":
        """
        Build capabilities for a platform (auto-detected if None).

        Raises:
            ValueError: If the platform's OS is unknown
        """
        platform = platform or detect_platform()
        caps = get_platform_capabilities(platform)
        if not caps:
            raise ValueError(f"No filesystem capabilities for platform: {platform}")

        return cls(
            supports_links=bool(caps["symlinks"]),
            supports_execute_bit=bool(caps["supports_execute_bit"]),
            executable_extension=caps["executable_extension"],
            versioned_names_invocable=bool(caps["versioned_names_invocable"]),
        )
