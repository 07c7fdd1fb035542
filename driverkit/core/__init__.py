"""
Core functionality for DriverKit.

This package contains the foundational modules that the driver locator and
resolver depend on.
"""

from .directory import (
    get_driver_output_root,
    get_cache_dir,
    get_lock_dir,
    ensure_cache_structure,
    DirectoryError,
    DirectoryCreationError,
)

from .locking import (
    LockManager,
    LockTimeout,
)

from .platform import (
    PlatformInfo,
    detect_platform,
    is_supported_platform,
    clear_platform_cache,
)

from .platform_capabilities import FilesystemCapabilities

from .interfaces import ProcessResult, ProcessRunner

from .exceptions import (
    DriverKitError,
    DriverError,
    FetchToolMissing,
    AcquisitionFailed,
    DriverUnavailable,
    ConfigError,
)

__all__ = [
    "get_driver_output_root",
    "get_cache_dir",
    "get_lock_dir",
    "ensure_cache_structure",
    "DirectoryError",
    "DirectoryCreationError",
    "LockManager",
    "LockTimeout",
    "PlatformInfo",
    "detect_platform",
    "is_supported_platform",
    "clear_platform_cache",
    "FilesystemCapabilities",
    "ProcessResult",
    "ProcessRunner",
    "DriverKitError",
    "DriverError",
    "FetchToolMissing",
    "AcquisitionFailed",
    "DriverUnavailable",
    "ConfigError",
]
