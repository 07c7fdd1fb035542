"""
DriverKit - browser driver acquisition and resolution.

Finds an installed chromedriver in the driver cache directory, downloads one
with webdriver-manager when missing, and normalizes its location to a single
canonical path.

Usage:
    from driverkit import resolve_driver_path

    driver_path = resolve_driver_path()
"""

from .core.exceptions import (
    DriverKitError,
    FetchToolMissing,
    AcquisitionFailed,
    DriverUnavailable,
)
from .driver import (
    DriverLocator,
    DriverResolver,
    FetchTool,
    build_driver_environment,
    resolve_driver_path,
)

__version__ = "0.1.0"

__all__ = [
    "DriverKitError",
    "FetchToolMissing",
    "AcquisitionFailed",
    "DriverUnavailable",
    "DriverLocator",
    "DriverResolver",
    "FetchTool",
    "build_driver_environment",
    "resolve_driver_path",
    "__version__",
]
