"""
Browser driver acquisition and resolution.

This package locates the chromedriver executable in the driver cache,
normalizes version-qualified names to the canonical name, and downloads the
driver with the external fetch tool when it is missing.
"""

from .locator import (
    DEFAULT_DRIVER_NAME,
    EntryKind,
    CandidateEntry,
    DriverLocator,
    locate_driver,
)
from .fetch_tool import FetchTool
from .resolver import DriverResolver, resolve_driver_path
from .environment import DRIVER_PATH_VARIABLE, build_driver_environment

__all__ = [
    "DEFAULT_DRIVER_NAME",
    "EntryKind",
    "CandidateEntry",
    "DriverLocator",
    "locate_driver",
    "FetchTool",
    "DriverResolver",
    "resolve_driver_path",
    "DRIVER_PATH_VARIABLE",
    "build_driver_environment",
]
