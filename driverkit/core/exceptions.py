"""
Centralized exception hierarchy for DriverKit.

This module defines the custom exceptions raised while locating and
acquiring browser driver binaries.
"""

from pathlib import Path
from typing import Optional, Union


# ============================================================================
# Base Exceptions
# ============================================================================


class DriverKitError(Exception):
    """Base exception for all DriverKit errors."""

    pass


# ============================================================================
# Driver-related Exceptions
# ============================================================================


class DriverError(DriverKitError):
    """Base exception for driver acquisition and resolution errors."""

    pass


class FetchToolMissing(DriverError):
    """Raised when the external fetch tool cannot be found or installed."""

    def __init__(self, tool_name: str, reason: str = ""):
        self.tool_name = tool_name
        self.reason = reason
        msg = f"Fetch tool not available: {tool_name}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class AcquisitionFailed(DriverError):
    """Raised when the fetch tool ran but exited with a non-zero code."""

    def __init__(self, exit_code: int, tool_name: str = "webdriver-manager"):
        self.exit_code = exit_code
        self.tool_name = tool_name
        super().__init__(
            f"Failed to download driver with {tool_name}. Exit code: {exit_code}"
        )


class DriverUnavailable(DriverError):
    """Raised when no usable driver executable can be produced."""

    def __init__(
        self, directory: Optional[Union[str, Path]] = None, reason: str = ""
    ):
        self.directory = Path(directory) if directory is not None else None
        self.reason = reason or "driver executable not found"
        msg = f"Driver unavailable: {self.reason}"
        if self.directory is not None:
            msg += f" in {self.directory}"
        super().__init__(msg)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(DriverKitError):
    """Configuration parsing or validation error."""

    pass
