"""
Configuration management for DriverKit.

Loads optional ``driverkit.yaml`` files into typed configuration objects.
"""

from .parser import (
    CONFIG_FILE_NAME,
    DriverConfig,
    FetchToolConfig,
    LockingConfig,
    DriverKitConfig,
    parse_config,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DriverConfig",
    "FetchToolConfig",
    "LockingConfig",
    "DriverKitConfig",
    "parse_config",
    "load_config",
]
