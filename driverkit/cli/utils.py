"""
Shared utilities for CLI commands.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from driverkit.config.parser import DriverKitConfig, load_config
from driverkit.core.directory import get_cache_dir, get_driver_output_root

logger = logging.getLogger(__name__)


def load_cli_config(args) -> DriverKitConfig:
    """
    Load configuration for a command from ``--config``/``--project-root``.

    Raises:
        ConfigError: If the configuration file is missing or invalid
    """
    project_root = Path(args.project_root).resolve()
    config_file: Optional[Path] = Path(args.config) if args.config else None
    return load_config(config_file, project_root)


def cache_dir_for(config: DriverKitConfig) -> Path:
    """Get the driver cache directory described by a configuration."""
    output_root = get_driver_output_root(
        config.project_root, config.driver.output_dir
    )
    return get_cache_dir(output_root, config.driver.browser)


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)
