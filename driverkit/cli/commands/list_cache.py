"""
List command implementation.

Shows every entry of the driver cache directory with its classification.
"""

import logging

from driverkit.cli.utils import cache_dir_for, load_cli_config
from driverkit.driver.locator import DriverLocator

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list command.

    Returns:
        Exit code (0 for success)
    """
    config = load_cli_config(args)
    cache_dir = cache_dir_for(config)
    locator = DriverLocator()

    entries = locator.scan(cache_dir)
    print(f"Files in {cache_dir}:")
    if not entries:
        print("  (empty)")
        return 0

    width = max(len(entry.kind.value) for entry in entries)
    for entry in sorted(entries, key=lambda e: e.name):
        suffix = "/" if entry.path.is_dir() and not entry.path.is_symlink() else ""
        target = ""
        if entry.path.is_symlink():
            target = f" -> {entry.path.resolve().name}"
        print(f"  {entry.kind.value:<{width}}  {entry.name}{suffix}{target}")

    return 0
