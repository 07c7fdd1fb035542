"""
Locate command implementation.

Looks for the driver in the cache directory without downloading anything.
"""

import logging

from driverkit.cli.utils import cache_dir_for, load_cli_config, print_error
from driverkit.driver.locator import DriverLocator

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the locate command.

    Returns:
        0 if a driver was found, 1 otherwise
    """
    config = load_cli_config(args)
    cache_dir = cache_dir_for(config)

    driver_path = DriverLocator().locate(cache_dir)
    if driver_path is None:
        print_error(
            f"No driver found in {cache_dir}",
            'Run "driverkit resolve" to download one.',
        )
        return 1

    print(driver_path)
    return 0
