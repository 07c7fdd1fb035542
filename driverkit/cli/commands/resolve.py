"""
Resolve command implementation.

Prints the canonical driver path, downloading the driver first when the
cache holds none.
"""

import logging
import os
import shlex

from driverkit.cli.utils import load_cli_config
from driverkit.driver.environment import build_driver_environment
from driverkit.driver.resolver import resolve_driver_path

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the resolve command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_cli_config(args)
    driver_path = resolve_driver_path(config=config)

    if args.env:
        env = build_driver_environment(driver_path)
        for name in ("CHROME_DRIVER_PATH", "PATH"):
            if os.name == "nt":
                print(f'set "{name}={env[name]}"')
            else:
                print(f"export {name}={shlex.quote(env[name])}")
    else:
        print(driver_path)

    return 0
