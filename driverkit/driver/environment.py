"""
Process environment for launching a browser against a resolved driver.

The browser launcher passes this environment to the browser process so the
automation layer finds the driver through ``CHROME_DRIVER_PATH`` or ``PATH``.
"""

import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

DRIVER_PATH_VARIABLE = "CHROME_DRIVER_PATH"


def build_driver_environment(
    driver_path: Union[str, Path], base_env: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """
    Build an environment exposing the driver to child processes.

    Args:
        driver_path: Canonical driver path returned by the resolver
        base_env: Environment to extend (default: ``os.environ``)

    Returns:
        New environment dict with ``CHROME_DRIVER_PATH`` set and the driver's
        directory prepended to ``PATH``

    Example:
        >>> env = build_driver_environment('/app/driver/chrome/chromedriver', {})
        >>> env['PATH']
        '/app/driver/chrome'
    """
    env = dict(os.environ if base_env is None else base_env)
    driver_dir = str(Path(driver_path).parent)

    env[DRIVER_PATH_VARIABLE] = str(driver_path)
    existing = env.get("PATH", "")
    env["PATH"] = f"{driver_dir}{os.pathsep}{existing}" if existing else driver_dir

    return env


__all__ = [
    "DRIVER_PATH_VARIABLE",
    "build_driver_environment",
]
