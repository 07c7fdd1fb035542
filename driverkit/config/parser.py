"""YAML configuration parser for DriverKit.

This module provides parsing and validation for driverkit.yaml configuration files.

Example driverkit.yaml:

    driver:
      output_dir: driver
      browser: chrome
    fetch_tool:
      name: webdriver-manager
      tool_dir: node_modules/.bin
      installer: npm
    locking:
      enabled: true
      timeout: 300
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..core.directory import DEFAULT_BROWSER, DEFAULT_OUTPUT_DIR
from ..core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "driverkit.yaml"


@dataclass
class DriverConfig:
    """Where drivers are cached."""

    output_dir: str = DEFAULT_OUTPUT_DIR
    browser: str = DEFAULT_BROWSER


@dataclass
class FetchToolConfig:
    """External fetch tool settings."""

    name: str = "webdriver-manager"
    tool_dir: str = "node_modules/.bin"
    installer: str = "npm"


@dataclass
class LockingConfig:
    """Cross-process locking around driver acquisition."""

    enabled: bool = True
    timeout: float = 300


@dataclass
class DriverKitConfig:
    """Complete DriverKit configuration."""

    driver: DriverConfig = field(default_factory=DriverConfig)
    fetch_tool: FetchToolConfig = field(default_factory=FetchToolConfig)
    locking: LockingConfig = field(default_factory=LockingConfig)
    project_root: Path = field(default_factory=Path.cwd)


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"Section '{name}' must be a mapping")
    return value


def _get(section: Dict[str, Any], key: str, default: Any, expected: type, where: str):
    value = section.get(key, default)
    if expected is float and isinstance(value, int) and not isinstance(value, bool):
        value = float(value)
    if not isinstance(value, expected) or (
        expected is not bool and isinstance(value, bool)
    ):
        raise ConfigError(
            f"'{where}.{key}' must be of type {expected.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def _is_plain_name(name: str) -> bool:
    # Must stay a single component below the output root on every platform
    separators = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())
    if not name or name in (".", ".."):
        return False
    return not any(sep in name for sep in separators)


def parse_config(
    data: Optional[Dict[str, Any]], project_root: Optional[Path] = None
) -> DriverKitConfig:
    """
    Build a DriverKitConfig from a parsed YAML mapping.

    Missing sections and keys take their defaults; unknown keys are ignored.

    Raises:
        ConfigError: If a section or value has the wrong type
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a mapping")

    driver = _section(data, "driver")
    fetch_tool = _section(data, "fetch_tool")
    locking = _section(data, "locking")

    defaults_driver = DriverConfig()
    defaults_tool = FetchToolConfig()
    defaults_lock = LockingConfig()

    config = DriverKitConfig(
        driver=DriverConfig(
            output_dir=_get(
                driver, "output_dir", defaults_driver.output_dir, str, "driver"
            ),
            browser=_get(driver, "browser", defaults_driver.browser, str, "driver"),
        ),
        fetch_tool=FetchToolConfig(
            name=_get(fetch_tool, "name", defaults_tool.name, str, "fetch_tool"),
            tool_dir=_get(
                fetch_tool, "tool_dir", defaults_tool.tool_dir, str, "fetch_tool"
            ),
            installer=_get(
                fetch_tool, "installer", defaults_tool.installer, str, "fetch_tool"
            ),
        ),
        locking=LockingConfig(
            enabled=_get(locking, "enabled", defaults_lock.enabled, bool, "locking"),
            timeout=_get(locking, "timeout", defaults_lock.timeout, float, "locking"),
        ),
        project_root=Path(project_root) if project_root else Path.cwd(),
    )

    if config.locking.timeout < 0:
        raise ConfigError("'locking.timeout' must not be negative")
    if not _is_plain_name(config.driver.browser):
        raise ConfigError("'driver.browser' must be a plain directory name")

    return config


def load_config(
    config_file: Optional[Path] = None, project_root: Optional[Path] = None
) -> DriverKitConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_file: Explicit file; if None, ``<project_root>/driverkit.yaml``
            is used when it exists
        project_root: Project root (default: current directory)

    Returns:
        DriverKitConfig (defaults when no file is present)

    Raises:
        ConfigError: If an explicit file is missing or the YAML is invalid
    """
    project_root = Path(project_root) if project_root else Path.cwd()

    if config_file is None:
        config_file = project_root / CONFIG_FILE_NAME
        if not config_file.exists():
            logger.debug(f"Config file not found (optional): {config_file}")
            return parse_config({}, project_root)
    elif not config_file.exists():
        raise ConfigError(f"Configuration file not found: {config_file}")

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML: {e}")
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    return parse_config(data, project_root)


__all__ = [
    "CONFIG_FILE_NAME",
    "DriverConfig",
    "FetchToolConfig",
    "LockingConfig",
    "DriverKitConfig",
    "parse_config",
    "load_config",
]
