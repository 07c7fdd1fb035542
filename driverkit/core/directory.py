"""
Directory structure management for DriverKit.

Directory Structure:
    Driver output root (<project-root>/driver/ by default):
        - chrome/         : Driver cache directory owned by the resolver
        - .lock/          : Cross-process lock files
"""

from pathlib import Path
from typing import Dict, Optional, Union

from .exceptions import DriverKitError
from .filesystem import ensure_directory

DEFAULT_OUTPUT_DIR = "driver"
DEFAULT_BROWSER = "chrome"
LOCK_DIR_NAME = ".lock"


class DirectoryError(DriverKitError):
    """Base exception for directory-related errors."""

    pass


class DirectoryCreationError(DirectoryError):
    """Raised when directory creation fails."""

    pass


def get_driver_output_root(
    project_root: Optional[Path] = None,
    output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
) -> Path:
    """
    Get the absolute driver output root.

    Args:
        project_root: Base for a relative ``output_dir`` (default: cwd)
        output_dir: Output directory, absolute or relative to project_root

    Example:
        >>> get_driver_output_root(Path('/work/app'))
        PosixPath('/work/app/driver')
    """
    output_dir = Path(output_dir)
    if output_dir.is_absolute():
        return output_dir
    return (Path(project_root) if project_root else Path.cwd()).absolute() / output_dir


def get_cache_dir(output_root: Path, browser: str = DEFAULT_BROWSER) -> Path:
    """Get the per-browser driver cache directory (``<root>/chrome``)."""
    return Path(output_root) / browser


def get_lock_dir(output_root: Path) -> Path:
    """Get the directory holding lock files for an output root."""
    return Path(output_root) / LOCK_DIR_NAME


def ensure_cache_structure(
    output_root: Path, browser: str = DEFAULT_BROWSER
) -> Dict[str, Path]:
    """
    Create the output root and its browser subfolder (idempotent).

    Returns:
        Dictionary with 'root' and 'cache' paths

    Raises:
        DirectoryCreationError: If a directory cannot be created
    """
    output_root = Path(output_root)
    cache_dir = get_cache_dir(output_root, browser)

    try:
        ensure_directory(cache_dir)
    except OSError as e:
        raise DirectoryCreationError(
            f"Failed to create driver cache directory {cache_dir}: {e}"
        ) from e

    return {"root": output_root, "cache": cache_dir}


__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_BROWSER",
    "DirectoryError",
    "DirectoryCreationError",
    "get_driver_output_root",
    "get_cache_dir",
    "get_lock_dir",
    "ensure_cache_structure",
]
