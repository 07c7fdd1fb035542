"""
Cross-platform file system utilities for DriverKit.

This module provides the file operations used to place a driver binary
under its canonical name:
- Symlink creation with stale-entry replacement
- File copy fallback
- Executable permission handling
- Directory helpers (idempotent creation, emptiness check)
"""

import os
import shutil
import stat
from pathlib import Path
from typing import Union


# ============================================================================
# Error Handling
# ============================================================================


class FilesystemError(Exception):
    """Base exception for filesystem operations."""

    pass


class LinkCreationError(FilesystemError):
    """Failed to create a symbolic link."""

    pass


class FileCopyError(FilesystemError):
    """Failed to copy a file into place."""

    pass


# ============================================================================
# Directory Utilities
# ============================================================================


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists (idempotent).

    Args:
        path: Directory path

    Returns:
        Path object (resolved)

    Example:
        >>> ensure_directory('/tmp/driver/chrome')
        PosixPath('/tmp/driver/chrome')
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path.resolve()


def is_empty_directory(path: Union[str, Path]) -> bool:
    """
    Check if a directory is empty.

    Returns:
        True if directory exists and is empty
    """
    path = Path(path)

    if not path.is_dir():
        return False

    return not any(path.iterdir())


# ============================================================================
# File Placement
# ============================================================================


def remove_stale_entry(path: Union[str, Path]) -> bool:
    """
    Remove a file or (possibly dangling) symlink occupying ``path``.

    Args:
        path: Path to clear

    Returns:
        True if something was removed, False if the path was free

    Raises:
        FilesystemError: If the path is a real directory
    """
    path = Path(path)

    if path.is_symlink():
        path.unlink()
        return True

    if not path.exists():
        return False

    if path.is_dir():
        # Don't automatically delete directories
        raise FilesystemError(
            f"Path exists as a directory: {path}. "
            "Please remove it manually if you want to place a file there."
        )

    path.unlink()
    return True


def create_file_link(source: Union[str, Path], link_path: Union[str, Path]) -> Path:
    """
    Create a symbolic link at ``link_path`` pointing to the file ``source``.

    Links between entries of the same directory use a relative target so the
    directory can be moved without breaking them. Any stale file or link at
    ``link_path`` is replaced.

    Args:
        source: Existing file the link points to
        link_path: Location of the link

    Returns:
        The link path

    Raises:
        LinkCreationError: If the link cannot be created
    """
    source = Path(source)
    link_path = Path(link_path)

    if source.parent.resolve() == link_path.parent.resolve():
        target: Union[str, Path] = source.name
    else:
        target = source.resolve()

    try:
        remove_stale_entry(link_path)
        os.symlink(target, link_path)
    except (OSError, NotImplementedError, FilesystemError) as e:
        raise LinkCreationError(
            f"Failed to create symlink {link_path} -> {target}: {e}"
        ) from e

    return link_path


def copy_file(source: Union[str, Path], destination: Union[str, Path]) -> Path:
    """
    Copy ``source`` to ``destination``, replacing any stale entry there.

    Raises:
        FileCopyError: If the copy fails
    """
    source = Path(source)
    destination = Path(destination)

    try:
        remove_stale_entry(destination)
        shutil.copy2(source, destination)
    except (OSError, FilesystemError) as e:
        raise FileCopyError(f"Failed to copy {source} to {destination}: {e}") from e

    return destination


def make_executable(path: Union[str, Path]) -> None:
    """
    Mark a file executable (0o755). Follows symlinks, so a link's target
    receives the permission.
    """
    os.chmod(path, 0o755)


def is_executable(path: Union[str, Path]) -> bool:
    """Check whether the owner execute bit is set on ``path``."""
    try:
        return bool(os.stat(path).st_mode & stat.S_IXUSR)
    except OSError:
        return False
