"""
Concurrent access control for DriverKit.

This module provides file-based locking so that several processes sharing
one driver cache directory do not download the driver at the same time or
race on creating the canonical link.

Features:
- Cross-platform, cross-process file locking (``filelock``)
- Timeout support to prevent hanging
- Automatic cleanup on process death
- Async variant that waits for the lock off the event loop

Usage:
    from driverkit.core.locking import LockManager

    lock_manager = LockManager(lock_dir)
    async with lock_manager.async_driver_lock("chrome", timeout=300):
        # Only one process acquires the driver at a time
        ...
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Union

from filelock import FileLock, Timeout as LockTimeout

logger = logging.getLogger(__name__)


def _lock_file_name(name: str) -> str:
    # Sanitize name to create valid filename
    safe = name.replace("/", "-").replace("\\", "-").replace(":", "-")
    return f"{safe}.lock"


class LockManager:
    """
    Manages locks protecting driver cache directories.

    Attributes:
        lock_dir: Directory where lock files are stored
    """

    def __init__(self, lock_dir: Union[str, Path]):
        """
        Initialize lock manager.

        Args:
            lock_dir: Directory for lock files (created if missing)
        """
        self.lock_dir = Path(lock_dir)
        self.lock_dir.mkdir(parents=True, exist_ok=True)

    def lock_path(self, name: str) -> Path:
        """Get the lock file path for a lock name."""
        return self.lock_dir / _lock_file_name(name)

    def _make_lock(self, name: str, timeout: float) -> FileLock:
        # thread_local=False: acquired in a worker thread, released on the
        # event loop thread.
        return FileLock(self.lock_path(name), timeout=timeout, thread_local=False)

    @asynccontextmanager
    async def async_driver_lock(self, name: str, timeout: float = 300):
        """
        Acquire the lock for a driver cache without blocking the event loop.

        The blocking wait runs in a worker thread; cancellation of the
        awaiting task abandons the wait and releases the lock if the thread
        obtained it meanwhile.

        Raises:
            LockTimeout: If lock can't be acquired within timeout
        """
        lock = self._make_lock(name, timeout)
        acquire = asyncio.ensure_future(asyncio.to_thread(lock.acquire))

        try:
            await asyncio.shield(acquire)
        except LockTimeout as e:
            logger.error(
                f"Could not acquire driver lock for {name} after {timeout}s. "
                "Another process may be downloading this driver."
            )
            raise LockTimeout(str(lock.lock_file)) from e
        except asyncio.CancelledError:
            acquire.add_done_callback(lambda f: _release_if_acquired(lock, f))
            raise

        logger.debug(f"Acquired driver lock: {lock.lock_file}")
        try:
            yield
        finally:
            lock.release()
            logger.debug(f"Released driver lock: {lock.lock_file}")


def _release_if_acquired(lock: FileLock, future: "asyncio.Future") -> None:
    if not future.cancelled() and future.exception() is None:
        lock.release()
        logger.debug(f"Released abandoned driver lock: {lock.lock_file}")


__all__ = [
    "LockManager",
    "LockTimeout",
]
