"""
driverkit/driver/resolver.py

Single entry point for obtaining a working driver executable path.

Resolution order:
1. Ensure ``<output_root>/<browser>`` exists.
2. If it has content, ask the locator without writing anything; a hit is
   returned immediately.
3. Otherwise acquire: install the fetch tool if needed, run it into the
   cache directory and locate again. A successful fetch that leaves no
   recognizable executable is a hard failure, never a retry.

Acquisition is serialized per resolver with an ``asyncio.Lock`` and across
processes with a file lock; after taking the locks the cache is checked
again so a waiter reuses a driver another process just downloaded.
Repairing a version-qualified name (link or copy) also happens only under
the locks.
"""

import asyncio
import contextlib
import logging
from pathlib import Path
from typing import Optional

from ..config.parser import DriverKitConfig, load_config
from ..core.directory import (
    DEFAULT_BROWSER,
    DirectoryCreationError,
    ensure_cache_structure,
    get_cache_dir,
    get_driver_output_root,
    get_lock_dir,
)
from ..core.exceptions import DriverUnavailable
from ..core.filesystem import is_empty_directory
from ..core.interfaces import ProcessRunner
from ..core.locking import LockManager
from ..core.platform import PlatformInfo
from .fetch_tool import FetchTool
from .locator import DriverLocator

logger = logging.getLogger(__name__)


class DriverResolver:
    """
    Resolve the canonical driver path, downloading the driver when needed.

    Attributes:
        output_root: Driver output root (``driverOutputRoot``)
        browser: Cache subfolder name (e.g. 'chrome')
        cache_dir: Directory scanned for the driver
        locator: DriverLocator used to scan the cache
        fetch_tool: FetchTool used for acquisition
        lock_manager: Cross-process lock manager, or None to skip file locking
        lock_timeout: Seconds to wait for the cross-process lock
    """

    def __init__(
        self,
        output_root: Path,
        fetch_tool: FetchTool,
        locator: Optional[DriverLocator] = None,
        browser: str = DEFAULT_BROWSER,
        lock_manager: Optional[LockManager] = None,
        lock_timeout: float = 300,
    ):
        self.output_root = Path(output_root)
        self.browser = browser
        self.cache_dir = get_cache_dir(self.output_root, browser)
        self.fetch_tool = fetch_tool
        self.locator = locator or DriverLocator(platform=fetch_tool.platform)
        self.lock_manager = lock_manager
        self.lock_timeout = lock_timeout
        self._mutex = asyncio.Lock()

    @classmethod
    def from_config(
        cls,
        config: DriverKitConfig,
        runner: Optional[ProcessRunner] = None,
        platform: Optional[PlatformInfo] = None,
    ) -> "DriverResolver":
        """
        Build a resolver from configuration.

        Args:
            config: Loaded DriverKitConfig
            runner: Process runner for the fetch tool (default: asyncio subprocesses)
            platform: Target platform (auto-detected if None)
        """
        output_root = get_driver_output_root(
            config.project_root, config.driver.output_dir
        )
        fetch_tool = FetchTool(
            project_root=config.project_root,
            tool_name=config.fetch_tool.name,
            tool_dir=config.fetch_tool.tool_dir,
            installer=config.fetch_tool.installer,
            platform=platform,
            runner=runner,
        )
        lock_manager = None
        if config.locking.enabled:
            lock_manager = LockManager(get_lock_dir(output_root))

        return cls(
            output_root,
            fetch_tool,
            locator=DriverLocator(platform=fetch_tool.platform),
            browser=config.driver.browser,
            lock_manager=lock_manager,
            lock_timeout=config.locking.timeout,
        )

    async def resolve(self) -> Path:
        """
        Get the path to the driver executable, downloading it if needed.

        Returns:
            Canonical path to an executable driver

        Raises:
            FetchToolMissing: If the fetch tool cannot be found or installed
            AcquisitionFailed: If the fetch tool exits non-zero
            DriverUnavailable: If no executable can be produced
            LockTimeout: If another process holds the acquisition lock too long
        """
        self._ensure_cache_dir()

        found = self._locate_existing(repair=False)
        if found is not None:
            logger.info(f"Using existing Chrome driver at: {found}")
            return found

        async with self._mutex:
            async with self._acquisition_lock():
                # Re-check under the locks: another process may have finished,
                # and version-qualified names are only repaired here
                found = self._locate_existing()
                if found is not None:
                    logger.info(f"Using Chrome driver at: {found}")
                    return found

                return await self._acquire()

    def _ensure_cache_dir(self) -> None:
        try:
            ensure_cache_structure(self.output_root, self.browser)
        except DirectoryCreationError as e:
            logger.error(str(e))
            raise DriverUnavailable(
                self.cache_dir, "cache directory could not be created"
            ) from e

    def _locate_existing(self, repair: bool = True) -> Optional[Path]:
        if is_empty_directory(self.cache_dir):
            logger.debug(f"Driver cache is empty: {self.cache_dir}")
            return None
        return self.locator.locate(self.cache_dir, repair=repair)

    def _acquisition_lock(self):
        if self.lock_manager is None:
            return contextlib.nullcontext()
        return self.lock_manager.async_driver_lock(
            self.browser, timeout=self.lock_timeout
        )

    async def _acquire(self) -> Path:
        logger.info("Downloading Chrome driver for your operating system...")
        await self.fetch_tool.update(self.cache_dir)

        found = self.locator.locate(self.cache_dir)
        if found is None:
            logger.error("Chrome driver executable not found after download")
            raise DriverUnavailable(
                self.cache_dir,
                f"{self.fetch_tool.tool_name} succeeded but produced no "
                f"{self.locator.canonical_name}",
            )

        logger.info(f"Chrome driver downloaded successfully to: {found}")
        return found


def resolve_driver_path(
    project_root: Optional[Path] = None,
    config: Optional[DriverKitConfig] = None,
    runner: Optional[ProcessRunner] = None,
) -> Path:
    """
    Resolve the driver path from synchronous code.

    Args:
        project_root: Project root used to load ``driverkit.yaml`` when no
            config is given
        config: Preloaded configuration
        runner: Process runner override

    Returns:
        Canonical driver path
    """
    if config is None:
        config = load_config(project_root=project_root)
    resolver = DriverResolver.from_config(config, runner=runner)
    return asyncio.run(resolver.resolve())


__all__ = [
    "DriverResolver",
    "resolve_driver_path",
]
