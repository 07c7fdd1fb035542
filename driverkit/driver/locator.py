"""
driverkit/driver/locator.py

Find the canonical driver executable inside a driver cache directory.

Fetch tools leave drivers in inconsistent layouts: the canonical name
(``chromedriver``), a version-qualified name (``chromedriver_114.0.5735.90``)
or a nested directory (``chromedriver-linux64/chromedriver``). The locator
turns any of these into a single canonical path, linking or copying a
version-qualified file to the canonical name when needed.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from ..core.exceptions import DriverUnavailable
from ..core.filesystem import (
    FileCopyError,
    LinkCreationError,
    copy_file,
    create_file_link,
    is_executable,
    make_executable,
)
from ..core.platform import PlatformInfo
from ..core.platform_capabilities import FilesystemCapabilities

logger = logging.getLogger(__name__)

DEFAULT_DRIVER_NAME = "chromedriver"

# Separators between the driver name and its version token
VERSION_SEPARATORS = ("_", "-")

# Downloaded archives and tool metadata sit next to the extracted driver
NON_EXECUTABLE_SUFFIXES = (".zip", ".tar.gz", ".tgz", ".json", ".xml", ".log")


class EntryKind(Enum):
    """Classification of a directory entry during a scan."""

    EXACT = "exact"  # Canonical executable name
    VERSIONED = "versioned"  # Version-qualified executable name
    DIRECTORY = "directory"  # Subdirectory to descend into
    IRRELEVANT = "irrelevant"


@dataclass(frozen=True)
class CandidateEntry:
    """A classified entry of a scanned directory."""

    path: Path
    kind: EntryKind

    @property
    def name(self) -> str:
        return self.path.name


class DriverLocator:
    """Locates (and repairs) the canonical driver executable in a directory tree."""

    def __init__(
        self,
        driver_name: str = DEFAULT_DRIVER_NAME,
        platform: Optional[PlatformInfo] = None,
        capabilities: Optional[FilesystemCapabilities] = None,
    ):
        """
        Initialize locator.

        Args:
            driver_name: Driver base name without extension
            platform: PlatformInfo used to derive capabilities (auto-detected if None)
            capabilities: Filesystem capabilities; overrides ``platform`` when given
        """
        self.driver_name = driver_name
        self.capabilities = capabilities or FilesystemCapabilities.for_platform(
            platform
        )
        self._versioned_prefixes = tuple(
            f"{driver_name}{sep}" for sep in VERSION_SEPARATORS
        )

    @property
    def canonical_name(self) -> str:
        """Canonical executable file name (e.g. 'chromedriver' or 'chromedriver.exe')."""
        return f"{self.driver_name}{self.capabilities.executable_extension}"

    def classify(self, path: Path, is_dir: bool, is_file: bool) -> EntryKind:
        """
        Classify a directory entry.

        Args:
            path: Entry path
            is_dir: Entry is a real directory (symlinks to directories excluded)
            is_file: Entry is a regular file or a symlink to one
        """
        name = path.name
        if is_dir:
            return EntryKind.DIRECTORY
        if not is_file:
            return EntryKind.IRRELEVANT
        if name == self.canonical_name:
            return EntryKind.EXACT
        if name.startswith(self._versioned_prefixes) and not name.lower().endswith(
            NON_EXECUTABLE_SUFFIXES
        ):
            return EntryKind.VERSIONED
        return EntryKind.IRRELEVANT

    def scan(self, directory: Union[str, Path]) -> List[CandidateEntry]:
        """
        Classify the direct entries of a directory, in listing order.

        Listing order is whatever the filesystem returns; it is not sorted.

        Returns:
            List of CandidateEntry (empty if the directory is missing or unreadable)
        """
        directory = Path(directory)
        entries: List[CandidateEntry] = []

        try:
            with os.scandir(directory) as it:
                for entry in it:
                    try:
                        is_dir = entry.is_dir(follow_symlinks=False)
                        is_file = entry.is_file()
                    except OSError:
                        is_dir = is_file = False
                    path = directory / entry.name
                    entries.append(
                        CandidateEntry(path, self.classify(path, is_dir, is_file))
                    )
        except FileNotFoundError:
            return []
        except (NotADirectoryError, PermissionError) as e:
            logger.warning(f"Cannot scan {directory}: {e}")
            return []

        return entries

    def locate(
        self, directory_root: Union[str, Path], repair: bool = True
    ) -> Optional[Path]:
        """
        Find the canonical driver executable under ``directory_root``.

        Each directory level is searched for an exact canonical name first,
        then for a version-qualified name (which is linked or copied to the
        canonical name), and only then are its subdirectories searched,
        depth-first in listing order.

        The link or copy is not synchronized with other processes; callers
        sharing a cache across processes repair under the acquisition lock.

        Args:
            directory_root: Directory to search
            repair: When False, nothing is written: a level whose match would
                need a link or copy ends the search with None

        Returns:
            Path to an existing, executable driver file, or None if not found

        Raises:
            DriverUnavailable: If a version-qualified driver was found but can
                neither be placed under the canonical name nor used as-is
        """
        root = Path(directory_root)
        if not root.is_dir():
            return None

        stack = [root]
        while stack:
            directory = stack.pop()
            entries = self.scan(directory)

            if not repair and _needs_repair(entries):
                logger.debug(f"Version-qualified driver in {directory} needs repair")
                return None

            found = self._match_level(directory, entries)
            if found is not None:
                logger.debug(
                    f"Files in {root}: {', '.join(e.name for e in self.scan(root))}"
                )
                return found

            subdirs = [e.path for e in entries if e.kind is EntryKind.DIRECTORY]
            # Reversed so the first subdirectory in listing order is popped first
            stack.extend(reversed(subdirs))

        logger.debug(f"No {self.canonical_name} found under {root}")
        return None

    def _match_level(
        self, directory: Path, entries: List[CandidateEntry]
    ) -> Optional[Path]:
        for entry in entries:
            if entry.kind is EntryKind.EXACT:
                self._ensure_executable(entry.path)
                return entry.path

        for entry in entries:
            if entry.kind is EntryKind.VERSIONED:
                return self._promote(entry.path, directory / self.canonical_name)

        return None

    def _promote(self, versioned: Path, canonical: Path) -> Path:
        """
        Place a version-qualified driver under its canonical name.

        Order: symlink (if supported), then copy, then the versioned path
        itself where such names are directly invocable.
        """
        if self.capabilities.supports_links:
            try:
                create_file_link(versioned, canonical)
                self._ensure_executable(canonical)
                logger.info(f"Created symlink to {versioned.name} at {canonical}")
                return canonical
            except LinkCreationError as e:
                logger.warning(f"{e}; copying instead")

        try:
            copy_file(versioned, canonical)
            self._ensure_executable(canonical)
            logger.info(f"Copied {versioned.name} to {canonical}")
            return canonical
        except FileCopyError as e:
            if self.capabilities.versioned_names_invocable:
                logger.warning(f"{e}; using {versioned.name} directly")
                self._ensure_executable(versioned)
                return versioned
            logger.error(f"Cannot place {versioned.name} as {canonical.name}: {e}")
            raise DriverUnavailable(
                canonical.parent,
                f"could not link or copy {versioned.name} to {canonical.name}",
            ) from e

    def _ensure_executable(self, path: Path) -> None:
        if not self.capabilities.supports_execute_bit:
            return
        try:
            make_executable(path)
        except OSError as e:
            if is_executable(path):
                logger.debug(f"Could not chmod {path} (already executable): {e}")
                return
            raise DriverUnavailable(
                path.parent, f"{path.name} is not executable and chmod failed"
            ) from e


def _needs_repair(entries: List[CandidateEntry]) -> bool:
    kinds = {entry.kind for entry in entries}
    return EntryKind.VERSIONED in kinds and EntryKind.EXACT not in kinds


def locate_driver(
    directory_root: Union[str, Path], platform: Optional[PlatformInfo] = None
) -> Optional[Path]:
    """Locate the chromedriver executable under a directory for a platform."""
    return DriverLocator(platform=platform).locate(directory_root)


__all__ = [
    "DEFAULT_DRIVER_NAME",
    "EntryKind",
    "CandidateEntry",
    "DriverLocator",
    "locate_driver",
]
