"""
External driver fetch tool.

Drivers are downloaded by ``webdriver-manager`` (an npm package) installed
into the project's ``node_modules/.bin``. When the tool is missing it is
installed with ``npm install webdriver-manager --save`` and looked up again
once.
"""

import logging
import shutil
from pathlib import Path
from typing import List, Optional, Union

from ..core.exceptions import AcquisitionFailed, FetchToolMissing
from ..core.interfaces import ProcessResult, ProcessRunner
from ..core.platform import PlatformInfo, detect_platform
from ..core.process import AsyncProcessRunner

logger = logging.getLogger(__name__)

DEFAULT_TOOL_NAME = "webdriver-manager"
DEFAULT_TOOL_DIR = Path("node_modules") / ".bin"
DEFAULT_INSTALLER = "npm"


class FetchTool:
    """
    Locate, install and invoke the driver fetch tool.

    Attributes:
        project_root: Directory the installer runs in
        tool_name: Fetch tool package/executable name
        tool_dir: Directory expected to contain the tool executable
        installer: Package manager executable used to install the tool
    """

    def __init__(
        self,
        project_root: Optional[Path] = None,
        tool_name: str = DEFAULT_TOOL_NAME,
        tool_dir: Optional[Union[str, Path]] = None,
        installer: str = DEFAULT_INSTALLER,
        platform: Optional[PlatformInfo] = None,
        runner: Optional[ProcessRunner] = None,
    ):
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.tool_name = tool_name
        tool_dir = Path(tool_dir) if tool_dir else DEFAULT_TOOL_DIR
        if not tool_dir.is_absolute():
            tool_dir = self.project_root / tool_dir
        self.tool_dir = tool_dir
        self.installer = installer
        self.platform = platform or detect_platform()
        self.runner = runner or AsyncProcessRunner()

    @property
    def executable_path(self) -> Path:
        """Expected path of the tool executable (npm writes .cmd shims on Windows)."""
        suffix = ".cmd" if self.platform.is_windows else ""
        return self.tool_dir / f"{self.tool_name}{suffix}"

    def is_installed(self) -> bool:
        return self.executable_path.is_file()

    def build_install_command(self, installer_path: Union[str, Path]) -> List[str]:
        return [str(installer_path), "install", self.tool_name, "--save"]

    def build_update_command(self, out_dir: Path) -> List[str]:
        return [
            str(self.executable_path),
            "update",
            "--chrome",
            f"--out_dir={out_dir}",
        ]

    async def ensure_installed(self) -> Path:
        """
        Make sure the fetch tool executable exists, installing it if needed.

        Returns:
            Path to the tool executable

        Raises:
            FetchToolMissing: If installation fails or the tool is still missing
        """
        if self.is_installed():
            return self.executable_path

        logger.error(f"{self.tool_name} binary not found at: {self.executable_path}")

        installer_path = shutil.which(self.installer)
        if installer_path is None:
            raise FetchToolMissing(
                self.tool_name, f"installer '{self.installer}' not found on PATH"
            )

        logger.info(
            f"Running {self.installer} install to ensure {self.tool_name} is installed..."
        )
        try:
            result = await self.runner.run(
                self.build_install_command(installer_path), cwd=self.project_root
            )
        except OSError as e:
            raise FetchToolMissing(
                self.tool_name, f"installer failed to start: {e}"
            ) from e

        if not result.ok:
            logger.error(
                f"Failed to install {self.tool_name}. Exit code: {result.exit_code}"
            )
            raise FetchToolMissing(
                self.tool_name, f"installation exited with code {result.exit_code}"
            )

        if not self.is_installed():
            raise FetchToolMissing(
                self.tool_name,
                f"still not found at {self.executable_path} after installation",
            )

        logger.info(f"Installed {self.tool_name} at {self.executable_path}")
        return self.executable_path

    async def update(self, out_dir: Path) -> ProcessResult:
        """
        Download the current platform's chromedriver into ``out_dir``.

        Raises:
            FetchToolMissing: If the tool cannot be installed or started
            AcquisitionFailed: If the tool exits with a non-zero code
        """
        await self.ensure_installed()

        try:
            result = await self.runner.run(
                self.build_update_command(out_dir), cwd=self.project_root
            )
        except OSError as e:
            raise FetchToolMissing(self.tool_name, f"failed to start: {e}") from e

        if not result.ok:
            logger.error(
                f"Failed to download Chrome driver. Exit code: {result.exit_code}"
            )
            raise AcquisitionFailed(result.exit_code, self.tool_name)

        return result


__all__ = [
    "DEFAULT_TOOL_NAME",
    "DEFAULT_TOOL_DIR",
    "DEFAULT_INSTALLER",
    "FetchTool",
]
