"""
Core interfaces for DriverKit.

This module defines the abstract collaborators the driver resolver depends
on, so acquisition logic can be exercised without spawning real processes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence


@dataclass
class ProcessResult:
    """
    Outcome of running an external command.

    Attributes:
        exit_code: Process exit status (0 means success)
        output: Lines the process wrote to stdout/stderr, in order
    """

    exit_code: int
    output: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class ProcessRunner(ABC):
    """
    Abstract interface for running external commands.

    Implementations stream the command's output while it runs and return
    once the process has exited.
    """

    @abstractmethod
    async def run(
        self, command: Sequence[str], cwd: Optional[Path] = None
    ) -> ProcessResult:
        """
        Run a command and wait for it to exit.

        Args:
            command: Executable followed by its arguments
            cwd: Working directory (default: current directory)

        Returns:
            ProcessResult with the exit code and captured output

        Raises:
            FileNotFoundError: If the executable does not exist
            asyncio.CancelledError: If the awaiting task is cancelled; the
                process is killed before this propagates
        """
        pass


__all__ = [
    "ProcessResult",
    "ProcessRunner",
]
