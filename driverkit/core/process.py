"""
Asyncio-based process runner.

Runs external tools (the driver fetch tool and its installer) as asyncio
subprocesses, forwarding each output line to the parent's stdout as it
arrives. If the awaiting task is cancelled or output handling fails, the
child is killed and reaped before the exception propagates.
"""

import asyncio
import codecs
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .interfaces import ProcessResult, ProcessRunner

logger = logging.getLogger(__name__)

# Progress bars redraw with "\r" and may never emit a newline, so output
# is read in chunks rather than with StreamReader.readline.
READ_CHUNK_SIZE = 4096


def echo_line(line: str) -> None:
    """Write a line of child output to the parent's stdout."""
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


class AsyncProcessRunner(ProcessRunner):
    """Run commands with ``asyncio.create_subprocess_exec``."""

    def __init__(self, on_output: Optional[Callable[[str], None]] = echo_line):
        """
        Initialize runner.

        Args:
            on_output: Called with every output line (None to stay silent)
        """
        self.on_output = on_output

    async def run(
        self, command: Sequence[str], cwd: Optional[Path] = None
    ) -> ProcessResult:
        command = [str(part) for part in command]
        logger.info(f"Running command: {' '.join(command)}")

        process = await asyncio.create_subprocess_exec(
            *command,
            cwd=str(cwd) if cwd else None,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )

        output: List[str] = []
        try:
            await self._pump(process, output)
            exit_code = await process.wait()
        except BaseException:
            await self._kill(process)
            raise

        logger.debug(f"Command exited with code {exit_code}: {command[0]}")
        return ProcessResult(exit_code=exit_code, output=output)

    async def _pump(self, process, output: List[str]) -> None:
        assert process.stdout is not None
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        pending = ""
        while True:
            chunk = await process.stdout.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            pending += decoder.decode(chunk)
            *lines, pending = pending.split("\n")
            for line in lines:
                self._emit(line.rstrip("\r"), output)

        pending += decoder.decode(b"", final=True)
        if pending:
            self._emit(pending.rstrip("\r"), output)

    def _emit(self, line: str, output: List[str]) -> None:
        output.append(line)
        if self.on_output is not None:
            self.on_output(line)

    async def _kill(self, process) -> None:
        if process.returncode is not None:
            return
        logger.warning(f"Cancelling subprocess (pid {process.pid})")
        try:
            process.kill()
        except ProcessLookupError:
            return
        await process.wait()


__all__ = [
    "AsyncProcessRunner",
    "echo_line",
]
