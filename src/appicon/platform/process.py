"""
Summary: Async wrapper around external tool invocations.
Why: Give every adapter the same argv-only spawning and error shape.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from appicon.platform.logging import logger


class ToolError(RuntimeError):
    """Raised when an external tool cannot be started or exits non-zero."""

    def __init__(self, tool: str, returncode: int | None, stderr: str) -> None:
        self.tool = tool
        self.returncode = returncode
        self.stderr = stderr.strip()
        detail = self.stderr or f"exit status {returncode}"
        super().__init__(f"{tool} failed: {detail}")


async def run_tool(executable: str, args: Sequence[str]) -> str:
    """Run ``executable`` with ``args`` and return its decoded stdout.

    The process is spawned from an argument vector, never through a shell.

    Raises:
        ToolError: If the binary is missing or the process exits non-zero.
    """

    logger.debug("Running %s %s", executable, " ".join(args[:2]))
    try:
        proc = await asyncio.create_subprocess_exec(
            executable,
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise ToolError(executable, None, str(exc)) from exc

    stdout, stderr = await proc.communicate()
    if proc.returncode != 0:
        raise ToolError(
            executable,
            proc.returncode,
            stderr.decode("utf-8", errors="replace"),
        )
    return stdout.decode("utf-8", errors="replace")


__all__ = ["ToolError", "run_tool"]
