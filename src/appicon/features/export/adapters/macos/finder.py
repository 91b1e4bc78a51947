"""Reveal files in Finder."""

from __future__ import annotations

from pathlib import Path

from appicon.config.settings import OPEN_PATH
from appicon.platform.process import run_tool


async def reveal_in_finder(path: Path, *, open_path: str = OPEN_PATH) -> None:
    """Open a Finder window with ``path`` selected.

    Raises:
        ToolError: If ``open`` fails.
    """

    _ = await run_tool(open_path, ["-R", str(path)])


__all__ = ["reveal_in_finder"]
