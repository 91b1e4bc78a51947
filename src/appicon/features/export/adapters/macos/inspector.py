"""Adapter locating a bundle's .icns file from its Info.plist."""

from __future__ import annotations

import asyncio
from pathlib import Path

from appicon.config.settings import DEFAULT_CONTAINER_NAME, PLUTIL_PATH
from appicon.features.export.usecases.ports import ContainerInspectorPort
from appicon.platform.logging import logger
from appicon.platform.process import run_tool

ICON_FILE_KEY = "CFBundleIconFile"
CONTAINER_SUFFIX = ".icns"


class PlistContainerInspector(ContainerInspectorPort):
    """Read ``CFBundleIconFile`` with ``plutil`` and check the file exists.

    Every failure maps to ``None``: apps built with Asset Catalogs commonly
    ship no .icns at all.
    """

    def __init__(self, plutil_path: str = PLUTIL_PATH) -> None:
        self._plutil_path = plutil_path

    async def find_container_path(self, app_path: Path) -> Path | None:
        plist_path = app_path / "Contents" / "Info.plist"
        try:
            stdout = await run_tool(
                self._plutil_path,
                ["-extract", ICON_FILE_KEY, "raw", "-o", "-", str(plist_path)],
            )
            icon_name = stdout.strip() or DEFAULT_CONTAINER_NAME
            if not icon_name.endswith(CONTAINER_SUFFIX):
                icon_name = f"{icon_name}{CONTAINER_SUFFIX}"
            full_path = app_path / "Contents" / "Resources" / icon_name
            _ = await asyncio.to_thread(full_path.stat)
            return full_path
        except Exception as exc:
            logger.debug("No icon container for %s: %s", app_path, exc)
            return None


__all__ = ["PlistContainerInspector", "ICON_FILE_KEY"]
