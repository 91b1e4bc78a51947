"""Filesystem adapter for export use cases."""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from appicon.platform.filesystem import ensure_directory, remove_file_quietly

from ...usecases.ports import ExportFileSystemPort


class LocalExportFileSystem(ExportFileSystemPort):
    """Thin async wrapper around the local filesystem."""

    async def ensure_directory(self, directory: Path) -> Path:
        return await asyncio.to_thread(ensure_directory, directory)

    async def copy_file(self, source: Path, destination: Path) -> Path:
        _ = await asyncio.to_thread(shutil.copyfile, source, destination)
        return destination

    async def exists(self, path: Path) -> bool:
        return await asyncio.to_thread(path.exists)

    async def remove(self, path: Path) -> None:
        await asyncio.to_thread(path.unlink)

    async def remove_quietly(self, path: Path) -> None:
        await asyncio.to_thread(remove_file_quietly, path)


__all__ = ["LocalExportFileSystem"]
