"""Use case copying a rendered icon to the clipboard."""

from __future__ import annotations

import tempfile
from pathlib import Path

from appicon.features.path import clipboard_temp_path
from appicon.platform.logging import logger

from ..domain.models import Application
from .ports import ClipboardPort, ExportFileSystemPort, IconRendererPort


class ClipboardExporter:
    """Render one size to a temporary PNG and hand it to the clipboard."""

    _renderer: IconRendererPort
    _clipboard: ClipboardPort
    _filesystem: ExportFileSystemPort
    _temp_dir: Path | None

    def __init__(
        self,
        *,
        renderer: IconRendererPort,
        clipboard: ClipboardPort,
        filesystem: ExportFileSystemPort,
        temp_dir: Path | None = None,
    ) -> None:
        self._renderer = renderer
        self._clipboard = clipboard
        self._filesystem = filesystem
        self._temp_dir = temp_dir

    async def copy_to_clipboard(self, app: Application, size: int) -> None:
        """Copy ``app``'s icon at ``size`` x ``size`` pixels.

        The temporary file is removed on every exit path.
        """

        temp_dir = self._temp_dir or Path(tempfile.gettempdir())
        temp_file = clipboard_temp_path(app.name, size, temp_dir)
        try:
            _ = await self._renderer.render(app.path, temp_file, size)
            await self._clipboard.copy_image(temp_file)
        finally:
            await self._filesystem.remove_quietly(temp_file)

        logger.info(
            "Copied %dx%d icon for %s",
            size,
            size,
            app.name,
            extra={
                "export_event": "clipboard.copy.complete",
                "app_name": app.name,
                "size": size,
            },
        )


__all__ = ["ClipboardExporter"]
