"""Application service wiring macOS adapters into the export use cases."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import final

from appicon.features.catalog import find_application, list_applications
from appicon.features.export import (
    Application,
    ClipboardExporter,
    ExportFormat,
    ExportResult,
    FormatExporter,
    IconExporter,
)
from appicon.features.export.adapters import (
    AppleScriptClipboard,
    LocalExportFileSystem,
    PlistContainerInspector,
    SipsFormatConverter,
    SwiftIconRenderer,
)
from appicon.features.export.adapters.macos import reveal_in_finder
from appicon.features.export.usecases.ports import (
    ClipboardPort,
    ContainerInspectorPort,
    ExportFileSystemPort,
    FormatConverterPort,
    IconRendererPort,
)
from appicon.features.path import app_output_dir, normalize_output_path
from appicon.platform.logging import logger
from appicon.platform.process import ToolError


@dataclass(slots=True)
class ExportServiceRequest:
    """Parameters describing one export run."""

    app: Application
    sizes: Sequence[int]
    formats: Sequence[ExportFormat]
    output_path: str | Path | None = None
    reveal: bool = False


@dataclass(slots=True)
class CatalogRequest:
    """Parameters for listing or resolving applications."""

    search_dirs: list[Path] | None = None
    query: str | None = None


@final
class IconExportService:
    """Synchronous façade over the async export pipeline."""

    _exporter: IconExporter
    _clipboard_exporter: ClipboardExporter
    _filesystem: ExportFileSystemPort

    def __init__(
        self,
        *,
        renderer: IconRendererPort | None = None,
        converter: FormatConverterPort | None = None,
        inspector: ContainerInspectorPort | None = None,
        clipboard: ClipboardPort | None = None,
        filesystem: ExportFileSystemPort | None = None,
        temp_dir: Path | None = None,
    ) -> None:
        icon_renderer = renderer or SwiftIconRenderer()
        self._filesystem = filesystem or LocalExportFileSystem()

        format_exporter = FormatExporter(
            renderer=icon_renderer,
            converter=converter or SipsFormatConverter(),
            inspector=inspector or PlistContainerInspector(),
            filesystem=self._filesystem,
        )
        self._exporter = IconExporter(
            format_exporter=format_exporter,
            filesystem=self._filesystem,
        )
        self._clipboard_exporter = ClipboardExporter(
            renderer=icon_renderer,
            clipboard=clipboard or AppleScriptClipboard(),
            filesystem=self._filesystem,
            temp_dir=temp_dir,
        )

    def export(self, request: ExportServiceRequest) -> ExportResult:
        """Export icons and optionally reveal the output folder.

        Raises:
            TotalExportError: Every requested format failed.
        """

        return asyncio.run(self._export(request))

    async def _export(self, request: ExportServiceRequest) -> ExportResult:
        result = await self._exporter.export_icons(
            request.app,
            request.sizes,
            request.output_path,
            request.formats,
        )
        if request.reveal:
            try:
                await reveal_in_finder(result.output_dir)
            except ToolError as exc:
                logger.warning("Could not reveal %s: %s", result.output_dir, exc)
        return result

    def copy_to_clipboard(self, app: Application, size: int) -> None:
        asyncio.run(self._clipboard_exporter.copy_to_clipboard(app, size))

    def export_folder(self, app: Application, output_path: str | Path | None) -> Path:
        """Folder an export of ``app`` would write to; it may not exist yet."""

        return app_output_dir(app, normalize_output_path(output_path))

    def reveal_export_folder(self, app: Application, output_path: str | Path | None) -> Path:
        """Reveal ``app``'s export folder in Finder.

        Raises:
            FileNotFoundError: Nothing has been exported for ``app`` yet.
        """

        folder = self.export_folder(app, output_path)
        asyncio.run(self._reveal_existing(app, folder))
        return folder

    async def _reveal_existing(self, app: Application, folder: Path) -> None:
        if not await self._filesystem.exists(folder):
            raise FileNotFoundError(f"No icons have been exported for {app.name} yet.")
        await reveal_in_finder(folder)


def load_applications(request: CatalogRequest) -> list[Application]:
    """List installed applications, optionally narrowed to ``request.query``."""

    applications = list_applications(request.search_dirs)
    if request.query:
        return [find_application(request.query, applications)]
    return applications


__all__ = [
    "CatalogRequest",
    "ExportServiceRequest",
    "IconExportService",
    "load_applications",
]
