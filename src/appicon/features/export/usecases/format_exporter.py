"""
Summary: Export one application's icon in a single format.
Why: Each format has its own recipe; the orchestrator only needs a uniform call.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from appicon.features.path import (
    container_file_name,
    format_dir,
    raster_file_name,
)
from appicon.platform.logging import logger

from ..domain.errors import ContainerNotFoundError
from ..domain.models import CONTAINER_SIZE, Application, ExportedIcon, ExportFormat
from .ports import (
    ContainerInspectorPort,
    ExportFileSystemPort,
    FormatConverterPort,
    IconRendererPort,
)


class FormatExporter:
    """Produce the files for one ``ExportFormat`` using injected ports."""

    _renderer: IconRendererPort
    _converter: FormatConverterPort
    _inspector: ContainerInspectorPort
    _filesystem: ExportFileSystemPort

    def __init__(
        self,
        *,
        renderer: IconRendererPort,
        converter: FormatConverterPort,
        inspector: ContainerInspectorPort,
        filesystem: ExportFileSystemPort,
    ) -> None:
        self._renderer = renderer
        self._converter = converter
        self._inspector = inspector
        self._filesystem = filesystem

    async def export_format(
        self,
        app: Application,
        sizes: Sequence[int],
        app_output_dir: Path,
        export_format: ExportFormat,
    ) -> list[ExportedIcon]:
        """Write ``app``'s icon in ``export_format`` under ``app_output_dir``.

        Raster formats yield one ``ExportedIcon`` per distinct size, in request
        order. ICNS yields a single entry with ``CONTAINER_SIZE``.

        Raises:
            ContainerNotFoundError: ICNS was requested but the bundle has none.
            RenderError: A size could not be rendered.
            ConversionError: A rendered PNG could not be transcoded.
        """

        target_dir = await self._filesystem.ensure_directory(
            format_dir(app_output_dir, export_format)
        )

        if not export_format.is_raster:
            return [await self._copy_container(app, target_dir)]

        unique_sizes = list(dict.fromkeys(sizes))
        # Let every size settle before raising so no render is left running.
        outcomes = await asyncio.gather(
            *(self._export_size(app, size, target_dir, export_format) for size in unique_sizes),
            return_exceptions=True,
        )
        exported: list[ExportedIcon] = []
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
            exported.append(outcome)
        return exported

    async def _copy_container(self, app: Application, target_dir: Path) -> ExportedIcon:
        container_path = await self._inspector.find_container_path(app.path)
        if container_path is None:
            raise ContainerNotFoundError(
                f"{app.name} does not have an .icns file (Asset Catalog icons). Try PNG instead."
            )

        destination = target_dir / container_file_name(app.name)
        _ = await self._filesystem.copy_file(container_path, destination)
        logger.debug("Copied %s → %s", container_path, destination)
        return ExportedIcon(size=CONTAINER_SIZE, file_path=destination)

    async def _export_size(
        self,
        app: Application,
        size: int,
        target_dir: Path,
        export_format: ExportFormat,
    ) -> ExportedIcon:
        png_path = target_dir / raster_file_name(app.name, size, ExportFormat.PNG.extension)
        _ = await self._renderer.render(app.path, png_path, size)

        if export_format is ExportFormat.PNG:
            return ExportedIcon(size=size, file_path=png_path)

        converted_path = target_dir / raster_file_name(app.name, size, export_format.extension)
        try:
            _ = await self._converter.convert(png_path, converted_path, export_format)
        except Exception:
            await self._filesystem.remove_quietly(png_path)
            raise
        await self._filesystem.remove(png_path)
        return ExportedIcon(size=size, file_path=converted_path)


__all__ = ["FormatExporter"]
