"""Adapter converting rasters with the ``sips`` command line tool."""

from __future__ import annotations

from pathlib import Path

from appicon.config.settings import SIPS_PATH
from appicon.features.export.domain.errors import ConversionError
from appicon.features.export.domain.models import ExportFormat
from appicon.features.export.usecases.ports import FormatConverterPort
from appicon.platform.process import ToolError, run_tool


class SipsFormatConverter(FormatConverterPort):
    """Transcode images with ``sips -s format``."""

    def __init__(self, sips_path: str = SIPS_PATH) -> None:
        self._sips_path = sips_path

    async def convert(self, source: Path, target: Path, export_format: ExportFormat) -> Path:
        if not export_format.is_raster:
            raise ConversionError(f"sips cannot produce {export_format.subdir} output")
        try:
            _ = await run_tool(
                self._sips_path,
                ["-s", "format", export_format.value, str(source), "--out", str(target)],
            )
        except ToolError as exc:
            raise ConversionError(
                f"Could not convert {source.name} to {export_format.subdir}: {exc.stderr or exc}"
            ) from exc
        return target


__all__ = ["SipsFormatConverter"]
