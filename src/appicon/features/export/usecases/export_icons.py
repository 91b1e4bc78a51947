"""Use case exporting an application's icons in every requested format."""

from __future__ import annotations

import time
from collections.abc import Sequence
from pathlib import Path

from appicon.features.path import app_output_dir, normalize_output_path
from appicon.platform.logging import logger

from ..domain.errors import TotalExportError
from ..domain.models import Application, ExportedIcon, ExportFormat, ExportResult
from .format_exporter import FormatExporter
from .ports import ExportFileSystemPort


class IconExporter:
    """Run ``FormatExporter`` once per format and aggregate the outcome.

    Formats run one after another. A failing format is reported as a warning
    and the next format still runs; the export as a whole only fails when no
    format produced anything.
    """

    _format_exporter: FormatExporter
    _filesystem: ExportFileSystemPort

    def __init__(
        self,
        *,
        format_exporter: FormatExporter,
        filesystem: ExportFileSystemPort,
    ) -> None:
        self._format_exporter = format_exporter
        self._filesystem = filesystem

    async def export_icons(
        self,
        app: Application,
        sizes: Sequence[int],
        base_output: str | Path | None,
        formats: Sequence[ExportFormat],
    ) -> ExportResult:
        """Export ``app``'s icons into ``<base>/<App> App Icons/<FORMAT>/``.

        Raises:
            TotalExportError: Every requested format failed.
        """

        started = time.perf_counter()
        output_dir = app_output_dir(app, normalize_output_path(base_output))
        _ = await self._filesystem.ensure_directory(output_dir)
        logger.info(
            "Exporting %s",
            app.name,
            extra={"export_event": "export.app.start", "app_name": app.name},
        )

        results: list[ExportedIcon] = []
        warnings: list[str] = []
        for export_format in formats:
            try:
                exported = await self._format_exporter.export_format(
                    app, sizes, output_dir, export_format
                )
            except Exception as exc:
                message = str(exc) or exc.__class__.__name__
                warnings.append(f"{export_format.subdir}: {message}")
                logger.warning(
                    "%s export failed for %s: %s",
                    export_format.subdir,
                    app.name,
                    message,
                    extra={
                        "export_event": "export.format.warning",
                        "app_name": app.name,
                        "export_format": export_format.value,
                        "error_message": message,
                    },
                )
                continue

            results.extend(exported)
            logger.info(
                "Wrote %d %s file(s) for %s",
                len(exported),
                export_format.subdir,
                app.name,
                extra={
                    "export_event": "export.format.complete",
                    "app_name": app.name,
                    "export_format": export_format.value,
                    "count": len(exported),
                },
            )

        if not results and warnings:
            logger.error(
                "No icons exported for %s",
                app.name,
                extra={"export_event": "export.app.failed", "app_name": app.name},
            )
            raise TotalExportError(warnings)

        logger.info(
            "Exported %s",
            app.name,
            extra={
                "export_event": "export.app.complete",
                "app_name": app.name,
                "count": len(results),
                "duration_seconds": time.perf_counter() - started,
                "target_path": str(output_dir),
            },
        )
        return ExportResult(output_dir=output_dir, results=results, warnings=warnings)


__all__ = ["IconExporter"]
