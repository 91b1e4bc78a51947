"""Export command implementation for the CLI."""

from __future__ import annotations

from typing import final

from appicon.application.services.export_service import (
    CatalogRequest,
    ExportServiceRequest,
    IconExportService,
    load_applications,
)
from appicon.features.export import ExportResult, TotalExportError
from appicon.ui.cli.args.options import ExportArgs
from appicon.ui.cli.display.export_result import ExportResultDisplay


@final
class ExportCommand:
    """Command that exports one application's icons to disk."""

    def __init__(self, args: ExportArgs) -> None:
        self.args = args
        self.service = IconExportService()
        self.display = ExportResultDisplay()

    def execute(self) -> ExportResult | None:
        """Run the export; returns ``None`` when every format failed."""

        [app] = load_applications(
            CatalogRequest(search_dirs=self.args.search_dirs, query=self.args.app_query)
        )
        request = ExportServiceRequest(
            app=app,
            sizes=self.args.sizes,
            formats=self.args.formats,
            output_path=self.args.output_path,
            reveal=self.args.reveal,
        )
        try:
            result = self.service.export(request)
        except TotalExportError as exc:
            self.display.show_export_failure(app, exc)
            return None

        self.display.show_export(app, result, quiet=self.args.quiet)
        return result
