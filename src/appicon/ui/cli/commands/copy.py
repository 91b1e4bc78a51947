"""Copy command implementation for the CLI."""

from __future__ import annotations

from typing import final

from appicon.application.services.export_service import (
    CatalogRequest,
    IconExportService,
    load_applications,
)
from appicon.features.export import IconExportError
from appicon.ui.cli.args.options import CopyArgs
from appicon.ui.cli.display.export_result import ExportResultDisplay


@final
class CopyCommand:
    """Command that copies one rendered icon size to the clipboard."""

    def __init__(self, args: CopyArgs) -> None:
        self.args = args
        self.service = IconExportService()
        self.display = ExportResultDisplay()

    def execute(self) -> bool:
        [app] = load_applications(
            CatalogRequest(search_dirs=self.args.search_dirs, query=self.args.app_query)
        )
        try:
            self.service.copy_to_clipboard(app, self.args.size)
        except IconExportError as exc:
            self.display.show_copy_failure(self.args.size, exc)
            return False

        self.display.show_copy(app, self.args.size, quiet=self.args.quiet)
        return True
