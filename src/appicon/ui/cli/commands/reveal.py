"""Reveal command implementation for the CLI."""

from __future__ import annotations

from typing import final

from appicon.application.services.export_service import (
    CatalogRequest,
    IconExportService,
    load_applications,
)
from appicon.platform.logging import logger
from appicon.platform.process import ToolError
from appicon.ui.cli.args.options import RevealArgs


@final
class RevealCommand:
    """Command that shows an application's export folder in Finder."""

    def __init__(self, args: RevealArgs) -> None:
        self.args = args
        self.service = IconExportService()

    def execute(self) -> bool:
        [app] = load_applications(
            CatalogRequest(search_dirs=self.args.search_dirs, query=self.args.app_query)
        )
        try:
            folder = self.service.reveal_export_folder(app, self.args.output_path)
        except FileNotFoundError as exc:
            logger.error("Export folder not found: %s", exc)
            return False
        except ToolError as exc:
            logger.error("Failed to reveal export folder: %s", exc)
            return False

        logger.info("Revealed %s", folder)
        return True
