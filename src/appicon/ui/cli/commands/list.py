"""List command implementation for the CLI."""

from __future__ import annotations

from typing import final

from appicon.application.services.export_service import CatalogRequest, load_applications
from appicon.features.export import Application
from appicon.ui.cli.args.options import ListArgs
from appicon.ui.cli.display.applications import ApplicationListDisplay


@final
class ListCommand:
    """Command that prints installed applications."""

    def __init__(self, args: ListArgs) -> None:
        self.args = args
        self.display = ApplicationListDisplay()

    def execute(self) -> list[Application]:
        applications = load_applications(CatalogRequest(search_dirs=self.args.search_dirs))
        if self.args.filter_text:
            needle = self.args.filter_text.casefold()
            applications = [
                app
                for app in applications
                if needle in app.name.casefold()
                or (app.bundle_id is not None and needle in app.bundle_id.casefold())
            ]
        self.display.show_applications(applications, quiet=self.args.quiet)
        return applications
