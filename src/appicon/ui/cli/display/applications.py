"""Display the installed application list."""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.table import Table

from appicon.features.export import Application


@final
class ApplicationListDisplay:
    """Render applications as a name, location and bundle id table."""

    console: Console

    def __init__(self) -> None:
        self.console = Console()

    def show_applications(self, applications: Sequence[Application], *, quiet: bool = False) -> None:
        if quiet:
            return

        if not applications:
            self.console.print("[yellow]No Applications Found[/yellow]")
            self.console.print("No installed applications were detected on this Mac.")
            return

        table = Table(title=f"Applications ({len(applications)})", title_justify="left")
        table.add_column("Name", style="bold")
        table.add_column("Location", style="dim")
        table.add_column("Bundle Identifier", style="cyan")
        for app in applications:
            table.add_row(app.name, app.path.parent.name, app.bundle_id or "")
        self.console.print(table)
