"""
Summary: Render export and clipboard outcomes for the CLI.
Why: Give every command the same success and failure wording.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from appicon.features.export import CONTAINER_SIZE, Application, ExportResult


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return ``"no icons"``, ``"1 icon"`` or ``"3 icons"`` style phrases."""

    plural_form = plural or f"{singular}s"
    if count == 0:
        return f"no {plural_form}"
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural_form}"


@final
class ExportResultDisplay:
    """Handles export result display in CLI."""

    console: Console

    def __init__(self) -> None:
        self.console = Console()

    def show_export(self, app: Application, result: ExportResult, *, quiet: bool = False) -> None:
        """Print the success summary, written files and any per-format warnings."""

        if quiet:
            return

        self.console.print(
            f"\n[bold green]Exported {pluralize(len(result.results), 'icon')}[/bold green]"
            f" for {escape(app.name)}"
        )
        self.console.print(f"Output folder: {escape(str(result.output_dir))}")
        for icon in result.results:
            label = "icns" if icon.size == CONTAINER_SIZE else f"{icon.size}x{icon.size}"
            self.console.print(f"  • {label:>9}  {escape(str(icon.file_path))}")
        for warning in result.warnings:
            self.console.print(f"[yellow]⚠ {escape(warning)}[/yellow]")

    def show_export_failure(self, app: Application, error: Exception) -> None:
        self.console.print(f"[bold red]Failed to export {escape(app.name)}'s icons[/bold red]")
        self.console.print(f"[red]{escape(str(error))}[/red]")

    def show_copy(self, app: Application, size: int, *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print(f"[green]Copied {size} x {size} icon[/green] for {escape(app.name)}")

    def show_copy_failure(self, size: int, error: Exception) -> None:
        self.console.print(f"[bold red]Failed to copy {size} x {size} icon[/bold red]")
        self.console.print(f"[red]{escape(str(error))}[/red]")
