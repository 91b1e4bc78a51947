"""Display management for CLI interface."""

from appicon.ui.cli.display.applications import ApplicationListDisplay
from appicon.ui.cli.display.export_result import ExportResultDisplay, pluralize

__all__ = ["ApplicationListDisplay", "ExportResultDisplay", "pluralize"]
