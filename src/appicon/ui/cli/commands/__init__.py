"""Command execution package for CLI."""

from appicon.ui.cli.commands.copy import CopyCommand
from appicon.ui.cli.commands.export import ExportCommand
from appicon.ui.cli.commands.list import ListCommand
from appicon.ui.cli.commands.reveal import RevealCommand

__all__ = [
    "CopyCommand",
    "ExportCommand",
    "ListCommand",
    "RevealCommand",
]
