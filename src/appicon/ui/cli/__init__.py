"""Command line interface package."""

from appicon.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
