"""Command line argument handling package."""

from appicon.ui.cli.args.parser import ArgumentParser
from appicon.ui.cli.args.options import CLIArgs, CopyArgs, ExportArgs, ListArgs, RevealArgs

__all__ = ["ArgumentParser", "CLIArgs", "CopyArgs", "ExportArgs", "ListArgs", "RevealArgs"]
