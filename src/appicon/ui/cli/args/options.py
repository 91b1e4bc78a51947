"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from appicon.features.export import ExportFormat


@final
@dataclass(slots=True)
class ListArgs:
    """Command line arguments for the ``list`` subcommand."""

    command: Literal["list"]
    filter_text: str | None
    search_dirs: list[Path] | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ExportArgs:
    """Command line arguments for the ``export`` subcommand."""

    command: Literal["export"]
    app_query: str
    sizes: tuple[int, ...]
    formats: tuple[ExportFormat, ...]
    output_path: Path | None
    reveal: bool
    search_dirs: list[Path] | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class CopyArgs:
    """Command line arguments for the ``copy`` subcommand."""

    command: Literal["copy"]
    app_query: str
    size: int
    search_dirs: list[Path] | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class RevealArgs:
    """Command line arguments for the ``reveal`` subcommand."""

    command: Literal["reveal"]
    app_query: str
    output_path: Path | None
    search_dirs: list[Path] | None
    verbose: bool
    quiet: bool


CLIArgs = ListArgs | ExportArgs | CopyArgs | RevealArgs

__all__ = ["CLIArgs", "CopyArgs", "ExportArgs", "ListArgs", "RevealArgs"]
