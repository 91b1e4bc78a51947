"""Exceptions raised by the icon export pipeline."""

from __future__ import annotations

from collections.abc import Sequence


class IconExportError(Exception):
    """Base error for appicon operations."""


class ExportError(IconExportError):
    """A single format could not be exported."""


class RenderError(ExportError):
    """The system icon service could not rasterize an application icon."""


class ConversionError(ExportError):
    """A rendered raster could not be transcoded."""


class ContainerNotFoundError(ExportError):
    """The application bundle ships no .icns file."""


class TotalExportError(IconExportError):
    """Every requested format failed for one application."""

    def __init__(self, warnings: Sequence[str]) -> None:
        self.warnings = list(warnings)
        super().__init__("\n".join(self.warnings))


class ClipboardError(IconExportError):
    """The rendered icon could not be placed on the clipboard."""


class ApplicationLookupError(IconExportError):
    """A CLI query did not resolve to exactly one application."""

    def __init__(self, message: str, candidates: Sequence[str] = ()) -> None:
        self.candidates = list(candidates)
        super().__init__(message)


__all__ = [
    "ApplicationLookupError",
    "ClipboardError",
    "ContainerNotFoundError",
    "ConversionError",
    "ExportError",
    "IconExportError",
    "RenderError",
    "TotalExportError",
]
