"""Summary: Ports defining export use case dependencies.
Why: Decouple use cases from macOS tools so tests and swaps stay simple."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from ..domain.models import ExportFormat


@runtime_checkable
class IconRendererPort(Protocol):
    """Rasterize an application's icon the way Finder resolves it."""

    async def render(self, app_path: Path, output_path: Path, size: int) -> Path:
        """Write a ``size`` x ``size`` PNG to ``output_path`` and return it.

        Raises:
            RenderError: If no raster could be produced.
        """
        ...


@runtime_checkable
class FormatConverterPort(Protocol):
    """Transcode a rendered raster into another raster format."""

    async def convert(self, source: Path, target: Path, export_format: ExportFormat) -> Path:
        """Write ``target`` in ``export_format`` and return it.

        Raises:
            ConversionError: If the conversion tool fails.
        """
        ...


@runtime_checkable
class ContainerInspectorPort(Protocol):
    """Locate the native icon container inside an application bundle."""

    async def find_container_path(self, app_path: Path) -> Path | None:
        """Return the .icns path, or ``None`` when the bundle has none."""
        ...


@runtime_checkable
class ExportFileSystemPort(Protocol):
    """Filesystem operations needed by the export use cases."""

    async def ensure_directory(self, directory: Path) -> Path:
        """Create ``directory`` and parents if needed; return it."""
        ...

    async def copy_file(self, source: Path, destination: Path) -> Path:
        """Copy ``source`` byte-for-byte to ``destination``."""
        ...

    async def exists(self, path: Path) -> bool:
        """Return True if ``path`` exists."""
        ...

    async def remove(self, path: Path) -> None:
        """Delete ``path``; errors propagate."""
        ...

    async def remove_quietly(self, path: Path) -> None:
        """Delete ``path`` ignoring every failure."""
        ...


@runtime_checkable
class ClipboardPort(Protocol):
    """Place an image file on the system clipboard."""

    async def copy_image(self, image_path: Path) -> None:
        """Copy the PNG at ``image_path`` as a pasteable image.

        Raises:
            ClipboardError: If the clipboard could not be updated.
        """
        ...


__all__ = [
    "ClipboardPort",
    "ContainerInspectorPort",
    "ExportFileSystemPort",
    "FormatConverterPort",
    "IconRendererPort",
]
