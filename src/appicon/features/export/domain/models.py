"""Data structures that describe icon export requests and results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final

ALLOWED_SIZES: Final[tuple[int, ...]] = (16, 32, 48, 64, 128, 256, 512, 1024)
DEFAULT_SIZES: Final[tuple[int, ...]] = (512,)

# Size recorded for copied icon containers, which hold many resolutions.
CONTAINER_SIZE: Final[int] = 0


class ExportFormat(str, Enum):
    """Output formats an application icon can be exported to."""

    PNG = "png"
    JPEG = "jpeg"
    ICNS = "icns"

    @property
    def subdir(self) -> str:
        """Name of the per-format folder under the application export root."""

        return self.value.upper()

    @property
    def extension(self) -> str:
        return "jpg" if self is ExportFormat.JPEG else self.value

    @property
    def is_raster(self) -> bool:
        return self is not ExportFormat.ICNS

    @staticmethod
    def from_user_input(value: str) -> "ExportFormat":
        """Translate raw CLI or config input into the matching format."""

        normalized = value.strip().lower()
        if normalized == "jpg":
            return ExportFormat.JPEG
        for export_format in ExportFormat:
            if export_format.value == normalized:
                return export_format
        valid = ", ".join(f.value for f in ExportFormat)
        msg = f"Unsupported export format '{value}'. Valid options: {valid}"
        raise ValueError(msg)


DEFAULT_FORMATS: Final[tuple[ExportFormat, ...]] = (ExportFormat.PNG,)


@dataclass(slots=True, frozen=True)
class Application:
    """Snapshot of an installed application bundle."""

    name: str
    path: Path
    bundle_id: str | None = None


@dataclass(slots=True, frozen=True)
class ExportedIcon:
    """A single file written by an export."""

    size: int
    file_path: Path


@dataclass(slots=True)
class ExportResult:
    """Aggregate outcome of exporting one application's icons."""

    output_dir: Path
    results: list[ExportedIcon] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def enabled_sizes(values: Iterable[int]) -> tuple[int, ...]:
    """Keep allowed sizes in ascending order, falling back to ``DEFAULT_SIZES``."""

    sizes = sorted({value for value in values if value in ALLOWED_SIZES})
    return tuple(sizes) if sizes else DEFAULT_SIZES


def enabled_formats(values: Iterable[str | ExportFormat]) -> tuple[ExportFormat, ...]:
    """Parse format names in a stable order, falling back to ``DEFAULT_FORMATS``.

    Unknown names are dropped so a stale config entry cannot block exports.
    """

    requested: set[ExportFormat] = set()
    for value in values:
        if isinstance(value, ExportFormat):
            requested.add(value)
            continue
        try:
            requested.add(ExportFormat.from_user_input(value))
        except ValueError:
            continue
    formats = tuple(f for f in ExportFormat if f in requested)
    return formats if formats else DEFAULT_FORMATS


__all__ = [
    "ALLOWED_SIZES",
    "CONTAINER_SIZE",
    "DEFAULT_FORMATS",
    "DEFAULT_SIZES",
    "Application",
    "ExportFormat",
    "ExportResult",
    "ExportedIcon",
    "enabled_formats",
    "enabled_sizes",
]
