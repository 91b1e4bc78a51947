"""Public surface for the export feature."""

from .domain.errors import (
    ApplicationLookupError,
    ClipboardError,
    ContainerNotFoundError,
    ConversionError,
    ExportError,
    IconExportError,
    RenderError,
    TotalExportError,
)
from .domain.models import (
    ALLOWED_SIZES,
    CONTAINER_SIZE,
    Application,
    ExportedIcon,
    ExportFormat,
    ExportResult,
    enabled_formats,
    enabled_sizes,
)
from .usecases import ClipboardExporter, FormatExporter, IconExporter

__all__ = [
    "ALLOWED_SIZES",
    "CONTAINER_SIZE",
    "Application",
    "ApplicationLookupError",
    "ClipboardError",
    "ClipboardExporter",
    "ContainerNotFoundError",
    "ConversionError",
    "ExportError",
    "ExportFormat",
    "ExportResult",
    "ExportedIcon",
    "FormatExporter",
    "IconExportError",
    "IconExporter",
    "RenderError",
    "TotalExportError",
    "enabled_formats",
    "enabled_sizes",
]
