"""
Summary: Export use cases and the ports they depend on.
Why: Keep orchestration importable without pulling in macOS adapters.
"""

from .clipboard import ClipboardExporter
from .export_icons import IconExporter
from .format_exporter import FormatExporter
from .ports import (
    ClipboardPort,
    ContainerInspectorPort,
    ExportFileSystemPort,
    FormatConverterPort,
    IconRendererPort,
)

__all__ = [
    "ClipboardExporter",
    "ClipboardPort",
    "ContainerInspectorPort",
    "ExportFileSystemPort",
    "FormatConverterPort",
    "FormatExporter",
    "IconExporter",
    "IconRendererPort",
]
