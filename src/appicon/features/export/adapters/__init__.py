"""
Summary: Package marker for export adapters.
Why: Keep adapter exports together for easy discovery.
"""

from .filesystem.local import LocalExportFileSystem
from .macos import (
    AppleScriptClipboard,
    PlistContainerInspector,
    SipsFormatConverter,
    SwiftIconRenderer,
)

__all__ = [
    "AppleScriptClipboard",
    "LocalExportFileSystem",
    "PlistContainerInspector",
    "SipsFormatConverter",
    "SwiftIconRenderer",
]
