"""
Summary: macOS adapters backed by system command line tools.
Why: Keep every process invocation behind the export ports.
"""

from .clipboard import AppleScriptClipboard
from .converter import SipsFormatConverter
from .escaping import escape_string_literal
from .finder import reveal_in_finder
from .inspector import PlistContainerInspector
from .renderer import SwiftIconRenderer

__all__ = [
    "AppleScriptClipboard",
    "PlistContainerInspector",
    "SipsFormatConverter",
    "SwiftIconRenderer",
    "escape_string_literal",
    "reveal_in_finder",
]
