"""Adapter placing PNG files on the macOS pasteboard through AppleScript."""

from __future__ import annotations

from pathlib import Path

from appicon.config.settings import OSASCRIPT_PATH
from appicon.features.export.domain.errors import ClipboardError
from appicon.features.export.usecases.ports import ClipboardPort
from appicon.platform.process import ToolError, run_tool

from .escaping import escape_string_literal


def build_clipboard_script(image_path: Path) -> str:
    safe_path = escape_string_literal(str(image_path))
    return f'set the clipboard to (read (POSIX file "{safe_path}") as «class PNGf»)'


class AppleScriptClipboard(ClipboardPort):
    """Clipboard sink using ``osascript``."""

    def __init__(self, osascript_path: str = OSASCRIPT_PATH) -> None:
        self._osascript_path = osascript_path

    async def copy_image(self, image_path: Path) -> None:
        try:
            _ = await run_tool(self._osascript_path, ["-e", build_clipboard_script(image_path)])
        except ToolError as exc:
            raise ClipboardError(f"Could not copy {image_path.name} to the clipboard: {exc}") from exc


__all__ = ["AppleScriptClipboard", "build_clipboard_script"]
