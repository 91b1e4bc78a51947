"""
Summary: Render application icons through NSWorkspace via ``xcrun swift``.
Why: NSWorkspace resolves every icon source Finder knows, including Asset Catalogs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from appicon.config.settings import XCRUN_PATH
from appicon.features.export.domain.errors import RenderError
from appicon.features.export.usecases.ports import IconRendererPort
from appicon.platform.process import ToolError, run_tool

from .escaping import escape_string_literal

_SCRIPT_TEMPLATE: Final[str] = "\n".join(
    [
        "import AppKit",
        'let icon = NSWorkspace.shared.icon(forFile: "{app_path}")',
        "let s = {size}",
        "icon.size = NSSize(width: s, height: s)",
        "let bmp = NSBitmapImageRep(bitmapDataPlanes: nil, pixelsWide: s, pixelsHigh: s, "
        "bitsPerSample: 8, samplesPerPixel: 4, hasAlpha: true, isPlanar: false, "
        "colorSpaceName: .deviceRGB, bytesPerRow: 0, bitsPerPixel: 0)!",
        "NSGraphicsContext.saveGraphicsState()",
        "NSGraphicsContext.current = NSGraphicsContext(bitmapImageRep: bmp)",
        "icon.draw(in: NSRect(x: 0, y: 0, width: s, height: s), from: .zero, "
        "operation: .copy, fraction: 1.0)",
        "NSGraphicsContext.restoreGraphicsState()",
        "let data = bmp.representation(using: .png, properties: [:])!",
        'try data.write(to: URL(fileURLWithPath: "{output_path}"))',
    ]
)


def build_render_script(app_path: Path, output_path: Path, size: int) -> str:
    """Return the Swift source that draws ``app_path``'s icon into ``output_path``."""

    if size <= 0:
        raise ValueError(f"Icon size must be positive, got {size}")
    return _SCRIPT_TEMPLATE.format(
        app_path=escape_string_literal(str(app_path)),
        output_path=escape_string_literal(str(output_path)),
        size=int(size),
    )


class SwiftIconRenderer(IconRendererPort):
    """Renderer backed by an inline Swift script."""

    def __init__(self, xcrun_path: str = XCRUN_PATH) -> None:
        self._xcrun_path = xcrun_path

    async def render(self, app_path: Path, output_path: Path, size: int) -> Path:
        script = build_render_script(app_path, output_path, size)
        try:
            _ = await run_tool(self._xcrun_path, ["swift", "-e", script])
        except ToolError as exc:
            raise RenderError(
                f"Could not render {size}x{size} icon for {app_path.name}: {exc.stderr or exc}"
            ) from exc
        return output_path


__all__ = ["SwiftIconRenderer", "build_render_script"]
