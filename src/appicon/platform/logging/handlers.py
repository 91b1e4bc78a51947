"""Rich console handler with styled export events.

Where: platform/logging/handlers.py
What: Render structured ``export_event`` log records with icons, colors, and compact paths.
Why: Keep console output scannable while file logs stay plain.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ExportRichHandler(RichHandler):
    """Rich handler that styles export pipeline events and renders paths compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "export.app.start": ("🚀", "cyan"),
        "export.app.complete": ("✅", "green"),
        "export.app.failed": ("❌", "red"),
        "export.format.complete": ("🖼️", "blue"),
        "export.format.warning": ("⚠️", "yellow"),
        "clipboard.copy.complete": ("📋", "green"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "export.app.start": "Exporting",
        "export.app.complete": "Exported",
        "export.app.failed": "Failed",
        "export.format.complete": "Wrote",
        "export.format.warning": "Skipped",
        "clipboard.copy.complete": "Copied",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` keeping only its trailing segments.

        Args:
            path: Absolute or relative POSIX path string.

        Returns:
            Text: Path with magenta separators, prefixed with an ellipsis when shortened.
        """
        pure_path = PurePosixPath(path)
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display = "…/" + "/".join(body_parts)
        else:
            display = anchor + "/".join(body_parts)

        text = Text()
        for char in display or ".":
            if char in {"/", "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_export_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured export events with dedicated styling."""

        event = getattr(record, "export_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        label = self._EVENT_LABELS.get(event)
        if label:
            _ = body.append(f"{label} ")

        app_name = getattr(record, "app_name", None)
        if app_name:
            _ = body.append(str(app_name))

        export_format = getattr(record, "export_format", None)
        if export_format:
            _ = body.append(f" [{str(export_format).upper()}]")

        details: list[str] = []
        count = getattr(record, "count", None)
        if isinstance(count, int):
            details.append(f"files={count}")
        size = getattr(record, "size", None)
        if isinstance(size, int) and size > 0:
            details.append(f"{size}x{size}")
        duration = getattr(record, "duration_seconds", None)
        if isinstance(duration, (int, float)):
            details.append(f"duration={duration:.2f}s")
        error = getattr(record, "error_message", None)
        if error:
            details.append(str(error))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        target = getattr(record, "target_path", None)
        if target:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target)))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for export events."""

        export_text = self._render_export_message(record)
        if export_text is not None:
            return export_text

        return super().render_message(record, message)


__all__ = ["ExportRichHandler"]
