"""
Summary: Deterministic output locations for exported icons.
Why: The same application, base folder and format must always map to the same files.
"""

from __future__ import annotations

from pathlib import Path

from appicon.config.settings import APP_FOLDER_SUFFIX, DEFAULT_OUTPUT
from appicon.features.export.domain.models import Application, ExportFormat

from .sanitizer import sanitize_folder_name


def normalize_output_path(raw: str | Path | None) -> Path:
    """Turn a user-supplied folder into an absolute path.

    Blank input falls back to ``DEFAULT_OUTPUT`` and a leading ``~`` is
    expanded. Never raises.
    """

    text = str(raw).strip() if raw is not None else ""
    if not text:
        text = DEFAULT_OUTPUT
    if text.startswith("~"):
        text = str(Path.home()) + "/" + text[1:].lstrip("/")
    return Path(text).resolve()


def app_folder_name(app: Application) -> str:
    return sanitize_folder_name(f"{app.name}{APP_FOLDER_SUFFIX}")


def app_output_dir(app: Application, base: Path) -> Path:
    """Export root for ``app`` beneath an already-normalized ``base``."""

    return base / app_folder_name(app)


def format_dir(app_output_dir: Path, export_format: ExportFormat) -> Path:
    return app_output_dir / export_format.subdir


def raster_file_name(app_name: str, size: int, extension: str) -> str:
    """File name for one rendered size, unique per ``(app_name, size)``."""

    return f"{sanitize_folder_name(app_name)}-{size}.{extension}"


def container_file_name(app_name: str) -> str:
    return f"{sanitize_folder_name(app_name)}.{ExportFormat.ICNS.extension}"


def clipboard_temp_path(app_name: str, size: int, temp_dir: Path) -> Path:
    return temp_dir / raster_file_name(app_name, size, ExportFormat.PNG.extension)


__all__ = [
    "app_folder_name",
    "app_output_dir",
    "clipboard_temp_path",
    "container_file_name",
    "format_dir",
    "normalize_output_path",
    "raster_file_name",
]
