"""
Summary: Export path feature domain symbols.
Why: Provide a stable import surface for use cases and tests.
"""

from .domain.output_paths import (
    app_folder_name,
    app_output_dir,
    clipboard_temp_path,
    container_file_name,
    format_dir,
    normalize_output_path,
    raster_file_name,
)
from .domain.sanitizer import Sanitizer, sanitize_folder_name

__all__ = [
    "Sanitizer",
    "app_folder_name",
    "app_output_dir",
    "clipboard_temp_path",
    "container_file_name",
    "format_dir",
    "normalize_output_path",
    "raster_file_name",
    "sanitize_folder_name",
]
