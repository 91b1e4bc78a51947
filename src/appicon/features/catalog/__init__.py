"""Public surface for the application catalog feature."""

from .lookup import find_application
from .scanner import list_applications, read_bundle_info

__all__ = ["find_application", "list_applications", "read_bundle_info"]
