"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

from pathlib import Path

from appicon.platform.logging import logger


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def remove_file_quietly(path: Path) -> None:
    """Delete ``path`` if possible; failures are logged and ignored."""

    try:
        path.unlink()
    except FileNotFoundError:
        return
    except OSError as exc:
        logger.debug("Could not remove %s: %s", path, exc)


__all__ = ["ensure_directory", "remove_file_quietly"]
