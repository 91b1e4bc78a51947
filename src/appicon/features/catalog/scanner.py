"""
Summary: Enumerate installed application bundles.
Why: Commands resolve user queries against an alphabetical application list.
"""

from __future__ import annotations

import plistlib
from collections.abc import Iterable
from pathlib import Path

from appicon.config.settings import DEFAULT_APP_SEARCH_DIRS
from appicon.features.export.domain.models import Application
from appicon.platform.logging import logger

APP_SUFFIX = ".app"


def read_bundle_info(bundle_path: Path) -> Application:
    """Build an ``Application`` from ``bundle_path``'s Info.plist.

    The display name prefers ``CFBundleDisplayName``, then ``CFBundleName``,
    then the bundle's file name. A missing or unreadable plist still yields an
    application named after the bundle.
    """

    fallback_name = bundle_path.name.removesuffix(APP_SUFFIX)
    plist_path = bundle_path / "Contents" / "Info.plist"
    try:
        with open(plist_path, "rb") as handle:
            info = plistlib.load(handle)
    except (OSError, plistlib.InvalidFileException, ValueError) as exc:
        logger.debug("Unreadable Info.plist for %s: %s", bundle_path, exc)
        return Application(name=fallback_name, path=bundle_path)

    name = _first_text(info.get("CFBundleDisplayName"), info.get("CFBundleName")) or fallback_name
    bundle_id = _first_text(info.get("CFBundleIdentifier"))
    return Application(name=name, path=bundle_path, bundle_id=bundle_id)


def _first_text(*values: object) -> str | None:
    for value in values:
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def list_applications(search_dirs: Iterable[Path] | None = None) -> list[Application]:
    """Return applications found directly inside ``search_dirs``, sorted by name.

    Missing folders are skipped. A bundle reachable from two folders is listed once.
    """

    directories = list(search_dirs) if search_dirs is not None else list(DEFAULT_APP_SEARCH_DIRS)
    seen: set[Path] = set()
    applications: list[Application] = []

    for directory in directories:
        root = directory.expanduser()
        try:
            entries = sorted(root.iterdir())
        except OSError:
            continue
        for entry in entries:
            if entry.suffix != APP_SUFFIX or not entry.is_dir():
                continue
            resolved = entry.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            applications.append(read_bundle_info(entry))

    applications.sort(key=lambda app: (app.name.casefold(), str(app.path)))
    logger.debug("Found %d applications", len(applications))
    return applications


__all__ = ["list_applications", "read_bundle_info"]
