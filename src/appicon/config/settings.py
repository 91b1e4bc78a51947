"""
Summary: Fixed runtime settings shared by the export pipeline and the CLI.
Why: Keep tool locations and defaults in one place without file I/O.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

# macOS system binaries ------------------------------------------------------
# Present on every supported host.

XCRUN_PATH: Final[str] = "/usr/bin/xcrun"
SIPS_PATH: Final[str] = "/usr/bin/sips"
PLUTIL_PATH: Final[str] = "/usr/bin/plutil"
OSASCRIPT_PATH: Final[str] = "/usr/bin/osascript"
OPEN_PATH: Final[str] = "/usr/bin/open"

# Export defaults -------------------------------------------------------------

# Used when neither the CLI nor the config file name an output folder.
DEFAULT_OUTPUT: Final[str] = "~/Downloads/"

# Appended to the application name to build its export root.
APP_FOLDER_SUFFIX: Final[str] = " App Icons"

# Replacement for names that sanitize down to nothing.
UNTITLED_FOLDER_NAME: Final[str] = "Untitled"

# Default icon-container name when Info.plist omits CFBundleIconFile.
DEFAULT_CONTAINER_NAME: Final[str] = "AppIcon"

# Application catalog -------------------------------------------------------

DEFAULT_APP_SEARCH_DIRS: Final[tuple[Path, ...]] = (
    Path("/Applications"),
    Path("/Applications/Utilities"),
    Path("/System/Applications"),
    Path("/System/Applications/Utilities"),
    Path("~/Applications"),
)


__all__ = [
    "XCRUN_PATH",
    "SIPS_PATH",
    "PLUTIL_PATH",
    "OSASCRIPT_PATH",
    "OPEN_PATH",
    "DEFAULT_OUTPUT",
    "APP_FOLDER_SUFFIX",
    "UNTITLED_FOLDER_NAME",
    "DEFAULT_CONTAINER_NAME",
    "DEFAULT_APP_SEARCH_DIRS",
]
