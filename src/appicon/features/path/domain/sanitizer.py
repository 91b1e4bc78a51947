"""
Summary: Folder and file name sanitization for exported icons.
Why: Application names may contain characters that are illegal in Finder paths.
"""

import re
from typing import ClassVar, final

from appicon.config.settings import UNTITLED_FOLDER_NAME


@final
class Sanitizer:
    """Sanitize application names for use as folder and file names."""

    # Characters rejected by at least one of HFS+, APFS, SMB shares or Windows volumes
    UNSAFE_CHARACTERS: ClassVar[re.Pattern[str]] = re.compile(r'[\\/:*?"<>|]')

    FALLBACK_NAME: ClassVar[str] = UNTITLED_FOLDER_NAME

    @classmethod
    def sanitize_folder_name(cls, value: str) -> str:
        """Replace unsafe characters with hyphens and trim surrounding whitespace.

        Args:
            value: Raw name, typically an application display name.

        Returns:
            str: Name without ``\\ / : * ? " < > |``, or ``FALLBACK_NAME`` when
            nothing printable remains.
        """
        sanitized = cls.UNSAFE_CHARACTERS.sub("-", value).strip()
        return sanitized or cls.FALLBACK_NAME


def sanitize_folder_name(value: str) -> str:
    """Module-level shortcut for :meth:`Sanitizer.sanitize_folder_name`."""

    return Sanitizer.sanitize_folder_name(value)


__all__ = ["Sanitizer", "sanitize_folder_name"]
