"""Quote untrusted text for Swift and AppleScript string literals."""

from __future__ import annotations


def escape_string_literal(value: str) -> str:
    """Escape ``value`` for embedding between double quotes.

    Backslashes are doubled before quotes are escaped, so an input can never
    terminate the literal early. Newlines are escaped because neither Swift
    nor AppleScript allows them inside a single-line literal.
    """

    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


__all__ = ["escape_string_literal"]
