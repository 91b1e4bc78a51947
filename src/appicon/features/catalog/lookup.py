"""Resolve a command line query to a single application."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from appicon.features.export.domain.errors import ApplicationLookupError
from appicon.features.export.domain.models import Application

from .scanner import APP_SUFFIX, read_bundle_info


def find_application(query: str, applications: Sequence[Application]) -> Application:
    """Match ``query`` against a bundle path, bundle id, exact name, or unique substring.

    Raises:
        ApplicationLookupError: If nothing matches or a substring matches several apps.
    """

    needle = query.strip()
    if not needle:
        raise ApplicationLookupError("An application name is required")

    candidate_path = Path(needle).expanduser()
    if candidate_path.suffix == APP_SUFFIX and candidate_path.is_dir():
        return read_bundle_info(candidate_path)

    for app in applications:
        if app.bundle_id is not None and app.bundle_id == needle:
            return app

    folded = needle.casefold()
    exact = [app for app in applications if app.name.casefold() == folded]
    if len(exact) == 1:
        return exact[0]

    partial = exact or [app for app in applications if folded in app.name.casefold()]
    if len(partial) == 1:
        return partial[0]
    if not partial:
        raise ApplicationLookupError(f"No application matches '{needle}'")

    names = [app.name for app in partial]
    raise ApplicationLookupError(
        f"'{needle}' matches {len(partial)} applications: {', '.join(names)}",
        candidates=names,
    )


__all__ = ["find_application"]
