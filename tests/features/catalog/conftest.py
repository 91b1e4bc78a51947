"""Fixtures building fake application bundles."""

from __future__ import annotations

import plistlib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

BundleFactory = Callable[..., Path]


@pytest.fixture
def make_bundle() -> BundleFactory:
    """Return a factory writing ``<folder>/<stem>.app/Contents/Info.plist``."""

    def _make(folder: Path, stem: str, **info: Any) -> Path:
        bundle = folder / f"{stem}.app"
        contents = bundle / "Contents"
        contents.mkdir(parents=True)
        if info:
            with open(contents / "Info.plist", "wb") as handle:
                plistlib.dump(info, handle)
        return bundle

    return _make
