"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point repository detection at ``tmp_path`` and reset the config singleton."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import appicon.config.config as config_module
    import appicon.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("APPICON_CONFIG", raising=False)

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = config_module.Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]

    try:
        yield tmp_path
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        config_module.Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
