"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from appicon.config.config import Config
from appicon.config.paths import default_config_path
from appicon.ui.cli.args import ArgumentParser, CopyArgs, ExportArgs


def test_default_config(portable_repo_root: Path) -> None:
    """A missing config file is created with defaults on first load."""

    _ = portable_repo_root
    config = Config.load()

    assert config.output_path is None
    assert config.log_file is None
    assert config.sizes == [512]
    assert config.formats == ["png"]
    assert config.search_dirs is None
    assert default_config_path().exists()


def test_rendered_file_is_valid_toml(portable_repo_root: Path) -> None:
    """Validate that the rendered config file parses with ``tomllib``."""

    _ = portable_repo_root
    Config(output_path=Path('/tmp/with "quotes"'), sizes=[16, 1024]).save()

    with open(default_config_path(), "rb") as handle:
        data = tomllib.load(handle)

    assert data["output_path"] == '/tmp/with "quotes"'
    assert data["sizes"] == [16, 1024]
    assert "log_file" not in data


def test_save_load_roundtrip(portable_repo_root: Path) -> None:
    """Test saving and loading every configuration field."""

    _ = portable_repo_root
    Config(
        output_path=Path("~/Desktop/Icons"),
        log_file=Path("/tmp/logs/appicon.log"),
        sizes=[32, 256],
        formats=["png", "icns"],
        search_dirs=[Path("/Applications"), Path("~/Applications")],
    ).save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded = Config.load()

    assert loaded.output_path == Path("~/Desktop/Icons")
    assert loaded.log_file == Path("/tmp/logs/appicon.log")
    assert loaded.sizes == [32, 256]
    assert loaded.formats == ["png", "icns"]
    assert loaded.search_dirs == [Path("/Applications"), Path("~/Applications")]


def test_load_is_cached(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    assert Config.load() is Config.load()


def test_unknown_keys_and_blank_paths(portable_repo_root: Path) -> None:
    """Ensure unknown keys are dropped and blank paths load as ``None``."""

    _ = portable_repo_root
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text('output_path = "  "\nlegacy_option = true\nformats = ["jpeg"]\n')

    loaded = Config.load()

    assert loaded.output_path is None
    assert loaded.formats == ["jpeg"]
    assert not hasattr(loaded, "legacy_option")


def test_invalid_toml_raises(portable_repo_root: Path) -> None:
    """Ensure malformed TOML surfaces the decoder error."""

    _ = portable_repo_root
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text("sizes = [16,\n")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()


def test_scalar_list_settings_are_wrapped(portable_repo_root: Path) -> None:
    """Ensure single values for list settings load as one-element lists."""

    _ = portable_repo_root
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text('sizes = 256\nformats = "jpeg"\nsearch_dirs = "/Applications"\n')

    loaded = Config.load()

    assert loaded.sizes == [256]
    assert loaded.formats == ["jpeg"]
    assert loaded.search_dirs == [Path("/Applications")]


def test_mistyped_list_entries_are_dropped(portable_repo_root: Path) -> None:
    """Validate that entries of the wrong type are skipped instead of crashing later."""

    _ = portable_repo_root
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text(
        'sizes = [16, "big", true, 1024]\nformats = ["png", 3]\nsearch_dirs = ["/opt/apps", 7]\n'
    )

    loaded = Config.load()

    assert loaded.sizes == [16, 1024]
    assert loaded.formats == ["png"]
    assert loaded.search_dirs == [Path("/opt/apps")]


def test_scalar_sizes_reach_export_defaults(
    portable_repo_root: Path, mocker: MockerFixture
) -> None:
    """Ensure a scalar ``sizes`` value still drives export and copy defaults."""

    _ = portable_repo_root
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text("sizes = 64\n")
    _ = mocker.patch("appicon.ui.cli.args.parser.setup_logger")

    export_args = ArgumentParser.process_args(["export", "Xcode"])
    copy_args = ArgumentParser.process_args(["copy", "Xcode"])

    assert isinstance(export_args, ExportArgs)
    assert export_args.sizes == (64,)
    assert isinstance(copy_args, CopyArgs)
    assert copy_args.size == 64


def test_paths_with_newlines_save_as_valid_toml(portable_repo_root: Path) -> None:
    """Validate that control characters in paths are escaped when saving."""

    _ = portable_repo_root
    Config(output_path=Path("/tmp/line\nbreak\rend")).save()

    with open(default_config_path(), "rb") as handle:
        data = tomllib.load(handle)

    assert data["output_path"] == "/tmp/line\nbreak\rend"
