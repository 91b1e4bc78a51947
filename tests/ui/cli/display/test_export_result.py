"""Tests for export result rendering."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from appicon.features.export import (
    CONTAINER_SIZE,
    Application,
    ExportedIcon,
    ExportResult,
    TotalExportError,
)
from appicon.ui.cli.display import ApplicationListDisplay, ExportResultDisplay, pluralize

APP = Application(name="Pixel [Pro]", path=Path("/Applications/Pixel.app"), bundle_id="io.pixel")


def _capture(display: ExportResultDisplay | ApplicationListDisplay) -> StringIO:
    buffer = StringIO()
    display.console = Console(file=buffer, width=200, force_terminal=False)
    return buffer


@pytest.mark.parametrize(
    ("count", "expected"),
    [(0, "no icons"), (1, "1 icon"), (4, "4 icons")],
)
def test_pluralize(count: int, expected: str) -> None:
    assert pluralize(count, "icon") == expected


def test_show_export_lists_files_and_warnings() -> None:
    """Success output should list written files and warnings, escaping markup."""

    display = ExportResultDisplay()
    buffer = _capture(display)
    result = ExportResult(
        output_dir=Path("/tmp/Pixel [Pro] App Icons"),
        results=[
            ExportedIcon(size=16, file_path=Path("/tmp/x/PNG/Pixel-16.png")),
            ExportedIcon(size=CONTAINER_SIZE, file_path=Path("/tmp/x/ICNS/Pixel.icns")),
        ],
        warnings=["JPEG: sips failed"],
    )

    display.show_export(APP, result)

    output = buffer.getvalue()
    assert "Exported 2 icons for Pixel [Pro]" in output
    assert "16x16" in output
    assert "icns" in output
    assert "JPEG: sips failed" in output


def test_quiet_suppresses_success_output() -> None:
    """Quiet mode should suppress success summaries."""

    display = ExportResultDisplay()
    buffer = _capture(display)

    display.show_export(APP, ExportResult(output_dir=Path("/tmp")), quiet=True)
    display.show_copy(APP, 64, quiet=True)

    assert buffer.getvalue() == ""


def test_show_export_failure_joins_warnings() -> None:
    """Failure output should list every format warning."""

    display = ExportResultDisplay()
    buffer = _capture(display)

    display.show_export_failure(APP, TotalExportError(["PNG: a", "ICNS: b"]))

    output = buffer.getvalue()
    assert "Failed to export Pixel [Pro]'s icons" in output
    assert "PNG: a\nICNS: b" in output


def test_copy_messages() -> None:
    """Copy success and failure messages should name the size."""

    display = ExportResultDisplay()
    buffer = _capture(display)

    display.show_copy(APP, 512)
    display.show_copy_failure(512, RuntimeError("clipboard busy"))

    output = buffer.getvalue()
    assert "Copied 512 x 512 icon for Pixel [Pro]" in output
    assert "Failed to copy 512 x 512 icon" in output
    assert "clipboard busy" in output


def test_application_table() -> None:
    """The application table should list names and bundle identifiers."""

    display = ApplicationListDisplay()
    buffer = _capture(display)

    display.show_applications([APP])

    output = buffer.getvalue()
    assert "Pixel [Pro]" in output
    assert "io.pixel" in output


def test_application_table_empty_state() -> None:
    """An empty catalog should print the empty-state message."""

    display = ApplicationListDisplay()
    buffer = _capture(display)

    display.show_applications([])

    assert "No Applications Found" in buffer.getvalue()
