"""
Summary: Fake export ports shared by the export use case tests.
Why: Exercise orchestration on any OS without macOS command line tools.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from appicon.features.export import (
    Application,
    ClipboardError,
    ClipboardExporter,
    ConversionError,
    ExportFormat,
    FormatExporter,
    IconExporter,
    RenderError,
)
from appicon.features.export.adapters import LocalExportFileSystem
from appicon.features.export.usecases.ports import (
    ClipboardPort,
    ContainerInspectorPort,
    FormatConverterPort,
    IconRendererPort,
)


class FakeRenderer(IconRendererPort):
    """Write a small marker file instead of drawing a real icon."""

    def __init__(self, failing_sizes: set[int] | None = None) -> None:
        self.failing_sizes = failing_sizes or set()
        self.calls: list[tuple[Path, Path, int]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def render(self, app_path: Path, output_path: Path, size: int) -> Path:
        self.calls.append((app_path, output_path, size))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            if size in self.failing_sizes:
                raise RenderError(f"no icon at {size}")
            _ = output_path.write_bytes(f"png:{size}".encode())
            await asyncio.sleep(0)
            return output_path
        finally:
            self.in_flight -= 1


class FakeConverter(FormatConverterPort):
    """Prefix the source bytes with the target format name."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[tuple[Path, Path, ExportFormat]] = []

    async def convert(self, source: Path, target: Path, export_format: ExportFormat) -> Path:
        self.calls.append((source, target, export_format))
        await asyncio.sleep(0)
        if self.fail:
            raise ConversionError("sips exploded")
        _ = target.write_bytes(export_format.value.encode() + b":" + source.read_bytes())
        return target


class FakeInspector(ContainerInspectorPort):
    def __init__(self, container: Path | None = None) -> None:
        self.container = container

    async def find_container_path(self, app_path: Path) -> Path | None:
        return self.container


class FakeClipboard(ClipboardPort):
    """Remember what was copied and whether the file existed at that moment."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.copied: list[tuple[Path, bytes | None]] = []

    async def copy_image(self, image_path: Path) -> None:
        data = image_path.read_bytes() if image_path.exists() else None
        self.copied.append((image_path, data))
        if self.fail:
            raise ClipboardError("pasteboard unavailable")


@pytest.fixture
def app(tmp_path: Path) -> Application:
    bundle = tmp_path / "Applications" / "My App.app"
    bundle.mkdir(parents=True)
    return Application(name="My App", path=bundle, bundle_id="com.example.myapp")


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def converter() -> FakeConverter:
    return FakeConverter()


@pytest.fixture
def inspector() -> FakeInspector:
    return FakeInspector()


@pytest.fixture
def filesystem() -> LocalExportFileSystem:
    return LocalExportFileSystem()


@pytest.fixture
def format_exporter(
    renderer: FakeRenderer,
    converter: FakeConverter,
    inspector: FakeInspector,
    filesystem: LocalExportFileSystem,
) -> FormatExporter:
    return FormatExporter(
        renderer=renderer,
        converter=converter,
        inspector=inspector,
        filesystem=filesystem,
    )


@pytest.fixture
def icon_exporter(
    format_exporter: FormatExporter,
    filesystem: LocalExportFileSystem,
) -> IconExporter:
    return IconExporter(format_exporter=format_exporter, filesystem=filesystem)


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def clipboard_temp_dir(tmp_path: Path) -> Path:
    temp_dir = tmp_path / "tmp"
    temp_dir.mkdir()
    return temp_dir


@pytest.fixture
def clipboard_exporter(
    renderer: FakeRenderer,
    clipboard: FakeClipboard,
    filesystem: LocalExportFileSystem,
    clipboard_temp_dir: Path,
) -> ClipboardExporter:
    return ClipboardExporter(
        renderer=renderer,
        clipboard=clipboard,
        filesystem=filesystem,
        temp_dir=clipboard_temp_dir,
    )
