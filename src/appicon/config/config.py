"""Configuration management for appicon."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from appicon.config.file_ops import write_text_file
from appicon.config.paths import default_config_path
from appicon.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


def _as_list(key: str, value: Any, accepted: tuple[type, ...]) -> list[Any]:
    """Normalize a list setting, wrapping a single value and dropping mistyped entries."""

    items = value if isinstance(value, (list, tuple)) else [value]
    kept: list[Any] = []
    for item in items:
        if isinstance(item, accepted) and not (isinstance(item, bool) and bool not in accepted):
            kept.append(item)
        else:
            logger.warning("Ignoring invalid %s entry: %r", key, item)
    return kept


@dataclass
class Config:
    """Application configuration."""

    # Base folder that receives "<App> App Icons" directories
    output_path: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Export defaults used when the CLI does not pass --size / --format
    sizes: list[int] = field(default_factory=lambda: [512])
    formats: list[str] = field(default_factory=lambda: ["png"])

    # Folders scanned for .app bundles; None means the built-in macOS locations
    search_dirs: list[Path] | None = None

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and normalize list settings."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

        self.sizes = _as_list("sizes", self.sizes, (int,))
        self.formats = _as_list("formats", self.formats, (str,))
        if self.search_dirs is not None:
            self.search_dirs = [
                Path(entry)
                for entry in _as_list("search_dirs", self.search_dirs, (str, Path))
                if str(entry).strip()
            ]

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)
        if config_dict["search_dirs"] is not None:
            config_dict["search_dirs"] = [str(entry) for entry in config_dict["search_dirs"]]

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# appicon Configuration File")
        lines.append("")

        lines.append("# Folder that receives exported icons (optional, default ~/Downloads/)")
        lines.append('# Example: output_path = "~/Desktop/Icons"')
        if config["output_path"] is not None:
            lines.append(f"output_path = {self._format_toml_value(config['output_path'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/appicon.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Icon sizes exported by default")
        lines.append("# Allowed: 16, 32, 48, 64, 128, 256, 512, 1024")
        lines.append(f"sizes = {self._format_toml_value(config['sizes'])}")
        lines.append("")

        lines.append("# Formats exported by default: png, jpeg, icns")
        lines.append(f"formats = {self._format_toml_value(config['formats'])}")
        lines.append("")

        lines.append("# Folders searched for applications (optional)")
        lines.append('# Example: search_dirs = ["/Applications", "~/Applications"]')
        if config["search_dirs"] is not None:
            lines.append(f"search_dirs = {self._format_toml_value(config['search_dirs'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = (
                str(value)
                .replace("\\", "\\\\")
                .replace('"', '\\"')
                .replace("\n", "\\n")
                .replace("\r", "\\r")
            )
            return f'"{escaped}"'
        if isinstance(value, list):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating a default file when missing.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                for key in list(config_dict):
                    if key not in known:
                        logger.warning("Ignoring unknown configuration key: %s", key)
                        del config_dict[key]

                for key in ("output_path", "log_file"):
                    value = config_dict.get(key)
                    if isinstance(value, str) and not value.strip():
                        config_dict[key] = None

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


__all__ = ["Config"]
