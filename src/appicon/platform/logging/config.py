"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure global logging defaults and expose the shared application logger.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from appicon.config.paths import default_log_file

from .handlers import ExportRichHandler


DEFAULT_LOG_FILE: Final[Path] = default_log_file()


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Set up and configure the application logger.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output.
        file_level: Logging level for file output.

    Returns:
        logging.Logger: Configured logger instance.
    """

    logger = logging.getLogger("appicon")
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console = Console(stderr=True, soft_wrap=True)
    console_handler = ExportRichHandler(console=console)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


# Console-only until the CLI attaches the configured log file.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "setup_logger", "logger"]
