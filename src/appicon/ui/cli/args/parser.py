"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from appicon.config.config import Config
from appicon.features.export import (
    ALLOWED_SIZES,
    ExportFormat,
    enabled_formats,
    enabled_sizes,
)
from appicon.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from appicon.ui.cli.args.options import CLIArgs, CopyArgs, ExportArgs, ListArgs, RevealArgs


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid size: {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {number}")
    return number


def _export_format(value: str) -> ExportFormat:
    try:
        return ExportFormat.from_user_input(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="appicon",
            description="appicon - export macOS application icons as PNG, JPEG or ICNS.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        list_parser = subparsers.add_parser(
            "list",
            help="List installed applications",
        )
        _ = list_parser.add_argument(
            "filter_text",
            nargs="?",
            help="Only show applications whose name or bundle id contains this text",
            metavar="FILTER",
        )
        ArgumentParser._add_common_options(list_parser)

        export_parser = subparsers.add_parser(
            "export",
            help="Export an application's icon to disk",
        )
        ArgumentParser._add_app_argument(export_parser)
        size_group = export_parser.add_mutually_exclusive_group()
        _ = size_group.add_argument(
            "-s",
            "--size",
            dest="sizes",
            type=int,
            action="append",
            choices=ALLOWED_SIZES,
            help="Icon size in pixels; repeat for several sizes",
            metavar="SIZE",
        )
        _ = size_group.add_argument(
            "--all-sizes",
            action="store_true",
            help="Export every supported size (16 to 1024)",
        )
        _ = export_parser.add_argument(
            "-f",
            "--format",
            dest="formats",
            type=_export_format,
            action="append",
            help="Output format: png, jpeg or icns; repeat for several formats",
            metavar="FORMAT",
        )
        _ = export_parser.add_argument(
            "-o",
            "--output",
            type=str,
            help="Folder that receives the '<App> App Icons' directory",
            metavar="OUTPUT",
        )
        _ = export_parser.add_argument(
            "--reveal",
            action="store_true",
            help="Reveal the export folder in Finder afterwards",
        )
        ArgumentParser._add_common_options(export_parser)

        copy_parser = subparsers.add_parser(
            "copy",
            help="Copy an application's icon to the clipboard",
        )
        ArgumentParser._add_app_argument(copy_parser)
        _ = copy_parser.add_argument(
            "-s",
            "--size",
            type=_positive_int,
            help="Icon size in pixels (default: largest configured size)",
            metavar="SIZE",
        )
        ArgumentParser._add_common_options(copy_parser)

        reveal_parser = subparsers.add_parser(
            "reveal",
            help="Reveal an application's export folder in Finder",
        )
        ArgumentParser._add_app_argument(reveal_parser)
        _ = reveal_parser.add_argument(
            "-o",
            "--output",
            type=str,
            help="Folder the icons were exported to",
            metavar="OUTPUT",
        )
        ArgumentParser._add_common_options(reveal_parser)

        return parser

    @staticmethod
    def _add_app_argument(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "app",
            type=str,
            help="Application name, bundle identifier, or path to a .app bundle",
            metavar="APP",
        )

    @staticmethod
    def _add_common_options(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--search-dir",
            dest="search_dirs",
            type=str,
            action="append",
            help="Folder to scan for applications; repeat to scan several",
            metavar="DIR",
        )
        _ = parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Show detailed progress information",
        )
        _ = parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command
        search_dirs = ArgumentParser._resolve_search_dirs(parsed_args, configuration)

        if command == "list":
            return ListArgs(
                command="list",
                filter_text=parsed_args.filter_text,
                search_dirs=search_dirs,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "export":
            return ArgumentParser._process_export(parsed_args, configuration, search_dirs)

        if command == "copy":
            size = parsed_args.size or max(enabled_sizes(configuration.sizes))
            return CopyArgs(
                command="copy",
                app_query=parsed_args.app,
                size=size,
                search_dirs=search_dirs,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "reveal":
            return RevealArgs(
                command="reveal",
                app_query=parsed_args.app,
                output_path=ArgumentParser._resolve_output(parsed_args, configuration),
                search_dirs=search_dirs,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_export(
        parsed_args: argparse.Namespace,
        configuration: Config,
        search_dirs: list[Path] | None,
    ) -> ExportArgs:
        if parsed_args.all_sizes:
            sizes = ALLOWED_SIZES
        else:
            sizes = enabled_sizes(parsed_args.sizes or configuration.sizes)

        formats = enabled_formats(parsed_args.formats or configuration.formats)

        return ExportArgs(
            command="export",
            app_query=parsed_args.app,
            sizes=sizes,
            formats=formats,
            output_path=ArgumentParser._resolve_output(parsed_args, configuration),
            reveal=parsed_args.reveal,
            search_dirs=search_dirs,
            verbose=bool(parsed_args.verbose),
            quiet=bool(parsed_args.quiet),
        )

    @staticmethod
    def _resolve_output(parsed_args: argparse.Namespace, configuration: Config) -> Path | None:
        raw_output: str | None = getattr(parsed_args, "output", None)
        if raw_output and raw_output.strip():
            return Path(raw_output)
        return configuration.output_path

    @staticmethod
    def _resolve_search_dirs(
        parsed_args: argparse.Namespace,
        configuration: Config,
    ) -> list[Path] | None:
        raw_dirs: list[str] | None = getattr(parsed_args, "search_dirs", None)
        if raw_dirs:
            return [Path(entry) for entry in raw_dirs]
        return configuration.search_dirs
