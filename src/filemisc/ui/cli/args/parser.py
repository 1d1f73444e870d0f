"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from filemisc.config.config import Config
from filemisc.config.paths import default_log_file
from filemisc.platform.logging import logger, setup_logger
from filemisc.ui.cli.args.options import (
    CLIArgs,
    CleanArgs,
    ConcatArgs,
    CopyArgs,
    FlattenArgs,
    ModeArgs,
    TokenArgs,
)


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
            prog="filemisc",
            description="filemisc - copy, clean, flatten, concatenate and mark files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        copy_parser = subparsers.add_parser(
            "copy",
            help="Copy a text file, replacing literal placeholders",
        )
        _ = copy_parser.add_argument("source", type=str, metavar="SRC")
        _ = copy_parser.add_argument("destination", type=str, metavar="DST")
        _ = copy_parser.add_argument(
            "--replace",
            nargs=2,
            action="append",
            default=None,
            metavar=("NEEDLE", "VALUE"),
            help="Replace every literal NEEDLE with VALUE (repeatable)",
        )
        ArgumentParser._add_verbosity_flags(copy_parser)

        clean_parser = subparsers.add_parser(
            "clean",
            help="Delete a file or directory and recreate it as an empty directory",
        )
        _ = clean_parser.add_argument("path", type=str, metavar="PATH")
        ArgumentParser._add_verbosity_flags(clean_parser)

        flatten_parser = subparsers.add_parser(
            "flatten",
            help="Move a directory's children up one level and remove it",
        )
        _ = flatten_parser.add_argument("directory", type=str, metavar="DIR")
        ArgumentParser._add_verbosity_flags(flatten_parser)

        concat_parser = subparsers.add_parser(
            "concat",
            help="Concatenate files byte-for-byte into DST",
        )
        _ = concat_parser.add_argument("destination", type=str, metavar="DST")
        _ = concat_parser.add_argument("sources", type=str, nargs="+", metavar="SRC")
        ArgumentParser._add_verbosity_flags(concat_parser)

        mode_parser = subparsers.add_parser(
            "mode",
            help="Print the octal permission mode of a path",
        )
        _ = mode_parser.add_argument("path", type=str, metavar="PATH")
        ArgumentParser._add_verbosity_flags(mode_parser)

        token_parser = subparsers.add_parser(
            "token",
            help="Write, read or test a token file inside a directory",
        )
        _ = token_parser.add_argument("action", choices=["write", "read", "has"])
        _ = token_parser.add_argument("directory", type=str, metavar="DIR")
        _ = token_parser.add_argument("name", type=str, metavar="NAME")
        _ = token_parser.add_argument(
            "value",
            type=str,
            nargs="?",
            default="",
            metavar="VALUE",
            help="Token content for 'write' (default: empty)",
        )
        ArgumentParser._add_verbosity_flags(token_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed operation logs",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors and requested values",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If required paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        configuration = Config.load()

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = configuration.log_level_number

        log_file_path = configuration.log_file or default_log_file()
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "copy":
            return ArgumentParser._process_copy(parsed_args)
        if command == "clean":
            return CleanArgs(command="clean", path=Path(parsed_args.path), quiet=is_quiet)
        if command == "flatten":
            return ArgumentParser._process_flatten(parsed_args)
        if command == "concat":
            return ArgumentParser._process_concat(parsed_args)
        if command == "mode":
            return ArgumentParser._process_mode(parsed_args)
        if command == "token":
            return TokenArgs(
                command="token",
                action=parsed_args.action,
                directory=Path(parsed_args.directory),
                name=parsed_args.name,
                value=parsed_args.value,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_copy(parsed_args: argparse.Namespace) -> CopyArgs:
        source = Path(parsed_args.source)
        if not source.is_file():
            logger.error("Source file does not exist: %s", source)
            sys.exit(1)

        pairs: list[list[str]] = parsed_args.replace or []
        return CopyArgs(
            command="copy",
            source=source,
            destination=Path(parsed_args.destination),
            replacements=[(needle, value) for needle, value in pairs],
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_flatten(parsed_args: argparse.Namespace) -> FlattenArgs:
        directory = Path(parsed_args.directory)
        if not directory.is_dir():
            logger.error("Directory does not exist: %s", directory)
            sys.exit(1)
        return FlattenArgs(command="flatten", directory=directory, quiet=parsed_args.quiet)

    @staticmethod
    def _process_concat(parsed_args: argparse.Namespace) -> ConcatArgs:
        sources = [Path(source) for source in parsed_args.sources]
        missing = [source for source in sources if not source.is_file()]
        if missing:
            logger.error("Source files do not exist: %s", ", ".join(str(m) for m in missing))
            sys.exit(1)
        return ConcatArgs(
            command="concat",
            destination=Path(parsed_args.destination),
            sources=sources,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_mode(parsed_args: argparse.Namespace) -> ModeArgs:
        path = Path(parsed_args.path)
        if not path.exists():
            logger.error("Path does not exist: %s", path)
            sys.exit(1)
        return ModeArgs(command="mode", path=path, quiet=parsed_args.quiet)
