"""Command line interface for filemisc."""

import sys
from typing import Any, final

from filemisc.platform.logging import logger
from filemisc.ui.cli.args import (
    ArgumentParser,
    CLIArgs,
    CleanArgs,
    ConcatArgs,
    CopyArgs,
    FlattenArgs,
    ModeArgs,
    TokenArgs,
)
from filemisc.ui.cli.commands import (
    CleanCommand,
    CommandExecutor,
    ConcatCommand,
    CopyCommand,
    FlattenCommand,
    ModeCommand,
    TokenCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor[Any]:
        """Return the executor for ``args``."""
        match args:
            case CopyArgs():
                return CopyCommand(args)
            case CleanArgs():
                return CleanCommand(args)
            case FlattenArgs():
                return FlattenCommand(args)
            case ConcatArgs():
                return ConcatCommand(args)
            case ModeArgs():
                return ModeCommand(args)
            case TokenArgs():
                return TokenCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            result = CommandProcessor.build_command(args).execute()
            if not result.success:
                sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failing commands call
        ``sys.exit(...)`` instead of returning.
    """
    CommandProcessor.process_command()
    return 0
