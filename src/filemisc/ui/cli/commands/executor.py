"""
Summary: Provide shared wiring for CLI command executors.
Why: Reuse error handling and presentation across commands.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from filemisc.platform.logging import logger
from filemisc.shared.errors import FileMiscError
from filemisc.ui.cli.args.options import CLIArgs
from filemisc.ui.cli.display.result import ResultDisplay
from filemisc.ui.cli.models import CommandResult

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    result_display: ResultDisplay

    def __init__(self, args: ArgsT, result_display: ResultDisplay | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            result_display: Display used for the outcome. Defaults to a new one.
        """
        self.args = args
        self.result_display = result_display or ResultDisplay()

    @abstractmethod
    def run(self) -> CommandResult:
        """Perform the operation.

        Returns:
            The outcome to display.
        """

    def execute(self) -> CommandResult:
        """Run the command, convert library failures, and display the outcome."""
        try:
            result = self.run()
        except (FileMiscError, OSError) as exc:
            logger.error("%s failed: %s", self.args.command, exc)
            result = CommandResult(success=False, message=str(exc))
        self.result_display.show_result(result, quiet=self.args.quiet)
        return result
