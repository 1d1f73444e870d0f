"""src/filemisc/ui/cli/display/result.py
What: Render user-facing summaries for CLI commands.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from filemisc.ui.cli.models import CommandResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console
    error_console: Console

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def show_result(self, result: CommandResult, quiet: bool = False) -> None:
        """Display a command result.

        Requested values are printed even when ``quiet`` is set; status
        lines are printed for failures, and for successes unless quiet.

        Args:
            result: Command outcome to render.
            quiet: Whether to suppress non-error status output.
        """
        if result.output is not None:
            self.console.print(result.output, markup=False, highlight=False)

        if not result.success:
            self.error_console.print(f"[red]✗[/red] {escape(result.message)}", highlight=False)
            return

        if not quiet:
            self.console.print(f"[green]✓[/green] {escape(result.message)}", highlight=False)
