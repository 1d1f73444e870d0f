"""
Summary: Execute token file writes, reads and existence checks.
Why: Let shell build steps share marker files with Python callers.
"""

from typing import override

from filemisc.features.tokens import has_token, read_token, write_token
from filemisc.ui.cli.args.options import TokenArgs
from filemisc.ui.cli.commands.executor import CommandExecutor
from filemisc.ui.cli.models import CommandResult


class TokenCommand(CommandExecutor[TokenArgs]):
    """Command for token files; a missing token is reported as a failure."""

    @override
    def run(self) -> CommandResult:
        directory = self.args.directory
        name = self.args.name

        if self.args.action == "write":
            write_token(directory, name, self.args.value)
            return CommandResult(success=True, message=f"Wrote token {directory / name}")

        if self.args.action == "read":
            value = read_token(directory, name)
            if value is None:
                return CommandResult(success=False, message=f"Token not found: {directory / name}")
            return CommandResult(success=True, message=f"Read token {directory / name}", output=value)

        present = has_token(directory, name)
        return CommandResult(
            success=present,
            message=f"Token {'present' if present else 'not found'}: {directory / name}",
        )
