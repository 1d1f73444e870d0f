"""
Summary: Execute the file-level commands: copy, concat and mode.
Why: Map single-file operations onto the shared executor.
"""

from typing import override

from filemisc.features.concatenation import concat
from filemisc.features.permissions import (
    has_full_executable,
    read_permissions,
    to_octal_mode_string,
)
from filemisc.features.templating import copy_file
from filemisc.ui.cli.args.options import ConcatArgs, CopyArgs, ModeArgs
from filemisc.ui.cli.commands.executor import CommandExecutor
from filemisc.ui.cli.models import CommandResult


class CopyCommand(CommandExecutor[CopyArgs]):
    """Command for templated file copies."""

    @override
    def run(self) -> CommandResult:
        copy_file(self.args.source, self.args.destination, self.args.replacements)
        return CommandResult(
            success=True,
            message=f"Copied {self.args.source} to {self.args.destination}",
        )


class ConcatCommand(CommandExecutor[ConcatArgs]):
    """Command for concatenating files."""

    @override
    def run(self) -> CommandResult:
        concat(self.args.sources, self.args.destination)
        return CommandResult(
            success=True,
            message=f"Concatenated {len(self.args.sources)} files into {self.args.destination}",
        )


class ModeCommand(CommandExecutor[ModeArgs]):
    """Command printing the octal mode of a path."""

    @override
    def run(self) -> CommandResult:
        permissions = read_permissions(self.args.path)
        full = "yes" if has_full_executable(permissions) else "no"
        return CommandResult(
            success=True,
            message=f"{self.args.path} (fully executable: {full})",
            output=to_octal_mode_string(permissions),
        )
