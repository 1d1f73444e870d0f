"""
Summary: Execute the directory-level commands: clean and flatten.
Why: Keep directory mutations behind the shared executor error handling.
"""

from typing import override

from filemisc.features.directories import clean_dir, flatten
from filemisc.ui.cli.args.options import CleanArgs, FlattenArgs
from filemisc.ui.cli.commands.executor import CommandExecutor
from filemisc.ui.cli.models import CommandResult


class CleanCommand(CommandExecutor[CleanArgs]):
    """Command resetting a path to an empty directory."""

    @override
    def run(self) -> CommandResult:
        clean_dir(self.args.path)
        return CommandResult(success=True, message=f"Cleaned {self.args.path}")


class FlattenCommand(CommandExecutor[FlattenArgs]):
    """Command flattening a directory into its parent."""

    @override
    def run(self) -> CommandResult:
        flatten(self.args.directory)
        return CommandResult(
            success=True,
            message=f"Flattened {self.args.directory} into {self.args.directory.parent}",
        )
