"""Command execution package for CLI."""

from filemisc.ui.cli.commands.directory import CleanCommand, FlattenCommand
from filemisc.ui.cli.commands.executor import CommandExecutor
from filemisc.ui.cli.commands.file import ConcatCommand, CopyCommand, ModeCommand
from filemisc.ui.cli.commands.token import TokenCommand

__all__ = [
    "CleanCommand",
    "CommandExecutor",
    "ConcatCommand",
    "CopyCommand",
    "FlattenCommand",
    "ModeCommand",
    "TokenCommand",
]
