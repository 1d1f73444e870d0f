"""Command line argument handling package."""

from filemisc.ui.cli.args.parser import ArgumentParser
from filemisc.ui.cli.args.options import (
    CLIArgs,
    CleanArgs,
    ConcatArgs,
    CopyArgs,
    FlattenArgs,
    ModeArgs,
    TokenArgs,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "CleanArgs",
    "ConcatArgs",
    "CopyArgs",
    "FlattenArgs",
    "ModeArgs",
    "TokenArgs",
]
