"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class CopyArgs:
    """Arguments for the ``copy`` subcommand."""

    command: Literal["copy"]
    source: Path
    destination: Path
    replacements: list[tuple[str, str]] = field(default_factory=list)
    quiet: bool = False


@final
@dataclass(slots=True)
class CleanArgs:
    """Arguments for the ``clean`` subcommand."""

    command: Literal["clean"]
    path: Path
    quiet: bool = False


@final
@dataclass(slots=True)
class FlattenArgs:
    """Arguments for the ``flatten`` subcommand."""

    command: Literal["flatten"]
    directory: Path
    quiet: bool = False


@final
@dataclass(slots=True)
class ConcatArgs:
    """Arguments for the ``concat`` subcommand."""

    command: Literal["concat"]
    destination: Path
    sources: list[Path]
    quiet: bool = False


@final
@dataclass(slots=True)
class ModeArgs:
    """Arguments for the ``mode`` subcommand."""

    command: Literal["mode"]
    path: Path
    quiet: bool = False


@final
@dataclass(slots=True)
class TokenArgs:
    """Arguments for the ``token`` subcommand."""

    command: Literal["token"]
    action: Literal["write", "read", "has"]
    directory: Path
    name: str
    value: str = ""
    quiet: bool = False


CLIArgs = CopyArgs | CleanArgs | FlattenArgs | ConcatArgs | ModeArgs | TokenArgs

__all__ = [
    "CLIArgs",
    "CleanArgs",
    "ConcatArgs",
    "CopyArgs",
    "FlattenArgs",
    "ModeArgs",
    "TokenArgs",
]
