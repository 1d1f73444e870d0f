"""Where: src/filemisc/platform/filesystem.py
What: Small filesystem primitives shared by the feature modules.
Why: Keep directory creation and entry classification in one place.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Classification of a directory entry after following symlinks."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


def as_path(value: str | os.PathLike[str]) -> Path:
    """Coerce a caller-supplied path-like into a ``Path``."""

    return value if isinstance(value, Path) else Path(value)


def ensure_directory(path: Path) -> Path:
    """Create ``path`` and any missing parents, returning it."""

    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_parent_directory(path: Path) -> Path:
    """Create the parent chain of ``path``, returning the parent."""

    return ensure_directory(path.parent)


def classify(path: Path) -> EntryKind:
    """Return the kind of ``path``, following symlinks.

    Broken symlinks, FIFOs, sockets and device nodes are ``OTHER``.
    """

    try:
        mode = path.stat().st_mode
    except FileNotFoundError:
        return EntryKind.OTHER
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def iter_children(directory: Path) -> Iterator[Path]:
    """Yield the direct children of ``directory`` in name order."""

    yield from sorted(directory.iterdir(), key=lambda child: child.name)


__all__ = [
    "EntryKind",
    "as_path",
    "classify",
    "ensure_directory",
    "ensure_parent_directory",
    "iter_children",
]
