"""
Summary: Replace a directory with its own children one level up.
Why: Archive extraction often leaves a redundant top-level folder behind.
"""

from __future__ import annotations

import os
import shutil

from filemisc.platform.filesystem import EntryKind, as_path, classify, iter_children
from filemisc.platform.logging import logger
from filemisc.shared.errors import UnsupportedFileTypeError


def flatten(directory: str | os.PathLike[str]) -> None:
    """Move every child of ``directory`` into its parent, then remove it.

    Example::

        before:                 after:
            root/                   root/
                toFlatten/              child1
                    child1              child2
                    child2

    Raises:
        UnsupportedFileTypeError: A child is neither a file nor a directory.
        FileExistsError: The parent already holds an entry with a child's name.
        OSError: Any move or the final removal fails. Moves already made
            are kept.
    """

    source = as_path(directory)
    parent = source.parent
    moved = 0
    for child in iter_children(source):
        if classify(child) is EntryKind.OTHER:
            raise UnsupportedFileTypeError(child)
        destination = parent / child.name
        if destination.exists() or destination.is_symlink():
            raise FileExistsError(f"Destination already exists: {destination}")
        _ = shutil.move(str(child), str(destination))
        moved += 1

    source.rmdir()
    logger.debug(
        "Flattened %s into %s",
        source,
        parent,
        extra={
            "fileop_event": "fileop.flatten",
            "source_path": str(source),
            "target_path": str(parent),
            "count": moved,
        },
    )


__all__ = ["flatten"]
