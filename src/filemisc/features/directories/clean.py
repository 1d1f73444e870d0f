"""
Summary: Reset a path to an existing, empty directory.
Why: Build outputs are rebuilt from scratch even when a stale file is locked.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from filemisc.platform.filesystem import EntryKind, as_path, classify, ensure_directory, iter_children
from filemisc.platform.logging import logger


def clean_dir(path: str | os.PathLike[str]) -> None:
    """Delete ``path`` if it exists, then recreate it as an empty directory.

    A regular file or a symlink (even one pointing at a directory) is
    removed without touching its target. A directory is removed recursively; when
    that fails, each immediate child is deleted on its own instead and any
    child that still resists is left in place. The directory is always
    recreated, with missing parents, before returning.
    """

    target = as_path(path)
    if target.is_symlink() or target.is_file():
        target.unlink()
    elif target.is_dir():
        try:
            shutil.rmtree(target)
        except OSError as exc:
            logger.warning(
                "Could not remove %s (%s); deleting its contents instead",
                target,
                exc,
                extra={
                    "fileop_event": "fileop.clean.fallback",
                    "source_path": str(target),
                    "error_message": str(exc),
                },
            )
            _delete_children(target)
    _ = ensure_directory(target)
    logger.debug(
        "Cleaned %s",
        target,
        extra={"fileop_event": "fileop.clean", "source_path": str(target)},
    )


def _delete_children(directory: Path) -> None:
    """Best-effort removal of every direct child of ``directory``."""

    try:
        children = list(iter_children(directory))
    except OSError as exc:
        logger.warning("Could not list %s: %s", directory, exc)
        return

    for child in children:
        try:
            if not child.is_symlink() and classify(child) is EntryKind.DIRECTORY:
                shutil.rmtree(child)
            else:
                child.unlink()
        except OSError as exc:
            logger.warning("Could not delete %s: %s", child, exc)


__all__ = ["clean_dir"]
