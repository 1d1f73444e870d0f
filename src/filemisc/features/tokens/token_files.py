"""
Summary: Read and write marker files that flag state inside a directory.
Why: Build steps record completion markers such as ``.built`` next to outputs.
"""

from __future__ import annotations

import os
from pathlib import Path

from filemisc.platform.filesystem import as_path, ensure_parent_directory
from filemisc.platform.logging import logger
from filemisc.shared.errors import InvalidArgumentError


def _token_path(directory: str | os.PathLike[str], name: str) -> Path:
    return as_path(directory) / name


def write_token(directory: str | os.PathLike[str], name: str, value: str = "") -> None:
    """Write ``value`` as UTF-8 to ``directory/name``, replacing any previous token.

    Raises:
        InvalidArgumentError: If ``directory`` is not an existing directory.
    """

    if not as_path(directory).is_dir():
        raise InvalidArgumentError(f"Token directory does not exist: {directory}")
    token = _token_path(directory, name)
    _ = ensure_parent_directory(token)
    _ = token.write_text(value, encoding="utf-8")
    logger.debug(
        "Wrote token %s",
        token,
        extra={"fileop_event": "fileop.token.write", "source_path": str(token)},
    )


def read_token(directory: str | os.PathLike[str], name: str) -> str | None:
    """Return the text of ``directory/name``, or None when it is not a file."""

    token = _token_path(directory, name)
    if not token.is_file():
        return None
    return token.read_text(encoding="utf-8")


def has_token(directory: str | os.PathLike[str], name: str) -> bool:
    """Return True iff ``directory/name`` exists as a regular file."""

    return read_token(directory, name) is not None


__all__ = ["has_token", "read_token", "write_token"]
