"""
Summary: Copy a text file while substituting literal placeholders.
Why: Build scripts stamp values like ``%version%`` into templated resources.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import TypeAlias

from filemisc.platform.filesystem import as_path, ensure_parent_directory
from filemisc.platform.logging import logger
from filemisc.shared.errors import InvalidArgumentError
from filemisc.shared.text import UNIX_NEWLINE

Replacements: TypeAlias = Mapping[str, str] | Iterable[tuple[str, str]] | Sequence[str]


def replacement_map(replacements: Replacements) -> dict[str, str]:
    """Normalise ``replacements`` into an ordered needle-to-value mapping.

    Accepts a mapping, an iterable of ``(needle, value)`` pairs, or a flat
    sequence ``[needle1, value1, needle2, value2, ...]``. The last value
    given for a repeated needle wins.

    Raises:
        InvalidArgumentError: If a flat sequence has odd length or a pair
            entry is not two strings.
    """

    if isinstance(replacements, Mapping):
        return {str(needle): str(value) for needle, value in replacements.items()}
    if isinstance(replacements, str):
        raise InvalidArgumentError("Replacements must be a sequence, not a single string")

    entries = list(replacements)
    if entries and all(isinstance(entry, str) for entry in entries):
        if len(entries) % 2 != 0:
            raise InvalidArgumentError(
                f"Replacement list must have an even length, got {len(entries)}"
            )
        return {entries[i]: entries[i + 1] for i in range(0, len(entries), 2)}

    mapping: dict[str, str] = {}
    for entry in entries:
        if (
            isinstance(entry, str)
            or not isinstance(entry, Sequence)
            or len(entry) != 2
            or not all(isinstance(part, str) for part in entry)
        ):
            raise InvalidArgumentError(f"Replacement entry must be a (needle, value) pair: {entry!r}")
        needle, value = entry
        mapping[needle] = value
    return mapping


def _read_joined_lines(path: Path) -> str:
    # Universal-newline decoding maps \r\n and \r to \n.
    text = path.read_text(encoding="utf-8")
    if text.endswith(UNIX_NEWLINE):
        text = text[: -len(UNIX_NEWLINE)]
    return text


def copy_file(
    src: str | os.PathLike[str],
    dst: str | os.PathLike[str],
    replacements: Replacements = (),
) -> None:
    """Copy ``src`` to ``dst`` replacing each literal needle along the way.

    The source is read as UTF-8 lines and rejoined with ``\\n``, so line
    endings are normalised and a trailing terminator is dropped. Parent
    directories of ``dst`` are created and any existing file is replaced.

    Example::

        copy_file(src, dst, [("%username%", "lskywalker"), ("%lastname%", "Skywalker")])
    """

    mapping = replacement_map(replacements)
    src_path = as_path(src)
    dst_path = as_path(dst)

    content = _read_joined_lines(src_path)
    for needle, value in mapping.items():
        content = content.replace(needle, value)

    _ = ensure_parent_directory(dst_path)
    _ = dst_path.write_bytes(content.encode("utf-8"))
    logger.debug(
        "Copied %s -> %s (%d replacements)",
        src_path,
        dst_path,
        len(mapping),
        extra={
            "fileop_event": "fileop.copy",
            "source_path": str(src_path),
            "target_path": str(dst_path),
            "count": len(mapping),
        },
    )


__all__ = ["Replacements", "copy_file", "replacement_map"]
