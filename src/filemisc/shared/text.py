"""
Summary: Newline normalisation and space-aware quoting for strings and paths.
Why: Generated scripts and templates need stable line endings and quoted paths.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

UNIX_NEWLINE: str = "\n"

_WINDOWS_NEWLINE_RUN = re.compile(r"\r+\n")


def to_unix_newline(text: str) -> str:
    """Replace every ``\\r\\n`` in ``text`` with ``\\n``.

    A run such as ``\\r\\r\\n`` collapses to one ``\\n`` so a second pass
    never finds a new ``\\r\\n``.
    """

    return _WINDOWS_NEWLINE_RUN.sub(UNIX_NEWLINE, text)


def quote(value: str | os.PathLike[str]) -> str:
    """Wrap ``value`` in double quotes when it contains a space.

    Paths are converted to their absolute form first. Embedded quotes and
    other shell metacharacters are left untouched.
    """

    if isinstance(value, os.PathLike):
        value = str(Path(value).absolute())
    if " " in value:
        return f'"{value}"'
    return value


__all__ = ["UNIX_NEWLINE", "quote", "to_unix_newline"]
