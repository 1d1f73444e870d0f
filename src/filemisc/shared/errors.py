"""
Summary: Exception types raised by filemisc operations.
Why: Let callers tell argument mistakes apart from the OSError family.
"""

from __future__ import annotations


class FileMiscError(Exception):
    """Base class for errors defined by filemisc."""


class InvalidArgumentError(FileMiscError, ValueError):
    """Raised when input is rejected before any filesystem access."""


class UnsupportedFileTypeError(FileMiscError, ValueError):
    """Raised when an entry is neither a regular file nor a directory."""

    path: str

    def __init__(self, path: object) -> None:
        self.path = str(path)
        super().__init__(f"Unknown filetype: {self.path}")


__all__ = ["FileMiscError", "InvalidArgumentError", "UnsupportedFileTypeError"]
