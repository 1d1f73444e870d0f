# Where: filemisc.shared.__init__
# What: Provide a concise import surface for shared errors and text helpers.
# Why: Encourage consistent reuse of shared helpers across features.

"""Shared cross-cutting utilities exposed at the package level."""

from .errors import FileMiscError, InvalidArgumentError, UnsupportedFileTypeError
from .text import quote, to_unix_newline

__all__ = [
    "FileMiscError",
    "InvalidArgumentError",
    "UnsupportedFileTypeError",
    "quote",
    "to_unix_newline",
]
