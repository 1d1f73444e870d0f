"""filemisc: small static helpers for copying, cleaning and marking files.

Every function is independent and synchronous; none of them lock, retry
or cache. Callers must not run two operations against the same path
concurrently.
"""

from filemisc.features.concatenation import concat
from filemisc.features.directories import clean_dir, flatten
from filemisc.features.permissions import (
    PosixFilePermission,
    apply_permissions,
    has_full_executable,
    permissions_from_mode,
    read_permissions,
    to_octal_mode_int,
    to_octal_mode_string,
)
from filemisc.features.templating import copy_file, replacement_map
from filemisc.features.tokens import has_token, read_token, write_token
from filemisc.shared import (
    FileMiscError,
    InvalidArgumentError,
    UnsupportedFileTypeError,
    quote,
    to_unix_newline,
)

__version__ = "0.1.0"

__all__ = [
    "FileMiscError",
    "InvalidArgumentError",
    "PosixFilePermission",
    "UnsupportedFileTypeError",
    "apply_permissions",
    "clean_dir",
    "concat",
    "copy_file",
    "flatten",
    "has_full_executable",
    "has_token",
    "permissions_from_mode",
    "quote",
    "read_permissions",
    "read_token",
    "replacement_map",
    "to_octal_mode_int",
    "to_octal_mode_string",
    "to_unix_newline",
    "write_token",
]
