"""Posix permission sets and octal file modes."""

from .posix_permission import (
    PosixFilePermission,
    apply_permissions,
    has_full_executable,
    permissions_from_mode,
    read_permissions,
    to_octal_mode_int,
    to_octal_mode_string,
)

__all__ = [
    "PosixFilePermission",
    "apply_permissions",
    "has_full_executable",
    "permissions_from_mode",
    "read_permissions",
    "to_octal_mode_int",
    "to_octal_mode_string",
]
