"""
Summary: Convert between Posix permission sets and chmod-style octal modes.
Why: Archive and installer tasks record file modes as octal numbers.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from enum import Enum
from typing import Final

from filemisc.platform.filesystem import as_path

PERMISSION_MASK: Final[int] = 0o777


class PosixFilePermission(Enum):
    """The nine rwx permission bits; each member's value is its mode bit."""

    OWNER_READ = 0o400
    OWNER_WRITE = 0o200
    OWNER_EXECUTE = 0o100
    GROUP_READ = 0o040
    GROUP_WRITE = 0o020
    GROUP_EXECUTE = 0o010
    OTHERS_READ = 0o004
    OTHERS_WRITE = 0o002
    OTHERS_EXECUTE = 0o001

    @property
    def bit(self) -> int:
        return self.value


EXECUTE_PERMISSIONS: Final[frozenset[PosixFilePermission]] = frozenset(
    {
        PosixFilePermission.OWNER_EXECUTE,
        PosixFilePermission.GROUP_EXECUTE,
        PosixFilePermission.OTHERS_EXECUTE,
    }
)


def to_octal_mode_int(permissions: Iterable[PosixFilePermission]) -> int:
    """Return the chmod-style mode for ``permissions``, in ``[0, 0o777]``."""

    result = 0
    for permission in permissions:
        result |= permission.bit
    return result


def to_octal_mode_string(permissions: Iterable[PosixFilePermission]) -> str:
    """Return the mode as an unprefixed octal string, e.g. ``"751"``."""

    return format(to_octal_mode_int(permissions), "o")


def has_full_executable(permissions: Iterable[PosixFilePermission]) -> bool:
    """Return True only if owner, group and others may all execute."""

    return EXECUTE_PERMISSIONS <= frozenset(permissions)


def permissions_from_mode(mode: int) -> frozenset[PosixFilePermission]:
    """Return the permission set encoded in ``mode``, ignoring bits above 0o777."""

    masked = mode & PERMISSION_MASK
    return frozenset(p for p in PosixFilePermission if masked & p.bit)


def read_permissions(path: str | os.PathLike[str]) -> frozenset[PosixFilePermission]:
    """Return the current permission set of ``path``."""

    return permissions_from_mode(stat.S_IMODE(as_path(path).stat().st_mode))


def apply_permissions(
    path: str | os.PathLike[str], permissions: Iterable[PosixFilePermission]
) -> None:
    """Set the rwx bits of ``path`` to exactly ``permissions``."""

    os.chmod(as_path(path), to_octal_mode_int(permissions))


__all__ = [
    "EXECUTE_PERMISSIONS",
    "PERMISSION_MASK",
    "PosixFilePermission",
    "apply_permissions",
    "has_full_executable",
    "permissions_from_mode",
    "read_permissions",
    "to_octal_mode_int",
    "to_octal_mode_string",
]
