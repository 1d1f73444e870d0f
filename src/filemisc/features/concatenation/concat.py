"""
Summary: Concatenate files byte-for-byte into a destination file.
Why: Bundles and installers are assembled from ordered binary parts.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterable

from filemisc.config import settings
from filemisc.platform.filesystem import as_path
from filemisc.platform.logging import logger


def concat(files: Iterable[str | os.PathLike[str]], dst: str | os.PathLike[str]) -> None:
    """Write the raw contents of ``files``, in order, to ``dst``.

    ``dst`` is created or truncated. Each source is closed before the
    next one is opened. If a source fails, ``dst`` keeps the bytes already
    written.
    """

    dst_path = as_path(dst)
    count = 0
    with open(dst_path, "wb") as out:
        for file in files:
            with open(as_path(file), "rb") as handle:
                shutil.copyfileobj(handle, out, settings.COPY_CHUNK_SIZE)
            count += 1
    logger.debug(
        "Concatenated %d files into %s",
        count,
        dst_path,
        extra={
            "fileop_event": "fileop.concat",
            "target_path": str(dst_path),
            "count": count,
        },
    )


__all__ = ["concat"]
