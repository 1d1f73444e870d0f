"""Where: src/filemisc/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from filemisc.config.config import COPY_CHUNK_SIZE_DEFAULT, Config

app_config = Config.load()

_copy_chunk_size = getattr(app_config, "copy_chunk_size", COPY_CHUNK_SIZE_DEFAULT)
COPY_CHUNK_SIZE: int = (
    _copy_chunk_size
    if isinstance(_copy_chunk_size, int) and _copy_chunk_size > 0
    else COPY_CHUNK_SIZE_DEFAULT
)

LOG_LEVEL: int = app_config.log_level_number


__all__ = ["COPY_CHUNK_SIZE", "LOG_LEVEL"]
