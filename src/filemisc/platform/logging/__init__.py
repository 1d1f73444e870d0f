"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the package logger, setup helper, and the Rich handler.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import FileOpRichHandler

__all__ = [
    "FileOpRichHandler",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
