"""Shared pytest fixtures isolating configuration and logging state."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from filemisc.config.config import Config
from filemisc.platform.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config and log locations at a temporary directory."""

    config_file = tmp_path / "config" / "filemisc.toml"
    monkeypatch.setenv("FILEMISC_CONFIG", str(config_file))
    monkeypatch.setenv("FILEMISC_LOG_DIR", str(tmp_path / "logs"))
    Config.reset()
    try:
        yield config_file
    finally:
        Config.reset()


@pytest.fixture(autouse=True)
def _clean_logger() -> Iterator[None]:
    """Detach handlers added by ``setup_logger`` between tests."""

    pkg = logging.getLogger(LOGGER_NAME)
    original_handlers = list(pkg.handlers)
    original_propagate = pkg.propagate
    try:
        yield
    finally:
        for handler in list(pkg.handlers):
            if handler not in original_handlers:
                handler.close()
        pkg.handlers[:] = original_handlers
        pkg.propagate = original_propagate
        pkg.setLevel(logging.NOTSET)
