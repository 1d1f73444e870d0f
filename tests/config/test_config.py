"""Test configuration management."""

from pathlib import Path

import logging

import pytest

from filemisc.config.config import COPY_CHUNK_SIZE_DEFAULT, Config
from filemisc.config.paths import default_config_path


def test_default_config_without_file(isolated_config: Path) -> None:
    """A missing config file yields defaults and is not created."""
    config = Config.load()

    assert config.log_file is None
    assert config.log_level == "INFO"
    assert config.copy_chunk_size == COPY_CHUNK_SIZE_DEFAULT
    assert not isolated_config.exists()


def test_save_load_toml(isolated_config: Path) -> None:
    """Saving and reloading keeps every field."""
    original = Config(
        log_file=Path("/test/logs/filemisc.log"),
        log_level="DEBUG",
        copy_chunk_size=4096,
    )
    written = original.save()
    assert written == isolated_config.resolve() == default_config_path()

    Config.reset()
    loaded = Config.load()

    assert loaded.log_file == Path("/test/logs/filemisc.log")
    assert loaded.log_level == "DEBUG"
    assert loaded.copy_chunk_size == 4096


def test_save_none_log_file_round_trips(isolated_config: Path) -> None:
    _ = Config(log_file=None).save()

    Config.reset()
    assert Config.load().log_file is None
    assert "log_file =" not in isolated_config.read_text(encoding="utf-8")


def test_toml_comments(isolated_config: Path) -> None:
    _ = Config(log_file=Path("/var/log/x.log")).save()

    content = isolated_config.read_text(encoding="utf-8")
    assert "# filemisc configuration file" in content
    assert "# Log file path" in content
    assert 'log_file = "/var/log/x.log"' in content


def test_singleton_behavior(isolated_config: Path) -> None:
    _ = isolated_config
    first = Config.load()
    second = Config.load()
    assert second is first


def test_load_explicit_path(tmp_path: Path) -> None:
    custom = tmp_path / "custom.toml"
    _ = custom.write_text('log_level = "WARNING"\n', encoding="utf-8")

    loaded = Config.load(custom)

    assert loaded.log_level == "WARNING"
    assert loaded.log_level_number == logging.WARNING


def test_unknown_keys_are_ignored(isolated_config: Path, caplog: pytest.LogCaptureFixture) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('base_path = "/music"\nlog_level = "ERROR"\n', encoding="utf-8")
    caplog.set_level("WARNING", logger="filemisc")

    loaded = Config.load()

    assert loaded.log_level == "ERROR"
    assert any("base_path" in message for message in caplog.messages)


def test_invalid_toml_raises(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text("log_level = \n", encoding="utf-8")

    with pytest.raises(ValueError):
        _ = Config.load()


def test_unknown_log_level_falls_back_to_info() -> None:
    assert Config(log_level="chatty").log_level_number == logging.INFO


def test_non_string_log_level_falls_back_to_info() -> None:
    assert Config(log_level=10).log_level_number == logging.INFO  # pyright: ignore[reportArgumentType]
