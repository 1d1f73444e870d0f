"""
Summary: Validate token file write, read and existence checks.
Why: Build steps rely on marker files to skip work that is already done.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from filemisc.features.tokens import has_token, read_token, write_token
from filemisc.shared.errors import InvalidArgumentError


def test_empty_token_round_trip(tmp_path: Path) -> None:
    write_token(tmp_path, "flag")

    assert has_token(tmp_path, "flag") is True
    assert read_token(tmp_path, "flag") == ""


def test_token_value_is_utf8_text(tmp_path: Path) -> None:
    write_token(tmp_path, "version", "1.2.3-ß")

    assert (tmp_path / "version").read_bytes() == "1.2.3-ß".encode("utf-8")
    assert read_token(str(tmp_path), "version") == "1.2.3-ß"


def test_write_token_overwrites(tmp_path: Path) -> None:
    write_token(tmp_path, "state", "first")
    write_token(tmp_path, "state", "second")

    assert read_token(tmp_path, "state") == "second"


def test_missing_token(tmp_path: Path) -> None:
    assert read_token(tmp_path, "nope") is None
    assert has_token(tmp_path, "nope") is False


def test_directory_named_like_token_is_not_a_token(tmp_path: Path) -> None:
    (tmp_path / "flag").mkdir()

    assert read_token(tmp_path, "flag") is None
    assert has_token(tmp_path, "flag") is False


def test_write_token_requires_existing_directory(tmp_path: Path) -> None:
    with pytest.raises(InvalidArgumentError):
        write_token(tmp_path / "absent", "flag")

    file_dir = tmp_path / "file"
    _ = file_dir.write_text("", encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        write_token(file_dir, "flag")


def test_nested_token_name_creates_parents(tmp_path: Path) -> None:
    write_token(tmp_path, "sub/flag", "x")

    assert read_token(tmp_path / "sub", "flag") == "x"
