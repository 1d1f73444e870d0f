"""
Summary: Validate flattening a directory into its parent.
Why: Children must move intact and unsupported entries must stop the run.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from filemisc.features.directories import flatten
from filemisc.shared.errors import UnsupportedFileTypeError


def test_flatten_moves_children_and_removes_directory(tmp_path: Path) -> None:
    to_flatten = tmp_path / "toFlatten"
    (to_flatten / "child2").mkdir(parents=True)
    _ = (to_flatten / "child1").write_text("one", encoding="utf-8")
    _ = (to_flatten / "child2" / "inner.txt").write_text("inner", encoding="utf-8")

    flatten(to_flatten)

    assert not to_flatten.exists()
    assert (tmp_path / "child1").read_text(encoding="utf-8") == "one"
    assert (tmp_path / "child2" / "inner.txt").read_text(encoding="utf-8") == "inner"


def test_flatten_empty_directory_just_removes_it(tmp_path: Path) -> None:
    to_flatten = tmp_path / "empty"
    to_flatten.mkdir()

    flatten(str(to_flatten))

    assert not to_flatten.exists()
    assert list(tmp_path.iterdir()) == []


def test_flatten_rejects_broken_symlink(tmp_path: Path) -> None:
    to_flatten = tmp_path / "toFlatten"
    to_flatten.mkdir()
    (to_flatten / "dangling").symlink_to(tmp_path / "nowhere")

    with pytest.raises(UnsupportedFileTypeError, match="dangling"):
        flatten(to_flatten)

    assert to_flatten.exists()


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs unavailable")
def test_flatten_rejects_fifo(tmp_path: Path) -> None:
    to_flatten = tmp_path / "toFlatten"
    to_flatten.mkdir()
    os.mkfifo(to_flatten / "pipe")

    with pytest.raises(UnsupportedFileTypeError):
        flatten(to_flatten)


def test_flatten_refuses_to_overwrite_sibling(tmp_path: Path) -> None:
    to_flatten = tmp_path / "toFlatten"
    to_flatten.mkdir()
    _ = (to_flatten / "a.txt").write_text("new", encoding="utf-8")
    _ = (to_flatten / "b.txt").write_text("new", encoding="utf-8")
    _ = (tmp_path / "b.txt").write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        flatten(to_flatten)

    # Earlier moves are not rolled back.
    assert (tmp_path / "a.txt").read_text(encoding="utf-8") == "new"
    assert (tmp_path / "b.txt").read_text(encoding="utf-8") == "existing"
    assert (to_flatten / "b.txt").exists()


def test_flatten_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        flatten(tmp_path / "absent")
