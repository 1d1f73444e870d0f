"""Smoke tests for unified entry points.

These tests assert that `python -m filemisc` and the console script
both resolve to the CLI's `main` function exposed under `filemisc.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m filemisc` path exposes a `main` callable."""
    m = import_module("filemisc.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `filemisc.ui.cli:main` and is importable."""
    m = import_module("filemisc.ui.cli")
    assert hasattr(m, "main")


def test_package_exports_public_functions() -> None:
    """The top-level package re-exports every file operation."""
    import filemisc

    for name in filemisc.__all__:
        assert hasattr(filemisc, name), name
