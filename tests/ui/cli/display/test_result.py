"""Tests for CLI result rendering."""

from io import StringIO

from rich.console import Console

from filemisc.ui.cli.display import ResultDisplay
from filemisc.ui.cli.models import CommandResult


def _display() -> tuple[ResultDisplay, StringIO, StringIO]:
    out, err = StringIO(), StringIO()
    display = ResultDisplay(
        console=Console(file=out, width=200),
        error_console=Console(file=err, width=200),
    )
    return display, out, err


def test_success_prints_message_and_output() -> None:
    display, out, err = _display()

    display.show_result(CommandResult(success=True, message="Read token [x]", output="1.0"))

    assert out.getvalue() == "1.0\n✓ Read token [x]\n"
    assert err.getvalue() == ""


def test_quiet_success_prints_only_output() -> None:
    display, out, _ = _display()

    display.show_result(CommandResult(success=True, message="done", output="755"), quiet=True)
    display.show_result(CommandResult(success=True, message="done"), quiet=True)

    assert out.getvalue() == "755\n"


def test_failure_goes_to_error_console_even_when_quiet() -> None:
    display, out, err = _display()

    display.show_result(CommandResult(success=False, message="Token not found"), quiet=True)

    assert out.getvalue() == ""
    assert err.getvalue() == "✗ Token not found\n"
