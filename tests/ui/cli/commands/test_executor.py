"""Tests for command executors."""

from pathlib import Path
from unittest.mock import MagicMock

from pytest_mock import MockerFixture

from filemisc.ui.cli.args.options import CleanArgs, FlattenArgs, ModeArgs, TokenArgs
from filemisc.ui.cli.commands import CleanCommand, FlattenCommand, ModeCommand, TokenCommand
from filemisc.ui.cli.display import ResultDisplay


def _display() -> MagicMock:
    return MagicMock(spec=ResultDisplay)


def test_execute_reports_success(tmp_path: Path) -> None:
    display = _display()
    args = CleanArgs(command="clean", path=tmp_path / "build")

    result = CleanCommand(args, display).execute()

    assert result.success
    assert (tmp_path / "build").is_dir()
    display.show_result.assert_called_once_with(result, quiet=False)


def test_execute_converts_library_errors(tmp_path: Path) -> None:
    to_flatten = tmp_path / "root"
    to_flatten.mkdir()
    (to_flatten / "dangling").symlink_to(tmp_path / "missing")
    display = _display()

    result = FlattenCommand(FlattenArgs(command="flatten", directory=to_flatten), display).execute()

    assert not result.success
    assert "Unknown filetype" in result.message


def test_execute_converts_os_errors(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "filemisc.ui.cli.commands.file.read_permissions",
        side_effect=PermissionError("denied"),
    )

    result = ModeCommand(ModeArgs(command="mode", path=tmp_path), _display()).execute()

    assert not result.success
    assert result.message == "denied"


def test_mode_command_reports_full_executable(tmp_path: Path) -> None:
    target = tmp_path / "tool"
    _ = target.write_text("", encoding="utf-8")
    target.chmod(0o751)

    result = ModeCommand(ModeArgs(command="mode", path=target), _display()).execute()

    assert result.output == "751"
    assert result.message.endswith("(fully executable: yes)")


def test_token_read_missing_is_failure(tmp_path: Path) -> None:
    args = TokenArgs(command="token", action="read", directory=tmp_path, name="absent")

    result = TokenCommand(args, _display()).execute()

    assert not result.success
    assert result.output is None
