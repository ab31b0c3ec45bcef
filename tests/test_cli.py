"""CLI 指令測試"""

from pathlib import Path

from typer.testing import CliRunner

from mtxconv.cli import main as cli_module

runner = CliRunner()


def test_help_shows_commands() -> None:
    result = runner.invoke(cli_module.app, ["--help"])

    assert result.exit_code == 0
    assert "convert" in result.output
    assert "inspect" in result.output


def test_convert_single_file(write_input, tmp_path: Path) -> None:
    source = write_input("1 2\n3 4\n5 6\n")
    output = tmp_path / "out.txt"

    result = runner.invoke(cli_module.app, ["convert", str(source), str(output), "--transpose"])

    assert result.exit_code == 0, result.output
    assert output.read_text() == "1 3 5\n2 4 6\n"


def test_convert_split_with_token(write_input, tmp_path: Path) -> None:
    source = write_input("1 2\n3 4\n")

    result = runner.invoke(
        cli_module.app,
        ["convert", str(source), str(tmp_path / "row_XX.txt"), "--split", "-r", "XX"],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "row_1.txt").read_text() == "1 2\n"
    assert (tmp_path / "row_2.txt").read_text() == "3 4\n"


def test_convert_failure_exits_with_error(write_input, tmp_path: Path) -> None:
    source = write_input("1 2\n3 x\n")
    output = tmp_path / "out.txt"

    result = runner.invoke(cli_module.app, ["convert", str(source), str(output)])

    assert result.exit_code == 1
    assert "錯誤" in result.output
    assert not output.exists()


def test_convert_dry_run_writes_nothing(write_input, tmp_path: Path) -> None:
    source = write_input("1 2\n3 4\n")

    result = runner.invoke(
        cli_module.app,
        ["convert", str(source), str(tmp_path / "r_#.txt"), "--split", "--dry-run"],
    )

    assert result.exit_code == 0, result.output
    assert "r_1.txt" in result.output
    assert "r_2.txt" in result.output
    assert not (tmp_path / "r_1.txt").exists()


def test_convert_missing_input(tmp_path: Path) -> None:
    result = runner.invoke(cli_module.app, ["convert", str(tmp_path / "none.txt"), "out.txt"])

    assert result.exit_code != 0


def test_inspect_shows_shape(write_input) -> None:
    source = write_input("1 2 3\n4 5 6\n")

    result = runner.invoke(cli_module.app, ["inspect", str(source)])

    assert result.exit_code == 0, result.output
    assert "4 5 6" in result.output


def test_inspect_reports_shape_error(write_input) -> None:
    source = write_input("1 2 3\n4 5\n")

    result = runner.invoke(cli_module.app, ["inspect", str(source)])

    assert result.exit_code == 1
