"""轉檔管線測試"""

from pathlib import Path

import pytest

from mtxconv.core.converter import (
    SUCCESS_MESSAGE,
    ConversionOutcome,
    ConversionRequest,
    convert,
    preview_conversion,
    run_conversion,
)
from mtxconv.core.errors import (
    ConfigError,
    EmptyMatrixError,
    ErrorKind,
    IoError,
    ParseError,
    PatternError,
    ShapeError,
)


def test_single_file_round_trip(write_input, tmp_path: Path) -> None:
    source = write_input("1 2 3\n4 5 6\n")
    output = tmp_path / "out.txt"

    outcome = convert(source, False, False, str(output), "")

    assert outcome.success
    assert outcome.message == SUCCESS_MESSAGE
    assert outcome.written == [output]
    assert (outcome.rows, outcome.columns) == (2, 3)
    assert output.read_text() == "1 2 3\n4 5 6\n"


def test_transpose_split_per_row(write_input, tmp_path: Path) -> None:
    source = write_input("1 2\n3 4\n5 6\n")

    outcome = convert(source, True, True, str(tmp_path / "col_#.txt"), "#")

    assert outcome.success
    assert (outcome.rows, outcome.columns) == (2, 3)
    assert (tmp_path / "col_1.txt").read_text() == "1 3 5\n"
    assert (tmp_path / "col_2.txt").read_text() == "2 4 6\n"
    assert not (tmp_path / "col_3.txt").exists()


def test_pattern_substitution_filenames(write_input, tmp_path: Path) -> None:
    source = write_input("1.5 2\n\n-3 4e2\n")

    outcome = convert(source, False, True, str(tmp_path / "data_XX_final.txt"), "XX")

    assert outcome.success
    assert [p.name for p in outcome.written] == ["data_1_final.txt", "data_2_final.txt"]
    assert (tmp_path / "data_2_final.txt").read_text() == "-3 400\n"


def test_parse_error_writes_nothing(write_input, tmp_path: Path) -> None:
    source = write_input("1 2\n3 4\n5 six\n")
    output = tmp_path / "out.txt"
    output.write_text("previous\n")

    outcome = convert(source, False, False, str(output), "")

    assert not outcome.success
    assert outcome.error == ParseError(path=source, line=3)
    assert outcome.message == outcome.error.message
    assert output.read_text() == "previous\n"


def test_shape_error_row_after_blank_removal(write_input, tmp_path: Path) -> None:
    source = write_input("1 2\n\n3 4\n5\n")

    outcome = convert(source, False, False, str(tmp_path / "out.txt"), "")

    assert isinstance(outcome.error, ShapeError)
    assert outcome.error.row == 3
    assert not (tmp_path / "out.txt").exists()


def test_blank_input_is_empty_matrix(write_input, tmp_path: Path) -> None:
    source = write_input("\n   \n\t\n")

    outcome = convert(source, False, False, str(tmp_path / "out.txt"), "")

    assert isinstance(outcome.error, EmptyMatrixError)
    assert outcome.error.kind == ErrorKind.EMPTY_MATRIX


def test_missing_token_in_pattern(write_input, tmp_path: Path) -> None:
    source = write_input("1 2\n")

    outcome = convert(source, False, True, str(tmp_path / "data.txt"), "XX")

    assert isinstance(outcome.error, PatternError)
    assert outcome.written == []


def test_empty_token_in_split_mode(write_input, tmp_path: Path) -> None:
    source = write_input("1 2\n")

    outcome = convert(source, False, True, str(tmp_path / "data_#.txt"), "")

    assert isinstance(outcome.error, ConfigError)


def test_missing_input_file(tmp_path: Path) -> None:
    outcome = run_conversion(ConversionRequest(input_path=tmp_path / "none.txt", output=str(tmp_path / "o.txt")))

    assert isinstance(outcome.error, IoError)
    assert outcome.error.kind == ErrorKind.IO


def test_failed_outcome_keeps_written_files(write_input, tmp_path: Path) -> None:
    source = write_input("1\n2\n3\n")
    (tmp_path / "r_3.txt").mkdir()

    outcome = convert(source, False, True, str(tmp_path / "r_#.txt"), "#")

    assert isinstance(outcome.error, IoError)
    assert outcome.error.row == 3
    assert outcome.written == [tmp_path / "r_1.txt", tmp_path / "r_2.txt"]


def test_preview_does_not_write(write_input, tmp_path: Path) -> None:
    source = write_input("1 2 3\n4 5 6\n")
    request = ConversionRequest(
        input_path=source,
        transpose=True,
        split_per_row=True,
        output=str(tmp_path / "p_#.txt"),
        replace_token="#",
    )

    outcome = preview_conversion(request)

    assert outcome.success
    assert [p.name for p in outcome.written] == ["p_1.txt", "p_2.txt", "p_3.txt"]
    assert not any(p.exists() for p in outcome.written)


def test_format_summary() -> None:
    ok = ConversionOutcome(message=SUCCESS_MESSAGE, written=[Path("a.txt")], rows=2, columns=3)
    failed = ConversionOutcome.failed(ConfigError(reason="x"))

    assert "2" in ok.format_summary() and "3" in ok.format_summary()
    assert failed.format_summary() == failed.message
    assert not failed.success


@pytest.mark.skipif(not Path("/dev/full").exists(), reason="需要 /dev/full")
def test_write_error_is_returned_as_outcome(write_input) -> None:
    source = write_input("1 2\n3 4\n")

    outcome = convert(source, False, False, "/dev/full", "")

    assert not outcome.success
    assert isinstance(outcome.error, IoError)
    assert outcome.error.row == 1
    assert outcome.written == []
