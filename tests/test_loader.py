"""讀取模組測試"""

from pathlib import Path

import pytest

from mtxconv.core.errors import IoError, IoPhase, ParseError
from mtxconv.core.loader import load_matrix, parse_matrix, parse_value


@pytest.mark.parametrize(
    "token, expected",
    [
        ("1", 1.0),
        ("-2.5", -2.5),
        ("+3.", 3.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("6.02E-23", 6.02e-23),
    ],
)
def test_parse_value_accepts_decimal(token: str, expected: float) -> None:
    assert parse_value(token) == expected


@pytest.mark.parametrize(
    "token",
    ["abc", "1.5abc", "nan", "inf", "0x10", "1_000", "1,5", "1e999", ".", "١", "１", "2.５"],
)
def test_parse_value_rejects_non_decimal(token: str) -> None:
    assert parse_value(token) is None


def test_parse_matrix_rows_and_blank_lines() -> None:
    matrix, error = parse_matrix("1 2 3\n\n  4\t5   6  \n")

    assert error is None
    assert matrix == [[1.0, 2.0, 3.0], [], [4.0, 5.0, 6.0]]


def test_parse_matrix_reports_first_bad_line() -> None:
    matrix, error = parse_matrix("1 2\n3 4\n5 x\n7 y\n", source="m.txt")

    assert matrix is None
    assert error == ParseError(path=Path("m.txt"), line=3)
    assert "3" in error.message


def test_parse_matrix_trailing_garbage_is_parse_error() -> None:
    _, error = parse_matrix("1 2 3 end\n")

    assert isinstance(error, ParseError)
    assert error.line == 1


def test_load_matrix_handles_all_line_endings(write_input) -> None:
    path = write_input("1 2\r\n3 4\r5 6\n7 8")

    matrix, error = load_matrix(path)

    assert error is None
    assert matrix == [[1, 2], [3, 4], [5, 6], [7, 8]]


def test_load_matrix_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "missing.txt"

    matrix, error = load_matrix(path)

    assert matrix is None
    assert isinstance(error, IoError)
    assert error.phase == IoPhase.OPEN
    assert error.path == path


def test_load_matrix_directory_is_open_error(tmp_path: Path) -> None:
    _, error = load_matrix(tmp_path)

    assert isinstance(error, IoError)
    assert error.phase == IoPhase.OPEN


def test_load_matrix_undecodable_bytes_is_read_error(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"1 2\n\xff\xfe\x00\n")

    _, error = load_matrix(path)

    assert isinstance(error, IoError)
    assert error.phase == IoPhase.READ


def test_parse_matrix_rejects_non_ascii_digits() -> None:
    matrix, error = parse_matrix("١ ٢\n１ 2\n", source="m.txt")

    assert matrix is None
    assert error == ParseError(path=Path("m.txt"), line=1)


def test_load_matrix_skips_utf8_bom(tmp_path: Path) -> None:
    path = tmp_path / "bom.txt"
    path.write_bytes(b"\xef\xbb\xbf1 2\r\n3 4\r\n")

    matrix, error = load_matrix(path)

    assert error is None
    assert matrix == [[1.0, 2.0], [3.0, 4.0]]
