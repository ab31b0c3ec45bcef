"""共用測試工具"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """logs/ 與 config/ 建立在暫存目錄中"""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_input(tmp_path: Path):
    """建立輸入檔案"""

    def _write(text: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write
