"""矩陣輸出模組

支援兩種輸出方式：
- 單一檔案：整個矩陣寫入同一檔案，每列一行
- 每列一個檔案：將列號代入檔名樣式中第一個替換字元的位置
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from mtxconv.core.errors import ConfigError, ConversionError, IoError, IoPhase, PatternError
from mtxconv.core.loader import Matrix

logger = logging.getLogger(__name__)


def format_value(value: float) -> str:
    """以可完整還原的最短十進位表示輸出數值（整數值不帶 .0）"""
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_row(row: list[float]) -> str:
    """將一列數值格式化為以單一空白分隔的一行（含換行）"""
    return " ".join(format_value(v) for v in row) + "\n"


@dataclass(frozen=True)
class PatternSite:
    """檔名樣式中替換字元的位置"""

    prefix: str
    suffix: str

    def filename(self, row_no: int) -> str:
        """產生第 row_no 列（1-based）的輸出檔名"""
        return f"{self.prefix}{row_no}{self.suffix}"


def find_pattern_site(pattern: str, token: str) -> tuple[PatternSite | None, ConversionError | None]:
    """找出樣式中第一個替換字元並切分前後段

    Args:
        pattern: 輸出檔名樣式，如 "out_#.txt"
        token: 替換字元，如 "#"

    Returns:
        (替換位置, 錯誤)。成功時錯誤為 None。

    Examples:
        >>> site, _ = find_pattern_site("data_XX_final.txt", "XX")
        >>> site.filename(1)
        'data_1_final.txt'
    """
    if not token:
        return None, ConfigError(reason="未指定輸出檔名樣式中要替換的字元")

    index = pattern.find(token)
    if index < 0:
        return None, PatternError(reason="樣式中找不到替換字元", pattern=pattern, token=token)

    return PatternSite(prefix=pattern[:index], suffix=pattern[index + len(token):]), None


def plan_output_paths(
    matrix: Matrix,
    split_per_row: bool,
    output: str,
    token: str,
) -> tuple[list[Path] | None, ConversionError | None]:
    """計算將要寫入的輸出檔案（不實際寫入）"""
    if not split_per_row:
        return [Path(output)], None

    site, error = find_pattern_site(output, token)
    if error is not None:
        return None, error
    return [Path(site.filename(row_no)) for row_no in range(1, len(matrix) + 1)], None


def write_single_file(matrix: Matrix, path: Path | str) -> ConversionError | None:
    """將整個矩陣寫入單一檔案

    每列寫入後立即 flush，寫入失敗時回報第一個失敗的列。

    Returns:
        錯誤；成功時為 None
    """
    path = Path(path)

    try:
        handle = open(path, "w", encoding="utf-8", newline="\n")
    except OSError as e:
        return IoError(phase=IoPhase.OPEN, path=path, detail=e.strerror or str(e))

    row_no = 0
    try:
        # close() 也可能因緩衝未寫出而失敗，需包含在 try 之內
        with handle:
            for row_no, row in enumerate(matrix, start=1):
                handle.write(format_row(row))
                handle.flush()
    except OSError as e:
        return IoError(phase=IoPhase.WRITE, path=path, row=max(row_no, 1), detail=e.strerror or str(e))

    logger.debug(f"已寫入 {len(matrix)} 列至 {path}")
    return None


def write_split_files(
    matrix: Matrix,
    pattern: str,
    token: str,
) -> tuple[list[Path], ConversionError | None]:
    """每列寫入一個檔案

    發生錯誤時不會刪除先前已寫入的檔案。

    Args:
        matrix: 要輸出的矩陣
        pattern: 輸出檔名樣式
        token: 樣式中要以列號取代的字元

    Returns:
        (已寫入的檔案, 錯誤)。成功時錯誤為 None。
    """
    written: list[Path] = []

    site, error = find_pattern_site(pattern, token)
    if error is not None:
        return written, error

    for row_no, row in enumerate(matrix, start=1):
        path = Path(site.filename(row_no))

        try:
            handle = open(path, "w", encoding="utf-8", newline="\n")
        except OSError as e:
            return written, IoError(phase=IoPhase.OPEN, path=path, row=row_no, detail=e.strerror or str(e))

        try:
            with handle:
                handle.write(format_row(row))
                handle.flush()
        except OSError as e:
            return written, IoError(phase=IoPhase.WRITE, path=path, row=row_no, detail=e.strerror or str(e))

        written.append(path)
        logger.debug(f"已寫入第 {row_no} 列：{path}")

    return written, None
