"""矩陣文字檔讀取模組"""

import logging
import math
import re
from pathlib import Path

from mtxconv.core.errors import ConversionError, IoError, IoPhase, ParseError

logger = logging.getLogger(__name__)

Matrix = list[list[float]]

# 十進位浮點數（僅 ASCII 數字；不接受 nan、inf、十六進位或底線分隔）
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_value(token: str) -> float | None:
    """將單一 token 解析為浮點數

    Returns:
        解析後的數值；格式不符或溢位時為 None
    """
    if not _DECIMAL_RE.fullmatch(token):
        return None
    value = float(token)
    if math.isinf(value):
        return None
    return value


def parse_matrix(text: str, source: Path | str = "<string>") -> tuple[Matrix | None, ConversionError | None]:
    """將文字內容解析為矩陣

    每一行以空白分隔為數值，空白行會產生空的列（由驗證階段移除）。

    Args:
        text: 已讀入的文字內容（換行已統一為 \\n）
        source: 來源檔案，用於錯誤訊息

    Returns:
        (矩陣, 錯誤)。成功時錯誤為 None。
    """
    matrix: Matrix = []
    lines = text.split("\n")
    # 最後一個換行之後的空字串不算一行
    if lines and lines[-1] == "":
        lines.pop()

    for line_no, line in enumerate(lines, start=1):
        row: list[float] = []
        for token in line.split():
            value = parse_value(token)
            if value is None:
                return None, ParseError(path=Path(source), line=line_no)
            row.append(value)
        matrix.append(row)

    return matrix, None


def load_matrix(path: Path | str) -> tuple[Matrix | None, ConversionError | None]:
    """讀取矩陣文字檔

    Args:
        path: 輸入檔案路徑

    Returns:
        (矩陣, 錯誤)。成功時錯誤為 None。
    """
    path = Path(path)

    try:
        # newline=None：\n、\r\n、\r 皆視為換行；utf-8-sig 略過記事本加入的 BOM
        handle = open(path, "r", encoding="utf-8-sig", newline=None)
    except OSError as e:
        return None, IoError(phase=IoPhase.OPEN, path=path, detail=e.strerror or str(e))

    with handle:
        try:
            text = handle.read()
            residual = handle.read(1)
        except (OSError, UnicodeDecodeError) as e:
            return None, IoError(phase=IoPhase.READ, path=path, detail=str(e))

    if residual:
        return None, IoError(phase=IoPhase.READ, path=path, detail="檔案未完整讀取")

    logger.debug(f"已讀取 {path}（{len(text)} 字元）")
    return parse_matrix(text, source=path)
