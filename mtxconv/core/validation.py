"""矩陣與路徑驗證模組

validate_matrix 供轉檔管線使用；其餘函式提供 GUI 欄位檢查，
CLI 繼續使用 typer 的參數驗證以保持其 UX。
"""

from pathlib import Path

from mtxconv.core.errors import ConversionError, EmptyMatrixError, ShapeError
from mtxconv.core.loader import Matrix


def validate_matrix(
    matrix: Matrix,
    source: Path | str | None = None,
) -> tuple[Matrix | None, ConversionError | None]:
    """移除空列並檢查矩陣形狀

    Args:
        matrix: 讀取後的矩陣（可能含空列）
        source: 來源檔案，用於錯誤訊息

    Returns:
        (過濾後的矩陣, 錯誤)。成功時錯誤為 None。
    """
    rows = [row for row in matrix if row]

    if not rows:
        return None, EmptyMatrixError(path=Path(source) if source is not None else None)

    expected = len(rows[0])
    for row_no, row in enumerate(rows, start=1):
        if len(row) != expected:
            return None, ShapeError(row=row_no, expected=expected, actual=len(row))

    return rows, None


def validate_input_file(path: Path | str) -> tuple[bool, str]:
    """驗證輸入檔案

    Args:
        path: 輸入檔案路徑

    Returns:
        (是否有效, 錯誤訊息)。有效時錯誤訊息為空字串。

    Examples:
        >>> valid, error = validate_input_file("/existing/matrix.txt")
        >>> if not valid:
        ...     show_error(error)
    """
    if not path:
        return False, "請選擇輸入檔案"

    path = Path(path)

    if not path.exists():
        return False, f"輸入檔案不存在：{path}"

    if not path.is_file():
        return False, f"路徑不是檔案：{path}"

    return True, ""


def validate_output_target(output: str, split_per_row: bool, token: str) -> tuple[bool, str]:
    """驗證輸出檔案或檔名樣式

    不要求輸出檔案已存在，僅檢查欄位是否填寫；
    樣式中是否含有替換字元由轉檔管線判斷。

    Args:
        output: 輸出檔案路徑或檔名樣式
        split_per_row: 是否每列輸出一個檔案
        token: 替換字元

    Returns:
        (是否有效, 錯誤訊息)。有效時錯誤訊息為空字串。
    """
    if not output:
        return False, "請指定輸出檔案"

    if split_per_row and not token:
        return False, "請指定檔名樣式中要替換的字元"

    if not split_per_row and Path(output).is_dir():
        return False, f"輸出路徑是目錄：{output}"

    return True, ""
