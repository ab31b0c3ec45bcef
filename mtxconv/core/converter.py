"""矩陣轉檔核心

依序執行 讀取 -> 驗證 -> 轉換 -> 輸出，任何階段失敗即中止並回傳錯誤。
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from mtxconv.core.errors import ConversionError, EmptyMatrixError
from mtxconv.core.exporter import plan_output_paths, write_single_file, write_split_files
from mtxconv.core.loader import Matrix, load_matrix
from mtxconv.core.transform import apply_transform
from mtxconv.core.validation import validate_matrix

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "檔案寫入成功。"


@dataclass(frozen=True)
class ConversionRequest:
    """轉檔請求"""

    input_path: Path
    transpose: bool = False
    split_per_row: bool = False
    output: str = ""  # 輸出檔案路徑，或每列輸出時的檔名樣式
    replace_token: str = ""


@dataclass(frozen=True)
class ConversionOutcome:
    """轉檔結果"""

    error: ConversionError | None = None
    message: str = ""
    written: list[Path] = field(default_factory=list)
    rows: int = 0
    columns: int = 0

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, error: ConversionError, written: list[Path] | None = None) -> "ConversionOutcome":
        """由錯誤建立失敗結果"""
        return cls(error=error, message=error.message, written=list(written or []))

    def format_summary(self) -> str:
        """格式化摘要字串"""
        if not self.success:
            return self.message
        return f"{self.message}（{self.rows} 列 x {self.columns} 欄，{len(self.written)} 個檔案）"


def _prepare_matrix(request: ConversionRequest) -> tuple[Matrix | None, ConversionError | None]:
    """讀取、驗證並轉換矩陣"""
    matrix, error = load_matrix(request.input_path)
    if error is not None:
        return None, error

    matrix, error = validate_matrix(matrix, source=request.input_path)
    if error is not None:
        return None, error
    logger.debug(f"矩陣大小：{len(matrix)} x {len(matrix[0])}")

    matrix = apply_transform(matrix, request.transpose)
    if not matrix or not matrix[0]:
        return None, EmptyMatrixError(path=request.input_path)

    return matrix, None


def run_conversion(request: ConversionRequest) -> ConversionOutcome:
    """執行轉檔

    使用者可預期的錯誤（檔案、格式、設定）不會拋出例外，
    而是以 ConversionOutcome.error 回傳。

    Args:
        request: 轉檔請求

    Returns:
        轉檔結果
    """
    logger.debug(f"開始轉檔：{request}")

    matrix, error = _prepare_matrix(request)
    if error is not None:
        return ConversionOutcome.failed(error)

    if request.split_per_row:
        written, error = write_split_files(matrix, request.output, request.replace_token)
    else:
        error = write_single_file(matrix, request.output)
        written = [Path(request.output)] if error is None else []

    if error is not None:
        return ConversionOutcome.failed(error, written)

    logger.info(f"已轉檔：{request.input_path} -> {len(written)} 個檔案")
    return ConversionOutcome(
        message=SUCCESS_MESSAGE,
        written=written,
        rows=len(matrix),
        columns=len(matrix[0]),
    )


def preview_conversion(request: ConversionRequest) -> ConversionOutcome:
    """預覽轉檔：執行讀取、驗證與轉換，並計算輸出檔案但不寫入"""
    matrix, error = _prepare_matrix(request)
    if error is not None:
        return ConversionOutcome.failed(error)

    paths, error = plan_output_paths(matrix, request.split_per_row, request.output, request.replace_token)
    if error is not None:
        return ConversionOutcome.failed(error)

    return ConversionOutcome(
        message=f"將寫入 {len(paths)} 個檔案",
        written=paths,
        rows=len(matrix),
        columns=len(matrix[0]),
    )


def convert(
    input_path: Path | str,
    transpose: bool,
    split_per_row: bool,
    output: str,
    replace_token: str,
) -> ConversionOutcome:
    """以五個呼叫端欄位執行轉檔"""
    request = ConversionRequest(
        input_path=Path(input_path),
        transpose=transpose,
        split_per_row=split_per_row,
        output=str(output),
        replace_token=replace_token,
    )
    return run_conversion(request)
