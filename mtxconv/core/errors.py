"""轉檔錯誤定義

每個管線階段以 (結果, 錯誤) 的形式回傳，錯誤為不可變的資料類別，
並附帶可直接顯示給使用者的訊息。
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import ClassVar


class ErrorKind(Enum):
    """錯誤種類"""

    IO = "io"
    PARSE = "parse"
    EMPTY_MATRIX = "empty_matrix"
    SHAPE = "shape"
    CONFIG = "config"
    PATTERN = "pattern"


class IoPhase(Enum):
    """檔案操作階段"""

    OPEN = "open"
    READ = "read"
    WRITE = "write"


@dataclass(frozen=True)
class ConversionError:
    """轉檔錯誤基底類別"""

    kind: ClassVar[ErrorKind]

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class IoError(ConversionError):
    """檔案開啟、讀取或寫入失敗"""

    kind: ClassVar[ErrorKind] = ErrorKind.IO

    phase: IoPhase
    path: Path
    row: int | None = None
    detail: str = ""

    @property
    def message(self) -> str:
        if self.phase == IoPhase.OPEN:
            text = f"無法開啟檔案 '{self.path}'"
        elif self.phase == IoPhase.READ:
            text = f"無法讀取檔案 '{self.path}'"
        elif self.row is not None:
            text = f"寫入第 {self.row} 列至檔案 '{self.path}' 時失敗"
        else:
            text = f"寫入檔案 '{self.path}' 時失敗"

        if self.phase != IoPhase.WRITE and self.row is not None:
            text += f"（第 {self.row} 列）"
        if self.detail:
            text += f"：{self.detail}"
        return text + "。"


@dataclass(frozen=True)
class ParseError(ConversionError):
    """某一行無法完整解析為數值"""

    kind: ClassVar[ErrorKind] = ErrorKind.PARSE

    path: Path
    line: int

    @property
    def message(self) -> str:
        return f"檔案 '{self.path}' 的第 {self.line} 行無法完整解析。"


@dataclass(frozen=True)
class EmptyMatrixError(ConversionError):
    """檔案中沒有任何樣本"""

    kind: ClassVar[ErrorKind] = ErrorKind.EMPTY_MATRIX

    path: Path | None = None

    @property
    def message(self) -> str:
        if self.path is None:
            return "矩陣不包含任何樣本。"
        return f"檔案 '{self.path}' 不包含任何樣本。"


@dataclass(frozen=True)
class ShapeError(ConversionError):
    """某一列的樣本數與第一列不同"""

    kind: ClassVar[ErrorKind] = ErrorKind.SHAPE

    row: int
    expected: int = 0
    actual: int = 0

    @property
    def message(self) -> str:
        return (
            f"矩陣第 {self.row} 列有 {self.actual} 個樣本，"
            f"與第一列的 {self.expected} 個不同。"
        )


@dataclass(frozen=True)
class ConfigError(ConversionError):
    """呼叫端提供的設定無效"""

    kind: ClassVar[ErrorKind] = ErrorKind.CONFIG

    reason: str

    @property
    def message(self) -> str:
        return f"設定錯誤：{self.reason}。"


@dataclass(frozen=True)
class PatternError(ConversionError):
    """輸出檔名樣式中找不到替換字元"""

    kind: ClassVar[ErrorKind] = ErrorKind.PATTERN

    reason: str
    pattern: str = ""
    token: str = ""

    @property
    def message(self) -> str:
        return f"輸出檔名樣式 '{self.pattern}' 錯誤：{self.reason}（替換字元 '{self.token}'）。"
