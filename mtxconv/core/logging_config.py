"""日誌配置模組

提供統一的日誌配置功能，支援：
- Console 輸出（使用 RichHandler）
- 檔案輸出（使用 TimedRotatingFileHandler）
- 找不到可寫入目錄時僅使用 Console
"""

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FILE_NAME = "mtxconv.log"


def _get_writable_log_dir(preferred_dir: Optional[Path]) -> Optional[Path]:
    """嘗試找到可寫入的日誌目錄

    依序嘗試以下路徑：
    1. preferred_dir（如果提供）
    2. 當前工作目錄的 logs/
    3. %LOCALAPPDATA%\\mtxconv\\logs（Windows）
    4. ~/.mtxconv/logs

    Args:
        preferred_dir: 優先使用的日誌目錄

    Returns:
        可寫入的路徑，若所有路徑都失敗則返回 None
    """
    candidates = []

    if preferred_dir:
        candidates.append(Path(preferred_dir))

    candidates.append(Path.cwd() / "logs")

    if os.name == 'nt':
        local_app_data = os.environ.get("LOCALAPPDATA")
        if local_app_data:
            candidates.append(Path(local_app_data) / "mtxconv" / "logs")

    candidates.append(Path.home() / ".mtxconv" / "logs")

    for path in candidates:
        try:
            path.mkdir(parents=True, exist_ok=True)

            # 測試寫入權限
            test_file = path / ".write_test"
            test_file.touch()
            test_file.unlink()

            return path
        except OSError:
            continue

    return None


def setup_logging(
    verbose: bool = False,
    log_dir: Optional[Path | str] = None,
    console: Optional[Console] = None
) -> None:
    """設定日誌系統

    Args:
        verbose: 是否啟用詳細模式（DEBUG 層級）
        log_dir: 日誌目錄路徑，None 表示僅使用 Console Handler
        console: 共用的 Console 實例，None 表示建立新實例
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # 根層級為 DEBUG，由各 handler 決定實際輸出層級
    root_logger.setLevel(logging.DEBUG)

    console_handler = RichHandler(
        console=console if console is not None else Console(),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
        level=logging.DEBUG if verbose else logging.INFO,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_dir is None:
        return

    writable_dir = _get_writable_log_dir(Path(log_dir))
    if writable_dir is None:
        logging.warning("找不到可寫入的日誌目錄，僅使用 Console 輸出")
        return

    log_file = writable_dir / LOG_FILE_NAME
    try:
        file_handler = TimedRotatingFileHandler(
            filename=str(log_file),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
            delay=True,             # 延遲檔案建立直到首次寫入
        )
        file_handler.suffix = "%Y-%m-%d"
        file_handler.setLevel(logging.DEBUG)  # 檔案永遠記錄 DEBUG
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        root_logger.addHandler(file_handler)
    except OSError as e:
        logging.warning(f"無法建立檔案日誌：{e}，僅使用 Console 輸出")
        return

    if verbose:
        logging.info(f"日誌檔案：{log_file}")


def get_logger(name: str) -> logging.Logger:
    """取得具名 logger

    Args:
        name: Logger 名稱（通常使用 __name__）

    Returns:
        Logger 實例
    """
    return logging.getLogger(name)
