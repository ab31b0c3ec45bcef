"""路徑處理輔助模組

提供日誌與設定目錄的位置，支援開發模式與打包後執行。
"""

import os
import sys
from pathlib import Path


def _app_dir(name: str) -> Path:
    """取得應用程式子目錄並確保其存在

    打包後使用 Windows 用戶目錄，避免權限問題；
    開發模式使用當前目錄。
    """
    if getattr(sys, 'frozen', False):
        base = Path(os.environ.get('LOCALAPPDATA', '.')) / 'mtxconv'
    else:
        base = Path.cwd()

    path = base / name
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_log_dir() -> Path:
    """取得日誌目錄

    Returns:
        Path: 日誌目錄路徑
    """
    return _app_dir('logs')


def get_config_dir() -> Path:
    """取得設定目錄

    Returns:
        Path: 設定目錄路徑
    """
    return _app_dir('config')
