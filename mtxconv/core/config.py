"""GUI 設定管理模組

儲存與載入視窗欄位的內容，下次開啟時還原。
"""

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from mtxconv.core.converter import ConversionRequest
from mtxconv.core.paths import get_config_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "gui_config.json"


@dataclass
class GuiConfig:
    """GUI 設定資料類別"""

    input_file: str = ""
    transpose: bool = False
    split_per_row: bool = False
    output_pattern: str = ""
    replace_token: str = "#"

    def to_request(self) -> ConversionRequest:
        """轉換為轉檔請求"""
        return ConversionRequest(
            input_path=Path(self.input_file),
            transpose=self.transpose,
            split_per_row=self.split_per_row,
            output=self.output_pattern,
            replace_token=self.replace_token,
        )


def get_config_file() -> Path:
    """取得設定檔路徑"""
    return get_config_dir() / CONFIG_FILE_NAME


def load_gui_config() -> GuiConfig:
    """載入 GUI 設定

    從設定檔載入設定，檔案不存在或損壞時返回預設值；
    型別不符的欄位個別使用預設值。

    Returns:
        GuiConfig: 載入的設定或預設設定
    """
    config_file = get_config_file()
    config = GuiConfig()

    if not config_file.exists():
        logger.debug("設定檔不存在，使用預設值")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.warning(f"設定檔 JSON 解析失敗: {e}，使用預設值")
        return config
    except OSError as e:
        logger.error(f"載入設定檔時發生錯誤: {e}，使用預設值")
        return config

    if not isinstance(data, dict):
        logger.warning("設定檔格式錯誤，使用預設值")
        return config

    for f in fields(GuiConfig):
        if f.name not in data:
            continue
        value = data[f.name]
        if isinstance(value, type(getattr(config, f.name))):
            setattr(config, f.name, value)
        else:
            logger.warning(f"無效的 {f.name}: {value!r}，使用預設值")

    logger.debug(f"成功載入設定: {config}")
    return config


def save_gui_config(config: GuiConfig) -> None:
    """儲存 GUI 設定

    Args:
        config: 要儲存的設定
    """
    config_file = get_config_file()

    try:
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(asdict(config), f, ensure_ascii=False, indent=2)

        logger.debug(f"成功儲存設定: {config_file}")

    except OSError as e:
        logger.error(f"儲存設定檔時發生錯誤: {e}")
