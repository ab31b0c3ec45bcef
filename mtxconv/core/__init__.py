"""核心轉檔模組"""

from mtxconv.core.converter import (
    SUCCESS_MESSAGE,
    ConversionOutcome,
    ConversionRequest,
    convert,
    preview_conversion,
    run_conversion,
)
from mtxconv.core.errors import (
    ConfigError,
    ConversionError,
    EmptyMatrixError,
    ErrorKind,
    IoError,
    IoPhase,
    ParseError,
    PatternError,
    ShapeError,
)
from mtxconv.core.exporter import PatternSite, find_pattern_site
from mtxconv.core.loader import Matrix, load_matrix, parse_matrix
from mtxconv.core.transform import transpose
from mtxconv.core.validation import validate_matrix, validate_input_file, validate_output_target
from mtxconv.core.config import GuiConfig, load_gui_config, save_gui_config
from mtxconv.core.paths import get_config_dir

__all__ = [
    "SUCCESS_MESSAGE",
    "ConversionOutcome",
    "ConversionRequest",
    "convert",
    "preview_conversion",
    "run_conversion",
    "ConfigError",
    "ConversionError",
    "EmptyMatrixError",
    "ErrorKind",
    "IoError",
    "IoPhase",
    "ParseError",
    "PatternError",
    "ShapeError",
    "PatternSite",
    "find_pattern_site",
    "Matrix",
    "load_matrix",
    "parse_matrix",
    "transpose",
    "validate_matrix",
    "validate_input_file",
    "validate_output_target",
    "GuiConfig",
    "load_gui_config",
    "save_gui_config",
    "get_config_dir",
]
