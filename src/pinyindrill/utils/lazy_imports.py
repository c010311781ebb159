"""
延遲導入工具

pypinyin 只有在第一次查詢讀音時才會載入。
"""

import importlib
from typing import Any, Optional

PYPINYIN_INSTALL_HINT = (
    "缺少拼音依賴。請執行:\n"
    "  pip install pypinyin\n"
    "或重新安裝:\n"
    "  pip install pinyin-drill"
)

_pypinyin: Optional[Any] = None


def _get_pypinyin() -> Any:
    """延遲載入 pypinyin 模組"""
    global _pypinyin
    if _pypinyin is None:
        try:
            _pypinyin = importlib.import_module("pypinyin")
        except ImportError as e:
            raise ImportError(PYPINYIN_INSTALL_HINT) from e
    return _pypinyin


def check_pypinyin_dependencies() -> None:
    """缺少 pypinyin 時拋出帶安裝提示的 ImportError"""
    _get_pypinyin()
