"""
拼音讀音模組

提供單字讀音查詢 (多音字)、讀音去重與顯示格式化。

安裝:
    pip install pinyin-drill

主要類別:
- PinyinLookup: 讀音查詢器 (查詢失敗會降級為空結果)

效能優化:
- cached_get_readings: 快取版讀音查詢
"""

from __future__ import annotations

import importlib
from typing import Any

_LAZY_IMPORTS = {
    "PinyinLookup": (".lookup", "PinyinLookup"),
    "LookupFunc": (".lookup", "LookupFunc"),
    "Readings": (".lookup", "Readings"),
    "cached_get_readings": (".lookup", "cached_get_readings"),
    "dedupe_readings": (".lookup", "dedupe_readings"),
    "format_readings": (".lookup", "format_readings"),
}

__all__ = list(_LAZY_IMPORTS)


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
