"""
工具模組

提供日誌、計時、延遲導入等通用工具。
"""

from .lazy_imports import (
    PYPINYIN_INSTALL_HINT,
    check_pypinyin_dependencies,
)
from .logger import (
    TimingContext,
    enable_debug_logging,
    enable_timing_logging,
    get_logger,
    setup_logger,
)

__all__ = [
    # 日誌工具
    "get_logger",
    "setup_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    "TimingContext",

    # 依賴檢查
    "check_pypinyin_dependencies",
    "PYPINYIN_INSTALL_HINT",
]
