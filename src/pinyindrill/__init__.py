"""
pinyindrill - 漢字拼音自我測驗 (Pinyin Self-Quiz Drill)

核心概念：
- 顯示一個漢字，使用者輸入拼音 (進階模式需加數字聲調，例如 ma3)
- 與該字所有讀音 (多音字) 比對後判定對錯
- 連續答對達門檻即視為熟練，移出本章練習池

官方入口（穩定 API）：
- `pinyindrill.SessionController`
- `pinyindrill.judge` / `pinyindrill.parse_reading`
"""

# =============================================================================
# 練習流程（官方入口）
# =============================================================================
from pinyindrill.session import (
    Back,
    Cancel,
    Confirm,
    FeedbackKind,
    RequestHint,
    ResetAll,
    ResetChapter,
    Screen,
    SelectChapter,
    SessionController,
    SetAdvancedMode,
    Submit,
    ViewModel,
)

# =============================================================================
# 配置與核心型別
# =============================================================================
from pinyindrill.config import DEFAULT_CONFIG, DrillConfig
from pinyindrill.core.types import Item, MasteryRecord, MatchMode, ParsedReading, ProgressStore, ToneMode

# =============================================================================
# 比對與進度
# =============================================================================
from pinyindrill.matching import judge, normalize_submission, parse_reading
from pinyindrill.progress import FileStorage, MasteryTracker, MemoryStorage

# =============================================================================
# 日誌工具
# =============================================================================
from pinyindrill.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Session
    "SessionController",
    "SelectChapter",
    "Submit",
    "RequestHint",
    "ResetChapter",
    "ResetAll",
    "Back",
    "SetAdvancedMode",
    "Confirm",
    "Cancel",
    "ViewModel",
    "Screen",
    "FeedbackKind",
    # Config & types
    "DrillConfig",
    "DEFAULT_CONFIG",
    "Item",
    "ToneMode",
    "MatchMode",
    "ParsedReading",
    "MasteryRecord",
    "ProgressStore",
    # Matching & progress
    "judge",
    "parse_reading",
    "normalize_submission",
    "MasteryTracker",
    "MemoryStorage",
    "FileStorage",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
