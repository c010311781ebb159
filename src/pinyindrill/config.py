"""
全域配置模組

提供統一的配置類別，控制熟練門檻、章節大小、答對後的停頓與日誌行為。

使用方式:
    from pinyindrill import DrillConfig, SessionController

    # 預設值: 連續答對 5 次視為熟練，每章 100 字
    config = DrillConfig()

    # 自訂門檻並開啟詳細日誌
    config = DrillConfig(mastery_threshold=3, verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("pinyindrill").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .core.events import DrillEventHandler
from .utils.logger import setup_logger

MASTERY_THRESHOLD = 5
CHARS_PER_EXERCISE = 100
ADVANCE_DELAY_SECONDS = 0.8


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class DrillConfig:
    """
    練習配置

    屬性:
        mastery_threshold: 連續答對幾次後視為熟練並移出練習池
        chars_per_exercise: 每章字數 (練習池與進度顯示的分割單位)
        advance_delay: 答對後停頓多久 (秒) 再切換到下一個字
        verbose: 是否開啟詳細日誌
        on_event: 練習事件回呼，見 pinyindrill.core.events
    """

    mastery_threshold: int = MASTERY_THRESHOLD
    chars_per_exercise: int = CHARS_PER_EXERCISE
    advance_delay: float = ADVANCE_DELAY_SECONDS

    verbose: bool = False
    on_event: Optional[DrillEventHandler] = None

    def __post_init__(self):
        if self.mastery_threshold < 1:
            raise ValueError(f"mastery_threshold must be >= 1, got {self.mastery_threshold}")
        if self.chars_per_exercise < 1:
            raise ValueError(f"chars_per_exercise must be >= 1, got {self.chars_per_exercise}")
        if self.advance_delay < 0:
            raise ValueError(f"advance_delay cannot be negative, got {self.advance_delay}")
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = DrillConfig()
