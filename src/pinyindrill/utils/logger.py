"""
日誌與計時工具

所有 pinyindrill 的 logger 都掛在 "pinyindrill" 之下，
預設只加上 NullHandler，不主動輸出到 stdout/stderr。

使用方式:
    from pinyindrill.utils.logger import get_logger

    logger = get_logger("session.controller")
    logger.debug("...")

    # 開啟詳細日誌
    from pinyindrill import enable_debug_logging
    enable_debug_logging()
"""

import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "pinyindrill"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)
_root_logger.addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 pinyindrill 底下的子 logger

    Args:
        name: 子 logger 名稱 (例如 "progress.tracker")；
              已帶有 "pinyindrill." 前綴時直接使用

    Returns:
        logging.Logger
    """
    if not name or name == ROOT_LOGGER_NAME:
        return _root_logger
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為 pinyindrill 根 logger 加上 StreamHandler

    重複呼叫只會調整等級，不會重複加 handler。
    """
    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        for h in _root_logger.handlers
    )
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        _root_logger.addHandler(handler)
    _root_logger.setLevel(level)
    for handler in _root_logger.handlers:
        handler.setLevel(level)
    return _root_logger


def enable_debug_logging() -> None:
    """開啟 DEBUG 等級日誌 (包含狀態轉換與判定結果)"""
    setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> None:
    """只開啟計時日誌，其他 logger 維持 WARNING"""
    setup_logger(level=logging.DEBUG)
    _root_logger.setLevel(logging.WARNING)
    get_logger("timing").setLevel(logging.DEBUG)


class TimingContext:
    """
    計時 context manager

    範例:
        >>> with TimingContext("lookup", logger):
        ...     do_something()
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)

