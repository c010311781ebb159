"""
進度模組

- MasteryTracker: 連續答對 / 熟練度追蹤
- ProgressRepository: 進度與模式旗標的持久化
- KeyValueStorage: 儲存後端介面 (MemoryStorage, FileStorage)
"""

from .storage import (
    MODE_KEY,
    PROGRESS_KEY,
    FileStorage,
    KeyValueStorage,
    MemoryStorage,
    ProgressRepository,
)
from .tracker import MasteryTracker

__all__ = [
    "MasteryTracker",
    "ProgressRepository",
    "KeyValueStorage",
    "MemoryStorage",
    "FileStorage",
    "PROGRESS_KEY",
    "MODE_KEY",
]
