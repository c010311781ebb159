"""
核心抽象層

定義與介面無關的資料型別、事件模型與延遲任務排程。
"""

from .events import DrillEvent, DrillEventHandler
from .scheduler import (
    ImmediateScheduler,
    ManualScheduler,
    ScheduledTask,
    Scheduler,
)
from .types import Item, MasteryRecord, MatchMode, ParsedReading, ProgressStore, ToneMode

__all__ = [
    "Item",
    "ToneMode",
    "MatchMode",
    "ParsedReading",
    "MasteryRecord",
    "ProgressStore",
    "DrillEvent",
    "DrillEventHandler",
    "Scheduler",
    "ScheduledTask",
    "ManualScheduler",
    "ImmediateScheduler",
]
