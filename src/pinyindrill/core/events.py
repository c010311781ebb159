"""
事件模型（Event Model）

練習流程不直接輸出到 stdout。
若需要取得「剛剛判定了什麼」「哪個字熟練了」等資訊，請使用事件回呼（event handler）。

回呼拋出的例外只會被記錄，不會中斷練習。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class DrillEvent(TypedDict, total=False):
    type: Literal["verdict", "hint", "mastered", "chapter_complete", "reset", "degraded"]

    # verdict / hint / mastered
    item: str
    submitted: str
    correct: bool
    streak: int

    # chapter_complete / reset
    chapter: int
    scope: Literal["chapter", "all"]

    # degraded
    stage: Literal["lookup", "storage_read", "storage_write"]
    reason: str
    exception_type: str
    exception_message: str


DrillEventHandler = Callable[[DrillEvent], None]
