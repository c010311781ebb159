"""
練習流程模組

- SessionController: 狀態機與指令分派
- SessionPoolManager: 練習池建立與選字
- 指令: SelectChapter, Submit, RequestHint, ResetChapter, ResetAll, Back,
        SetAdvancedMode, Confirm, Cancel
"""

from .commands import (
    Back,
    Cancel,
    Command,
    Confirm,
    RequestHint,
    ResetAll,
    ResetChapter,
    SelectChapter,
    SetAdvancedMode,
    Submit,
)
from .controller import DrillState, SessionController
from .pool import SessionPool, SessionPoolManager, build_pool, remove_if_mastered, select_next
from .view import ChapterSummary, Feedback, FeedbackKind, Screen, ViewModel

__all__ = [
    "SessionController",
    "DrillState",
    "SessionPool",
    "SessionPoolManager",
    "build_pool",
    "select_next",
    "remove_if_mastered",
    "Command",
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
    "Feedback",
    "FeedbackKind",
    "ChapterSummary",
]
