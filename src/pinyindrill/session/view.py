"""
畫面模型 (View Model)

每次狀態轉換後由 SessionController 產生，與任何繪製技術無關。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Screen(Enum):
    MENU = "menu"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class FeedbackKind(Enum):
    NONE = "none"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    HINT = "hint"


PLAIN_PLACEHOLDER = "Type pinyin (e.g. ma)"
ADVANCED_PLACEHOLDER = "Type pinyin with tone number (e.g. ma3)"


def placeholder_for(advanced_mode: bool) -> str:
    return ADVANCED_PLACEHOLDER if advanced_mode else PLAIN_PLACEHOLDER


@dataclass(frozen=True)
class Feedback:
    kind: FeedbackKind = FeedbackKind.NONE
    text: str = ""


NO_FEEDBACK = Feedback()


@dataclass(frozen=True)
class ChapterSummary:
    index: int
    range_label: str
    mastered_count: int
    total: int

    @property
    def completed(self) -> bool:
        return self.mastered_count == self.total

    @property
    def progress_label(self) -> str:
        return f"{self.mastered_count}/{self.total} mastered"


@dataclass(frozen=True)
class ViewModel:
    """
    Attributes:
        screen: 目前畫面
        advanced_mode: 是否為數字聲調模式
        placeholder: 輸入框提示
        chapters: MENU 畫面的章節列表
        chapter_index: 進行中 / 已完成的章節
        mastered_count, total: 章節進度計數
        item: 目前練習的字
        streak, threshold: 目前字的連續答對次數與門檻
        feedback: 最近一次的判定回饋
        hint: 已揭示的帶聲調讀音
        awaiting_advance: 答對後正在等待切換到下一個字
        confirm_prompt: 待確認的破壞性操作提示
    """

    screen: Screen
    advanced_mode: bool = False
    placeholder: str = PLAIN_PLACEHOLDER
    chapters: List[ChapterSummary] = field(default_factory=list)
    chapter_index: Optional[int] = None
    mastered_count: int = 0
    total: int = 0
    item: Optional[str] = None
    streak: int = 0
    threshold: int = 0
    feedback: Feedback = NO_FEEDBACK
    hint: Optional[str] = None
    awaiting_advance: bool = False
    confirm_prompt: Optional[str] = None

    @property
    def progress_text(self) -> str:
        return f"{self.mastered_count} / {self.total}"

    @property
    def streak_text(self) -> str:
        return f"Streak: {self.streak}/{self.threshold}"
