"""
練習流程控制 (Session Controller)

狀態機: MENU -> IN_PROGRESS -> COMPLETE

所有介面事件都以指令 (見 commands.py) 送進 dispatch()，
回傳新的 ViewModel。答對後切換下一個字的停頓由 Scheduler 負責，
停頓結束時會呼叫 on_change 通知介面重繪。

使用方式:
    from pinyindrill import SessionController, SelectChapter, Submit

    controller = SessionController()
    view = controller.dispatch(SelectChapter(0))
    view = controller.dispatch(Submit("de"))
"""

import random
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from pinyindrill.catalog import CHARACTERS, Chapter, iter_chapters
from pinyindrill.config import DEFAULT_CONFIG, DrillConfig
from pinyindrill.core.events import DrillEvent, DrillEventHandler
from pinyindrill.core.scheduler import ImmediateScheduler, ScheduledTask, Scheduler
from pinyindrill.core.types import Item, MatchMode, ToneMode
from pinyindrill.matching.matcher import is_hint_request, judge, normalize_submission
from pinyindrill.phonetics.lookup import LookupFunc, PinyinLookup, format_readings
from pinyindrill.progress.storage import KeyValueStorage, MemoryStorage, ProgressRepository
from pinyindrill.progress.tracker import MasteryTracker
from pinyindrill.utils.logger import TimingContext, get_logger

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
from .pool import SessionPool, SessionPoolManager
from .view import (
    NO_FEEDBACK,
    ChapterSummary,
    Feedback,
    FeedbackKind,
    Screen,
    ViewModel,
    placeholder_for,
)

RESET_ALL_PROMPT = "Are you sure you want to reset all progress? This cannot be undone."
RESET_CHAPTER_PROMPT = "Reset progress for this chapter? This cannot be undone."
INCORRECT_TEXT = "Try again!"
MASTERED_PREFIX = "Mastered! 🎉 "

_RESET_ALL = "reset_all"
_RESET_CHAPTER = "reset_chapter"


@dataclass
class DrillState:
    """controller 持有的練習狀態 (不含持久化的進度)"""

    screen: Screen = Screen.MENU
    advanced_mode: bool = False
    chapter_index: Optional[int] = None
    pool: Optional[SessionPool] = None
    current_item: Optional[Item] = None
    feedback: Feedback = NO_FEEDBACK
    hint: Optional[str] = None
    pending_advance: Optional[ScheduledTask] = None
    pending_confirmation: Optional[str] = None


class SessionController:
    """
    練習流程控制器

    Args:
        config: 練習配置 (門檻、章節大小、停頓時間)
        lookup: 讀音查詢函式 (item, ToneMode) -> tuple[str, ...]，預設使用 pypinyin
        storage: 進度儲存後端，預設為記憶體
        catalog: 字表
        scheduler: 答對後延遲切換的排程器，預設立即切換
        rng: 選字用的隨機來源
        on_event: 練習事件回呼 (覆蓋 config.on_event)
        on_change: 延遲任務改變狀態後呼叫，參數為新的 ViewModel
    """

    def __init__(
        self,
        config: Optional[DrillConfig] = None,
        *,
        lookup: Optional[LookupFunc] = None,
        storage: Optional[KeyValueStorage] = None,
        catalog: Sequence[Item] = CHARACTERS,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        on_event: Optional[DrillEventHandler] = None,
        on_change: Optional[Callable[[ViewModel], None]] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self._logger = get_logger("session.controller")
        self._on_event = on_event or self.config.on_event
        self._on_change = on_change

        self.lookup: LookupFunc = lookup or PinyinLookup(on_event=self._on_event)
        self.repository = ProgressRepository(storage or MemoryStorage(), on_event=self._on_event)
        with TimingContext("SessionController.load_progress"):
            self.tracker = MasteryTracker(repository=self.repository, on_event=self._on_event)
        self.catalog = tuple(catalog)
        self.pool_manager = SessionPoolManager(
            self.tracker,
            catalog=self.catalog,
            chars_per_exercise=self.config.chars_per_exercise,
            rng=rng,
        )
        self.scheduler = scheduler or ImmediateScheduler()

        self.state = DrillState(advanced_mode=self.repository.load_advanced_mode())

        self._handlers = {
            SelectChapter: self._select_chapter,
            Submit: self._submit,
            RequestHint: self._request_hint,
            ResetChapter: self._reset_chapter,
            ResetAll: self._reset_all,
            Back: self._back,
            SetAdvancedMode: self._set_advanced_mode,
            Confirm: self._confirm,
            Cancel: self._cancel,
        }

    # =========================================================================
    # 公開介面
    # =========================================================================

    @property
    def threshold(self) -> int:
        return self.config.mastery_threshold

    @property
    def match_mode(self) -> MatchMode:
        return MatchMode.from_advanced(self.state.advanced_mode)

    def dispatch(self, command: Command) -> ViewModel:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"unknown command: {command!r}")
        if not isinstance(command, (Confirm, Cancel)):
            self.state.pending_confirmation = None
        self._logger.debug(f"[Dispatch] {command!r} @ {self.state.screen.value}")
        handler(command)
        return self.view()

    def view(self) -> ViewModel:
        state = self.state
        common = dict(
            screen=state.screen,
            advanced_mode=state.advanced_mode,
            placeholder=placeholder_for(state.advanced_mode),
            confirm_prompt=self._confirm_prompt(),
            threshold=self.threshold,
        )
        if state.screen is Screen.MENU:
            return ViewModel(chapters=self.chapter_summaries(), **common)

        chapter = self._current_chapter()
        item = state.current_item
        return ViewModel(
            chapter_index=chapter.index,
            mastered_count=self.tracker.mastered_count(chapter.items),
            total=chapter.total,
            item=item,
            streak=self.tracker.get(item).correct_streak if item is not None else 0,
            feedback=state.feedback,
            hint=state.hint,
            awaiting_advance=self._advance_pending(),
            **common,
        )

    def chapter_summaries(self):
        return [
            ChapterSummary(
                index=chapter.index,
                range_label=chapter.range_label,
                mastered_count=self.tracker.mastered_count(chapter.items),
                total=chapter.total,
            )
            for chapter in iter_chapters(self.catalog, self.config.chars_per_exercise)
        ]

    # =========================================================================
    # 指令處理
    # =========================================================================

    def _select_chapter(self, command: SelectChapter) -> None:
        if self.state.screen is not Screen.MENU:
            self._logger.debug("SelectChapter ignored outside MENU")
            return
        self._enter_chapter(command.index)

    def _submit(self, command: Submit) -> None:
        if not self._accepting_input():
            return
        submitted = normalize_submission(command.text)
        if not submitted:
            return
        if is_hint_request(submitted):
            self._reveal_hint()
            return

        item = self.state.current_item
        plain = self.lookup(item, ToneMode.PLAIN)
        tone_number = self.lookup(item, ToneMode.TONE_NUMBER)
        correct = judge(submitted, self.match_mode, plain, tone_number)

        record = self.tracker.record_attempt(item, correct, self.threshold)
        self._logger.debug(f"[Verdict] {item} '{submitted}' -> {correct}")
        self._emit(
            {
                "type": "verdict",
                "item": str(item),
                "submitted": submitted,
                "correct": correct,
                "streak": record.correct_streak,
            }
        )

        if not correct:
            self.state.feedback = Feedback(FeedbackKind.INCORRECT, INCORRECT_TEXT)
            return

        answer_text = format_readings(self.lookup(item, ToneMode.TONE_SYMBOL))
        if self.pool_manager.remove_if_mastered(self.state.pool, item, record):
            feedback = Feedback(FeedbackKind.CORRECT, MASTERED_PREFIX + answer_text)
        else:
            feedback = Feedback(FeedbackKind.CORRECT, answer_text)
        self.state.feedback = feedback
        task = self.scheduler.schedule(self.config.advance_delay, self._advance)
        if task.pending:
            self.state.pending_advance = task
        else:
            # 排程器已同步切到下一個字，保留這次的判定結果給回傳的 view
            self.state.feedback = feedback

    def _request_hint(self, command: RequestHint) -> None:
        if self._accepting_input():
            self._reveal_hint()

    def _back(self, command: Back) -> None:
        if self.state.screen is Screen.MENU:
            return
        self._cancel_advance()
        self.state.screen = Screen.MENU
        self.state.chapter_index = None
        self.state.pool = None
        self.state.current_item = None
        self.state.feedback = NO_FEEDBACK
        self.state.hint = None

    def _reset_chapter(self, command: ResetChapter) -> None:
        if self.state.screen is not Screen.COMPLETE:
            self._logger.debug("ResetChapter ignored outside COMPLETE")
            return
        self.state.pending_confirmation = _RESET_CHAPTER

    def _reset_all(self, command: ResetAll) -> None:
        if self.state.screen is not Screen.MENU:
            self._logger.debug("ResetAll ignored outside MENU")
            return
        self.state.pending_confirmation = _RESET_ALL

    def _confirm(self, command: Confirm) -> None:
        action = self.state.pending_confirmation
        self.state.pending_confirmation = None
        if action == _RESET_ALL:
            self.tracker.reset_all()
            self._emit({"type": "reset", "scope": "all"})
        elif action == _RESET_CHAPTER:
            chapter = self._current_chapter()
            self.tracker.reset_items(chapter.items)
            self._emit({"type": "reset", "scope": "chapter", "chapter": chapter.index})
            self._enter_chapter(chapter.index)

    def _cancel(self, command: Cancel) -> None:
        self.state.pending_confirmation = None

    def _set_advanced_mode(self, command: SetAdvancedMode) -> None:
        self.state.advanced_mode = bool(command.enabled)
        self.repository.save_advanced_mode(self.state.advanced_mode)
        self._logger.debug(f"advanced_mode={self.state.advanced_mode}")

    # =========================================================================
    # 內部流程
    # =========================================================================

    def _enter_chapter(self, chapter_index: int) -> None:
        self._cancel_advance()
        pool = self.pool_manager.start_chapter(chapter_index)
        self.state.chapter_index = chapter_index
        self.state.pool = pool
        self.state.current_item = None
        self.state.feedback = NO_FEEDBACK
        self.state.hint = None
        if pool.is_empty:
            self._complete()
            return
        self.state.screen = Screen.IN_PROGRESS
        self._present_next()

    def _present_next(self) -> None:
        item = self.pool_manager.select_next(self.state.pool, self.state.current_item)
        if item is None:
            self._complete()
            return
        self.state.current_item = item
        self.state.feedback = NO_FEEDBACK
        self.state.hint = None
        self._logger.debug(f"[Present] {item}")

    def _advance(self) -> None:
        self.state.pending_advance = None
        if self.state.screen is not Screen.IN_PROGRESS:
            return
        self._present_next()
        if self._on_change is not None:
            self._on_change(self.view())

    def _complete(self) -> None:
        self.state.screen = Screen.COMPLETE
        self.state.current_item = None
        self._logger.info(f"chapter {self.state.chapter_index} complete")
        self._emit({"type": "chapter_complete", "chapter": self.state.chapter_index})

    def _reveal_hint(self) -> None:
        item = self.state.current_item
        hint_text = format_readings(self.lookup(item, ToneMode.TONE_SYMBOL))
        record = self.tracker.record_hint_used(item)
        self.state.hint = hint_text
        self.state.feedback = Feedback(FeedbackKind.HINT, hint_text)
        self._emit({"type": "hint", "item": str(item), "streak": record.correct_streak})

    def _accepting_input(self) -> bool:
        if self.state.screen is not Screen.IN_PROGRESS or self.state.current_item is None:
            return False
        if self._advance_pending():
            self._logger.debug("input ignored while waiting for the next item")
            return False
        return True

    def _advance_pending(self) -> bool:
        task = self.state.pending_advance
        return task is not None and task.pending

    def _cancel_advance(self) -> None:
        if self.state.pending_advance is not None:
            self.state.pending_advance.cancel()
            self.state.pending_advance = None

    def _current_chapter(self) -> Chapter:
        return self.pool_manager.chapter(self.state.chapter_index)

    def _confirm_prompt(self) -> Optional[str]:
        if self.state.pending_confirmation == _RESET_ALL:
            return RESET_ALL_PROMPT
        if self.state.pending_confirmation == _RESET_CHAPTER:
            return RESET_CHAPTER_PROMPT
        return None

    def _emit(self, event: DrillEvent) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")
