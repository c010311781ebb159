"""
熟練度追蹤 (Mastery Tracker)

每次判定後更新單字的連續答對次數：
- 答對: correct_streak + 1，達到門檻即標記 mastered
- 答錯 / 使用提示: correct_streak 歸零，mastered 不變

mastered 一旦成立就不會因答錯或提示而取消，只有明確的重置才會清除。
每次變動都會整份寫回儲存 (write-through)。
"""

from typing import Iterable, Optional

from pinyindrill.core.events import DrillEventHandler
from pinyindrill.core.types import Item, MasteryRecord, ProgressStore
from pinyindrill.utils.logger import get_logger

from .storage import ProgressRepository


class MasteryTracker:
    def __init__(
        self,
        store: Optional[ProgressStore] = None,
        repository: Optional[ProgressRepository] = None,
        on_event: Optional[DrillEventHandler] = None,
    ):
        self._logger = get_logger("progress.tracker")
        self._repository = repository
        self._on_event = on_event
        if store is None:
            store = repository.load_progress() if repository is not None else ProgressStore()
        self.store = store

    def get(self, item: Item) -> MasteryRecord:
        return self.store.get(item)

    def is_mastered(self, item: Item) -> bool:
        return self.store.is_mastered(item)

    def mastered_count(self, items: Iterable[Item]) -> int:
        return self.store.mastered_count(items)

    def record_attempt(self, item: Item, correct: bool, threshold: int) -> MasteryRecord:
        """
        記錄一次作答

        Args:
            item: 作答的字
            correct: 是否答對
            threshold: 熟練門檻

        Returns:
            MasteryRecord: 更新後的紀錄
        """
        record = self.store.get(item)
        was_mastered = record.mastered

        if correct:
            record.correct_streak = min(record.correct_streak + 1, threshold)
            if record.correct_streak >= threshold:
                record.mastered = True
        else:
            record.correct_streak = 0

        self._logger.debug(
            f"[Attempt] {item} correct={correct} streak={record.correct_streak}/{threshold}"
        )
        self._persist()

        if record.mastered and not was_mastered:
            self._logger.info(f"[Mastered] {item}")
            self._emit({"type": "mastered", "item": str(item), "streak": record.correct_streak})
        return record

    def record_hint_used(self, item: Item) -> MasteryRecord:
        """使用提示的代價等同答錯：連續答對次數歸零"""
        record = self.store.get(item)
        record.correct_streak = 0
        self._logger.debug(f"[Hint] {item} streak reset")
        self._persist()
        return record

    def reset_items(self, items: Iterable[Item]) -> None:
        """將指定字的紀錄重置為 {0, False} (章節重置)"""
        items = list(items)
        self.store.reset_items(items)
        self._logger.info(f"已重置 {len(items)} 個字的進度")
        self._persist()

    def reset_all(self) -> None:
        """清除全部進度"""
        self.store.clear()
        self._logger.info("已清除全部進度")
        if self._repository is not None:
            self._repository.clear_progress()

    def _persist(self) -> None:
        if self._repository is not None:
            self._repository.save_progress(self.store)

    def _emit(self, event) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")
