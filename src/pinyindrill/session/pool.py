"""
練習池管理 (Session Pool Manager)

練習池 = 目前章節中尚未熟練的字。
- 章節開始時由進度重新建立，不做持久化
- 熟練的字立即移出
- 有其他選擇時，不會連續兩次出同一個字
"""

import random
from typing import Iterable, Iterator, List, Optional, Sequence

from pinyindrill.catalog import CHARACTERS, Chapter, get_chapter
from pinyindrill.config import CHARS_PER_EXERCISE
from pinyindrill.core.types import Item, MasteryRecord
from pinyindrill.progress.tracker import MasteryTracker
from pinyindrill.utils.logger import get_logger

logger = get_logger("session.pool")


class SessionPool:
    """章節中尚未熟練的字 (集合語意，內部保留字表順序以便重現隨機結果)"""

    def __init__(self, items: Iterable[Item] = ()):
        self._items: List[Item] = []
        for item in items:
            if item not in self._items:
                self._items.append(item)

    def remove(self, item: Item) -> bool:
        if item in self._items:
            self._items.remove(item)
            return True
        return False

    @property
    def is_empty(self) -> bool:
        return not self._items

    def items(self) -> List[Item]:
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SessionPool({self._items!r})"


def build_pool(chapter: Chapter, tracker: MasteryTracker) -> SessionPool:
    """取出章節中所有未熟練的字 (沒見過的字會建立預設紀錄)"""
    return SessionPool(item for item in chapter.items if not tracker.get(item).mastered)


def select_next(
    pool: SessionPool,
    previous: Optional[Item] = None,
    rng: Optional[random.Random] = None,
) -> Optional[Item]:
    """
    選出下一個字

    Returns:
        Item；練習池為空時回傳 None (章節完成)
    """
    if pool.is_empty:
        return None
    rng = rng or random
    candidates = pool.items()
    if len(candidates) > 1 and previous is not None:
        others = [item for item in candidates if item != previous]
        if others:
            candidates = others
    return rng.choice(candidates)


def remove_if_mastered(pool: SessionPool, item: Item, record: MasteryRecord) -> bool:
    """紀錄已熟練時把字移出練習池 (字不在池中時不做任何事)"""
    if not record.mastered:
        return False
    removed = pool.remove(item)
    if removed:
        logger.debug(f"[Pool] {item} removed, {len(pool)} left")
    return removed


class SessionPoolManager:
    """
    綁定字表、章節大小與進度的練習池工廠

    Args:
        tracker: 熟練度追蹤器
        catalog: 字表
        chars_per_exercise: 章節大小
        rng: 隨機來源 (測試時可傳入固定種子的 random.Random)
    """

    def __init__(
        self,
        tracker: MasteryTracker,
        catalog: Sequence[Item] = CHARACTERS,
        chars_per_exercise: int = CHARS_PER_EXERCISE,
        rng: Optional[random.Random] = None,
    ):
        self.tracker = tracker
        self.catalog = catalog
        self.chars_per_exercise = chars_per_exercise
        self.rng = rng or random.Random()

    def chapter(self, chapter_index: int) -> Chapter:
        return get_chapter(chapter_index, self.catalog, self.chars_per_exercise)

    def start_chapter(self, chapter_index: int) -> SessionPool:
        chapter = self.chapter(chapter_index)
        pool = build_pool(chapter, self.tracker)
        logger.debug(f"[Pool] chapter {chapter_index} ({chapter.range_label}): {len(pool)} to practice")
        return pool

    def select_next(self, pool: SessionPool, previous: Optional[Item] = None) -> Optional[Item]:
        return select_next(pool, previous, self.rng)

    def remove_if_mastered(self, pool: SessionPool, item: Item, record: MasteryRecord) -> bool:
        return remove_if_mastered(pool, item, record)
