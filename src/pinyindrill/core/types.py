"""
核心資料型別

- Item: 一個可練習的字，身分即字本身
- ToneMode: 讀音的聲調呈現方式
- ParsedReading: 數字聲調讀音拆解後的 (base, tone)
- MasteryRecord: 單字的連續答對次數與熟練旗標
- ProgressStore: Item -> MasteryRecord 的強型別映射，也是持久化單位
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, NewType, Optional

Item = NewType("Item", str)


class ToneMode(Enum):
    """讀音聲調模式"""
    PLAIN = "plain"                # ma
    TONE_SYMBOL = "tone-symbol"    # mǎ
    TONE_NUMBER = "tone-number"    # ma3


class MatchMode(Enum):
    """作答比對模式 (進階模式要求輸入數字聲調)"""
    PLAIN = "plain"
    TONE_NUMBER = "tone-number"

    @classmethod
    def from_advanced(cls, advanced_mode: bool) -> "MatchMode":
        return cls.TONE_NUMBER if advanced_mode else cls.PLAIN


@dataclass(frozen=True)
class ParsedReading:
    """
    數字聲調讀音的拆解結果

    Attributes:
        base: 不含聲調數字的拼音
        tone: 1-4；None 代表輕聲
    """
    base: str
    tone: Optional[int] = None


@dataclass
class MasteryRecord:
    """單字熟練紀錄"""
    correct_streak: int = 0
    mastered: bool = False

    def reset(self) -> None:
        self.correct_streak = 0
        self.mastered = False

    def to_dict(self) -> Dict[str, object]:
        return {"correctStreak": self.correct_streak, "mastered": self.mastered}

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "MasteryRecord":
        streak = data.get("correctStreak", 0)
        mastered = data.get("mastered", False)
        if isinstance(streak, bool) or not isinstance(streak, int) or streak < 0:
            raise ValueError(f"invalid correctStreak: {streak!r}")
        if not isinstance(mastered, bool):
            raise ValueError(f"invalid mastered flag: {mastered!r}")
        return cls(correct_streak=streak, mastered=mastered)


class ProgressStore:
    """
    Item -> MasteryRecord 映射

    紀錄採延遲建立：第一次 get() 時才建立預設值 {0, False}。
    """

    def __init__(self, records: Optional[Dict[Item, MasteryRecord]] = None):
        self._records: Dict[Item, MasteryRecord] = dict(records or {})

    def get(self, item: Item) -> MasteryRecord:
        record = self._records.get(item)
        if record is None:
            record = MasteryRecord()
            self._records[item] = record
        return record

    def is_mastered(self, item: Item) -> bool:
        return self.get(item).mastered

    def mastered_count(self, items: Iterable[Item]) -> int:
        return sum(1 for item in items if self.is_mastered(item))

    def reset_items(self, items: Iterable[Item]) -> None:
        for item in items:
            self.get(item).reset()

    def clear(self) -> None:
        self._records.clear()

    def to_dict(self) -> Dict[str, Dict[str, object]]:
        return {item: record.to_dict() for item, record in self._records.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, object]]) -> "ProgressStore":
        if not isinstance(data, dict):
            raise ValueError(f"progress must be a mapping, got {type(data).__name__}")
        records = {}
        for key, value in data.items():
            if not isinstance(value, dict):
                raise ValueError(f"record for {key!r} must be a mapping")
            records[Item(key)] = MasteryRecord.from_dict(value)
        return cls(records)

    def __contains__(self, item: object) -> bool:
        return item in self._records

    def __iter__(self) -> Iterator[Item]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
