"""
作答比對器 (Answer Matcher)

將使用者輸入與一個字的所有合法讀音比對，有兩種模式：

- plain: 不含聲調，輸入必須完全等於某個讀音 (例如 "ma")
- tone-number: 以結尾數字 1-4 表示聲調 (例如 "ma3")；無數字代表輕聲

比對規則:
- 輸入先 strip() 再 lower()
- 沒有部分得分、沒有編輯距離容錯；拼寫或聲調任一不同即判錯
- 輕聲讀音只接受不帶數字的輸入，反之亦然
"""

import re
from typing import Iterable, Optional

from pinyindrill.core.types import MatchMode, ParsedReading

# <base><1-4>，base 不可為空
_TONE_SUFFIX = re.compile(r"^(.+)([1-4])$", re.DOTALL)

HINT_TOKENS = frozenset({"help", "hint"})


def normalize_submission(submitted: Optional[str]) -> str:
    """去除前後空白並轉小寫"""
    if submitted is None:
        return ""
    return submitted.strip().lower()


def is_hint_request(submitted: Optional[str]) -> bool:
    """輸入 "help" 或 "hint" 視為請求提示，而不是作答"""
    return normalize_submission(submitted) in HINT_TOKENS


def parse_reading(reading: str) -> ParsedReading:
    """
    拆解數字聲調讀音

    範例:
        >>> parse_reading("ma3")
        ParsedReading(base='ma', tone=3)
        >>> parse_reading("de")
        ParsedReading(base='de', tone=None)
        >>> parse_reading("5")
        ParsedReading(base='5', tone=None)
    """
    match = _TONE_SUFFIX.match(reading)
    if match is None:
        return ParsedReading(base=reading, tone=None)
    return ParsedReading(base=match.group(1), tone=int(match.group(2)))


def judge_plain(submitted: str, valid_readings: Iterable[str]) -> bool:
    return submitted in set(valid_readings)


def judge_tone_number(submitted: str, valid_readings: Iterable[str]) -> bool:
    parsed = parse_reading(submitted)
    return any(parse_reading(reading) == parsed for reading in valid_readings)


def judge(
    submitted: str,
    mode: MatchMode,
    valid_readings_plain: Iterable[str],
    valid_readings_tone_number: Iterable[str],
) -> bool:
    """
    判定一次作答

    Args:
        submitted: 使用者輸入 (會先正規化)
        mode: MatchMode.PLAIN 或 MatchMode.TONE_NUMBER (也接受 "plain" / "tone-number"；
              其他值拋出 ValueError)
        valid_readings_plain: 無聲調讀音
        valid_readings_tone_number: 數字聲調讀音

    Returns:
        bool: 是否答對。正規化後為空字串時一律回傳 False，
              呼叫端應將其視為「沒有作答」而不是答錯。
    """
    mode = MatchMode(mode)
    normalized = normalize_submission(submitted)
    if not normalized:
        return False
    if mode is MatchMode.TONE_NUMBER:
        return judge_tone_number(normalized, valid_readings_tone_number)
    return judge_plain(normalized, valid_readings_plain)
