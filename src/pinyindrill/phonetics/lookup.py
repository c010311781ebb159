"""
讀音查詢 (Phonetic Lookup Adapter)

以 pypinyin 取得單字的所有讀音 (多音字會有多個)。

輸出契約:
- 全部小寫、去重，保留第一次出現的順序
- ü 以 ü 表示 (例如 "nü"、"lü4")，另附 v 拼法 ("nv"、"lv4") 作為合法讀音
- 查詢失敗 (包含查不到任何讀音) 時回傳空 tuple，記錄警告，不會把例外拋出此邊界

注意：此模組使用延遲導入 (Lazy Import) 機制，
第一次查詢時才會載入 pypinyin。
"""

from functools import lru_cache
from typing import Callable, Iterable, Optional, Tuple

from pinyindrill.core.events import DrillEventHandler
from pinyindrill.core.types import Item, ToneMode
from pinyindrill.utils.lazy_imports import _get_pypinyin
from pinyindrill.utils.logger import get_logger

logger = get_logger("phonetics.lookup")

Readings = Tuple[str, ...]
LookupFunc = Callable[[Item, ToneMode], Readings]

# ToneMode -> pypinyin.Style 名稱
_STYLE_NAMES = {
    ToneMode.PLAIN: "NORMAL",
    ToneMode.TONE_SYMBOL: "TONE",
    ToneMode.TONE_NUMBER: "TONE3",
}

READING_SEPARATOR = " / "


def dedupe_readings(readings: Iterable[str]) -> Readings:
    """小寫、去除空字串與重複，保留來源順序"""
    seen = set()
    result = []
    for reading in readings:
        normalized = reading.strip().lower()
        if normalized and normalized not in seen:
            seen.add(normalized)
            result.append(normalized)
    return tuple(result)


def format_readings(readings: Iterable[str]) -> str:
    """顯示用：多個讀音以 " / " 串接"""
    return READING_SEPARATOR.join(readings)


# pypinyin 呼叫是效能瓶頸，同一個字在一次練習中會被反覆查詢
@lru_cache(maxsize=8192)
def cached_get_readings(item: str, tone_mode: ToneMode) -> Readings:
    """快取版讀音查詢 (失敗時會拋出例外，由 lookup() 負責降級)"""
    if not isinstance(item, str) or len(item) != 1:
        raise ValueError(f"item must be a single character, got {item!r}")
    pypinyin = _get_pypinyin()
    style = getattr(pypinyin.Style, _STYLE_NAMES[tone_mode])
    result = pypinyin.pinyin(item, style=style, heteronym=True, errors="ignore", v_to_u=True)
    readings = dedupe_readings(result[0]) if result else ()
    if not readings:
        raise LookupError(f"no reading for {item!r}")
    if tone_mode is ToneMode.TONE_SYMBOL:
        return readings
    # 鍵盤不易輸入 ü，同時接受以 v 代替的拼法
    return dedupe_readings(readings + tuple(r.replace("ü", "v") for r in readings))


class PinyinLookup:
    """
    讀音查詢器

    Args:
        on_event: 查詢失敗時會送出 type="degraded" 事件

    使用範例:
        >>> lookup = PinyinLookup()
        >>> lookup("好", ToneMode.TONE_NUMBER)
        ('hao3', 'hao4')
    """

    def __init__(self, on_event: Optional[DrillEventHandler] = None):
        self._on_event = on_event

    def __call__(self, item: Item, tone_mode: ToneMode) -> Readings:
        return self.lookup(item, tone_mode)

    def lookup(self, item: Item, tone_mode: ToneMode) -> Readings:
        try:
            return cached_get_readings(item, tone_mode)
        except Exception as e:
            logger.warning(f"讀音查詢失敗 {item!r} ({tone_mode.value}): {e}")
            self._emit_degraded(item, e)
            return ()

    def _emit_degraded(self, item: Item, error: Exception) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(
                {
                    "type": "degraded",
                    "stage": "lookup",
                    "item": str(item),
                    "reason": "no_reading" if isinstance(error, LookupError) else "lookup_failed",
                    "exception_type": type(error).__name__,
                    "exception_message": str(error),
                }
            )
        except Exception:
            logger.exception("on_event 回呼執行失敗")


_default_lookup: Optional[PinyinLookup] = None


def lookup(item: Item, tone_mode: ToneMode) -> Readings:
    """模組層級的便捷函式，使用共享的 PinyinLookup"""
    global _default_lookup
    if _default_lookup is None:
        _default_lookup = PinyinLookup()
    return _default_lookup.lookup(item, tone_mode)
