"""
進度持久化

持久化只有兩個具名 blob：
- PROGRESS_KEY: {字: {"correctStreak": n, "mastered": bool}} 的 JSON
- MODE_KEY: 進階模式旗標，存成 "true" / "false"

啟動時讀一次，之後每次變動都整份覆寫。

錯誤處理:
- 讀不到 / 沒有資料: 視為沒有任何進度
- 資料損毀: 丟棄並從空白開始 (記錄 warning)
- 寫入失敗: 不重試，記憶體中的狀態仍為準
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from pinyindrill.core.events import DrillEventHandler
from pinyindrill.core.types import ProgressStore
from pinyindrill.utils.logger import get_logger

PROGRESS_KEY = "pinyinProgress"
MODE_KEY = "advancedMode"

logger = get_logger("progress.storage")


class KeyValueStorage(ABC):
    """字串 key/value 儲存介面"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass


class MemoryStorage(KeyValueStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class FileStorage(KeyValueStorage):
    """
    每個 key 一個檔案 (<directory>/<key>)

    寫入不保證原子性；寫到一半中斷可能留下損毀的檔案，
    下次啟動時會被當成損毀資料丟棄。
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / key

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")

    def remove(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            os.remove(path)


class ProgressRepository:
    """
    進度與模式旗標的讀寫

    所有 I/O 錯誤都在此處吸收並記錄，不會讓練習中斷。
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        progress_key: str = PROGRESS_KEY,
        mode_key: str = MODE_KEY,
        on_event: Optional[DrillEventHandler] = None,
    ):
        self.storage = storage
        self.progress_key = progress_key
        self.mode_key = mode_key
        self._on_event = on_event

    def load_progress(self) -> ProgressStore:
        try:
            raw = self.storage.get(self.progress_key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"讀取進度失敗，從空白開始: {e}")
            self._emit_degraded("storage_read", "read_failed", e)
            return ProgressStore()
        if not raw:
            return ProgressStore()
        try:
            store = ProgressStore.from_dict(json.loads(raw))
        except ValueError as e:
            # json.JSONDecodeError 也是 ValueError
            logger.warning(f"進度資料損毀，已丟棄: {e}")
            self._emit_degraded("storage_read", "corrupt_progress", e)
            return ProgressStore()
        logger.debug(f"已載入 {len(store)} 筆進度")
        return store

    def save_progress(self, store: ProgressStore) -> bool:
        payload = json.dumps(store.to_dict(), ensure_ascii=False)
        return self._write(self.progress_key, payload)

    def clear_progress(self) -> bool:
        try:
            self.storage.remove(self.progress_key)
        except OSError as e:
            logger.warning(f"清除進度失敗: {e}")
            self._emit_degraded("storage_write", "remove_failed", e)
            return False
        return True

    def load_advanced_mode(self) -> bool:
        try:
            raw = self.storage.get(self.mode_key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"讀取模式旗標失敗: {e}")
            self._emit_degraded("storage_read", "read_failed", e)
            return False
        return (raw or "").strip().lower() == "true"

    def save_advanced_mode(self, enabled: bool) -> bool:
        return self._write(self.mode_key, "true" if enabled else "false")

    def _write(self, key: str, value: str) -> bool:
        try:
            self.storage.set(key, value)
        except OSError as e:
            logger.warning(f"寫入 {key} 失敗 (不重試，記憶體狀態仍有效): {e}")
            self._emit_degraded("storage_write", "write_failed", e)
            return False
        return True

    def _emit_degraded(self, stage: str, reason: str, error: Exception) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(
                {
                    "type": "degraded",
                    "stage": stage,
                    "reason": reason,
                    "exception_type": type(error).__name__,
                    "exception_message": str(error),
                }
            )
        except Exception:
            logger.exception("on_event 回呼執行失敗")
