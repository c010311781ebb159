"""
熟練度追蹤測試

驗證：
1. 答對累加、答錯 / 提示歸零
2. 達門檻即熟練，熟練不會被取消
3. 每次變動都寫回儲存
"""

import json

import pytest

from pinyindrill.core.types import MasteryRecord, ProgressStore
from pinyindrill.progress import PROGRESS_KEY, MasteryTracker, MemoryStorage, ProgressRepository

THRESHOLD = 5


class TestMasteryTracker:
    def setup_method(self):
        self.storage = MemoryStorage()
        self.events = []
        self.tracker = MasteryTracker(
            repository=ProgressRepository(self.storage),
            on_event=self.events.append,
        )

    def saved(self):
        return json.loads(self.storage.get(PROGRESS_KEY))

    def test_lazy_default_record(self):
        record = self.tracker.get("妈")
        assert record == MasteryRecord(0, False)

    def test_correct_increments(self):
        record = self.tracker.record_attempt("妈", True, THRESHOLD)
        assert record.correct_streak == 1
        record = self.tracker.record_attempt("妈", True, THRESHOLD)
        assert record.correct_streak == 2
        assert not record.mastered

    def test_incorrect_resets_streak(self):
        for _ in range(3):
            self.tracker.record_attempt("妈", True, THRESHOLD)
        record = self.tracker.record_attempt("妈", False, THRESHOLD)
        assert record.correct_streak == 0

    def test_hint_resets_streak(self):
        for _ in range(3):
            self.tracker.record_attempt("妈", True, THRESHOLD)
        record = self.tracker.record_hint_used("妈")
        assert record.correct_streak == 0
        assert not record.mastered

    def test_mastered_at_threshold(self):
        for i in range(THRESHOLD - 1):
            record = self.tracker.record_attempt("妈", True, THRESHOLD)
            assert not record.mastered
        record = self.tracker.record_attempt("妈", True, THRESHOLD)
        assert record.mastered
        assert record.correct_streak == THRESHOLD
        assert [e["type"] for e in self.events] == ["mastered"]

    def test_mastery_is_sticky(self):
        """熟練後答錯、提示、再答對都不會取消熟練"""
        for _ in range(THRESHOLD):
            self.tracker.record_attempt("妈", True, THRESHOLD)
        for correct in (False, True, True, False):
            record = self.tracker.record_attempt("妈", correct, THRESHOLD)
            assert record.mastered
        record = self.tracker.record_hint_used("妈")
        assert record.mastered

    def test_streak_capped_at_threshold(self):
        for _ in range(THRESHOLD + 3):
            record = self.tracker.record_attempt("妈", True, THRESHOLD)
        assert record.correct_streak == THRESHOLD
        assert len(self.events) == 1

    def test_write_through(self):
        self.tracker.record_attempt("妈", True, THRESHOLD)
        assert self.saved() == {"妈": {"correctStreak": 1, "mastered": False}}
        self.tracker.record_hint_used("妈")
        assert self.saved() == {"妈": {"correctStreak": 0, "mastered": False}}

    def test_reset_items(self):
        for _ in range(THRESHOLD):
            self.tracker.record_attempt("妈", True, THRESHOLD)
        self.tracker.record_attempt("马", True, THRESHOLD)
        self.tracker.record_attempt("爱", True, THRESHOLD)
        self.tracker.reset_items(["妈", "马"])
        assert self.tracker.get("妈") == MasteryRecord(0, False)
        assert self.tracker.get("马") == MasteryRecord(0, False)
        assert self.tracker.get("爱").correct_streak == 1
        assert self.saved()["妈"] == {"correctStreak": 0, "mastered": False}

    def test_reset_all(self):
        for _ in range(THRESHOLD):
            self.tracker.record_attempt("妈", True, THRESHOLD)
        self.tracker.reset_all()
        assert len(self.tracker.store) == 0
        assert not self.tracker.is_mastered("妈")
        assert self.storage.get(PROGRESS_KEY) is None

    def test_loads_existing_progress(self):
        self.storage.set(PROGRESS_KEY, json.dumps({"马": {"correctStreak": 5, "mastered": True}}))
        tracker = MasteryTracker(repository=ProgressRepository(self.storage))
        assert tracker.is_mastered("马")
        assert tracker.mastered_count(["妈", "马"]) == 1

    def test_failing_event_handler_is_ignored(self):
        def boom(event):
            raise RuntimeError("boom")

        tracker = MasteryTracker(on_event=boom)
        for _ in range(THRESHOLD):
            record = tracker.record_attempt("妈", True, THRESHOLD)
        assert record.mastered


class TestProgressStore:
    def test_from_dict_rejects_bad_records(self):
        with pytest.raises(ValueError):
            ProgressStore.from_dict({"妈": {"correctStreak": -1, "mastered": False}})
        with pytest.raises(ValueError):
            ProgressStore.from_dict({"妈": {"correctStreak": 1, "mastered": "yes"}})
        with pytest.raises(ValueError):
            ProgressStore.from_dict(["妈"])

    def test_get_creates_default_lazily(self):
        store = ProgressStore()
        assert "妈" not in store
        store.get("妈")
        assert "妈" in store
