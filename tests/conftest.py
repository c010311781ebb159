"""
共用測試工具

FakeLookup 以固定讀音表取代 pypinyin，讓判定結果可控。
"""

import random

import pytest

from pinyindrill.core.scheduler import ManualScheduler
from pinyindrill.core.types import ToneMode
from pinyindrill.progress.storage import MemoryStorage

READINGS = {
    "妈": {ToneMode.PLAIN: ("ma",), ToneMode.TONE_SYMBOL: ("mā",), ToneMode.TONE_NUMBER: ("ma1",)},
    "马": {ToneMode.PLAIN: ("ma",), ToneMode.TONE_SYMBOL: ("mǎ",), ToneMode.TONE_NUMBER: ("ma3",)},
    "爱": {ToneMode.PLAIN: ("ai",), ToneMode.TONE_SYMBOL: ("ài",), ToneMode.TONE_NUMBER: ("ai4",)},
    "的": {
        ToneMode.PLAIN: ("de", "di"),
        ToneMode.TONE_SYMBOL: ("de", "dí", "dì"),
        ToneMode.TONE_NUMBER: ("de", "di2", "di4"),
    },
    "好": {
        ToneMode.PLAIN: ("hao",),
        ToneMode.TONE_SYMBOL: ("hǎo", "hào"),
        ToneMode.TONE_NUMBER: ("hao3", "hao4"),
    },
}


class BrokenStorage(MemoryStorage):
    """讀寫都失敗的儲存"""

    def get(self, key):
        raise OSError("disk unavailable")

    def set(self, key, value):
        raise OSError("disk full")

    def remove(self, key):
        raise OSError("read-only")


class FakeLookup:
    """固定讀音表；未知的字回傳空 tuple (等同查詢失敗降級)"""

    def __init__(self, table=None):
        self.table = table if table is not None else READINGS
        self.calls = []

    def __call__(self, item, tone_mode):
        self.calls.append((item, tone_mode))
        return self.table.get(item, {}).get(tone_mode, ())


@pytest.fixture
def fake_lookup():
    return FakeLookup()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def broken_storage():
    return BrokenStorage()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def rng():
    return random.Random(1234)