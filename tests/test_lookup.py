"""
讀音查詢測試 (使用真實 pypinyin)

驗證：
1. 多音字回傳多個讀音，且小寫、去重
2. 三種聲調模式
3. ü 的拼法 (ü 與 v 都接受)
4. 查詢失敗或查無讀音時降級為空結果
"""

import pytest

from pinyindrill.core.types import MatchMode, ToneMode
from pinyindrill.matching import judge
from pinyindrill.phonetics.lookup import (
    PinyinLookup,
    dedupe_readings,
    format_readings,
)


class TestHelpers:
    def test_dedupe_keeps_first_seen_order(self):
        assert dedupe_readings(["Hao", "hao", "HAO", "hào"]) == ("hao", "hào")

    def test_dedupe_drops_empty(self):
        assert dedupe_readings(["", " ", "de"]) == ("de",)

    def test_format(self):
        assert format_readings(("hǎo", "hào")) == "hǎo / hào"
        assert format_readings(("ài",)) == "ài"
        assert format_readings(()) == ""


class TestPinyinLookup:
    def setup_method(self):
        self.lookup = PinyinLookup()

    def test_single_reading(self):
        assert self.lookup("爱", ToneMode.PLAIN) == ("ai",)
        assert self.lookup("爱", ToneMode.TONE_SYMBOL) == ("ài",)
        assert self.lookup("爱", ToneMode.TONE_NUMBER) == ("ai4",)

    def test_heteronym(self):
        assert self.lookup("好", ToneMode.PLAIN) == ("hao",)
        assert set(self.lookup("好", ToneMode.TONE_NUMBER)) == {"hao3", "hao4"}

    def test_neutral_tone_has_no_digit(self):
        readings = self.lookup("的", ToneMode.TONE_NUMBER)
        assert "de" in readings
        assert "de5" not in readings

    def test_readings_are_lowercase_and_unique(self):
        for mode in ToneMode:
            readings = self.lookup("的", mode)
            assert len(readings) == len(set(readings))
            assert all(r == r.lower() for r in readings)

    def test_non_chinese_degrades(self, caplog):
        events = []
        lookup = PinyinLookup(on_event=events.append)
        with caplog.at_level("WARNING", logger="pinyindrill"):
            assert lookup("A", ToneMode.PLAIN) == ()
        assert "'A'" in caplog.text
        assert events[0]["type"] == "degraded"
        assert events[0]["reason"] == "no_reading"

    def test_u_umlaut_spelling(self):
        """ü 以 ü 表示，同時接受 v 拼法"""
        plain = self.lookup("女", ToneMode.PLAIN)
        tone_number = self.lookup("女", ToneMode.TONE_NUMBER)
        assert plain[0] == "nü"
        assert "nv" in plain
        assert "nü3" in tone_number
        assert "nǚ" in self.lookup("女", ToneMode.TONE_SYMBOL)
        assert judge("nü", MatchMode.PLAIN, plain, tone_number)
        assert judge("NV", MatchMode.PLAIN, plain, tone_number)
        assert judge("nü3", MatchMode.TONE_NUMBER, plain, tone_number)
        assert judge("lü4", MatchMode.TONE_NUMBER, (), self.lookup("绿", ToneMode.TONE_NUMBER))

    def test_malformed_item_degrades(self):
        events = []
        lookup = PinyinLookup(on_event=events.append)
        assert lookup("妈妈", ToneMode.PLAIN) == ()
        assert events[0]["type"] == "degraded"
        assert events[0]["stage"] == "lookup"
        assert events[0]["exception_type"] == "ValueError"

    def test_backend_exception_degrades(self, monkeypatch, caplog):
        def boom(item, tone_mode):
            raise RuntimeError("backend exploded")

        monkeypatch.setattr("pinyindrill.phonetics.lookup.cached_get_readings", boom)
        with caplog.at_level("WARNING", logger="pinyindrill"):
            assert self.lookup("妈", ToneMode.TONE_NUMBER) == ()
        assert "backend exploded" in caplog.text

    @pytest.mark.parametrize("mode", list(ToneMode))
    def test_module_level_lookup(self, mode):
        from pinyindrill.phonetics.lookup import lookup

        assert len(lookup("妈", mode)) == 1
