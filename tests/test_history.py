"""计算历史测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from core.history import CalculationHistory
from core.schema import HistoryEntry


def _entry(i: int) -> HistoryEntry:
    return HistoryEntry(label=f"input {i}", value=f"result {i}")


class TestCalculationHistory:
    def test_newest_first(self, history):
        history.add(_entry(1))
        history.add(_entry(2))
        assert [e.label for e in history] == ["input 2", "input 1"]

    def test_capped_at_ten(self, history):
        for i in range(15):
            history.add(_entry(i))
        assert len(history) == 10
        assert history.entries[0] == _entry(14)
        assert history.entries[-1] == _entry(5)

    def test_custom_limit(self):
        history = CalculationHistory(limit=2)
        for i in range(3):
            history.add(_entry(i))
        assert history.entries == [_entry(2), _entry(1)]

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            CalculationHistory(limit=0)

    def test_clear(self, history):
        history.add(_entry(1))
        history.clear()
        assert len(history) == 0
        assert history.entries == []

    def test_entries_is_a_copy(self, history):
        history.add(_entry(1))
        history.entries.append(_entry(2))
        assert len(history) == 1

    def test_to_frame(self, history):
        assert history.to_frame().empty
        assert list(history.to_frame().columns) == ["label", "value"]

        history.add(_entry(1))
        history.add(_entry(2))
        df = history.to_frame()
        assert len(df) == 2
        assert df.iloc[0]["label"] == "input 2"
        assert df.iloc[1]["value"] == "result 1"
