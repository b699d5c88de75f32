"""会话内计算历史（不持久化）"""
from collections import deque
from typing import Iterator, List

import pandas as pd

from config.constants import HISTORY_COLUMNS
from config.settings import HISTORY_LIMIT
from core.schema import HistoryEntry


class CalculationHistory:
    """最新在前、最多保留 limit 条的历史记录"""

    def __init__(self, limit: int = HISTORY_LIMIT):
        if limit <= 0:
            raise ValueError("history limit must be positive")
        self.limit = limit
        self._entries = deque(maxlen=limit)

    def add(self, entry: HistoryEntry) -> None:
        self._entries.appendleft(entry)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [{"label": e.label, "value": e.value} for e in self._entries],
            columns=HISTORY_COLUMNS,
        )
