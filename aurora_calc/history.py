import json
import logging
from typing import Tuple

from .models import HistoryEntry

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 50


class HistoryLedger:
    """
    تاریخچه‌ی محاسبات، جدیدترین در ابتدا، حداکثر ``limit`` رکورد.

    پس از هر تغییر کل فهرست دوباره در حافظه‌ی ماندگار نوشته می‌شود.
    """

    def __init__(self, storage, limit: int = HISTORY_LIMIT):
        self.storage = storage
        self.limit = limit
        self._entries: Tuple[HistoryEntry, ...] = ()

    @property
    def entries(self) -> Tuple[HistoryEntry, ...]:
        return self._entries

    def __len__(self):
        return len(self._entries)

    def load(self) -> Tuple[HistoryEntry, ...]:
        """بارگذاری تاریخچه؛ داده‌ی خراب یا ناموجود یعنی تاریخچه‌ی خالی"""
        try:
            raw = self.storage.load()
        except OSError as e:
            logger.warning("history storage unreadable: %s", e)
            raw = None
        self._entries = ()
        if raw:
            try:
                self._entries = self._decode(raw)[:self.limit]
            except (ValueError, TypeError, KeyError, RecursionError) as e:
                logger.warning("discarding malformed history: %s", e)
        return self._entries

    @staticmethod
    def _decode(raw: bytes) -> Tuple[HistoryEntry, ...]:
        items = json.loads(raw.decode("utf-8"))
        if not isinstance(items, list):
            raise TypeError("history must be a list")
        entries = []
        for item in items:
            expression, result = item["expression"], item["result"]
            if not isinstance(expression, str) or not isinstance(result, str):
                raise TypeError(f"bad history record {item!r}")
            entries.append(HistoryEntry(expression, result))
        return tuple(entries)

    def _save(self):
        data = json.dumps([e.to_dict() for e in self._entries], ensure_ascii=False, indent=2)
        try:
            self.storage.save(data.encode("utf-8"))
            return True
        except OSError as e:
            logger.error("could not save history: %s", e)
            return False

    def append(self, entry: HistoryEntry) -> Tuple[HistoryEntry, ...]:
        self._entries = ((entry,) + self._entries)[:self.limit]
        self._save()
        return self._entries

    def clear(self):
        self._entries = ()
        try:
            self.storage.clear()
        except OSError as e:
            logger.error("could not erase history: %s", e)
