import json

import pytest

from aurora_calc.history import HISTORY_LIMIT, HistoryLedger
from aurora_calc.models import HistoryEntry
from aurora_calc.storage import JsonFileStorage, MemoryStorage


class FailingStorage(MemoryStorage):
    def load(self):
        raise OSError("disk gone")

    def save(self, data):
        raise OSError("disk full")


@pytest.fixture
def storage():
    return MemoryStorage()


def entry(i):
    return HistoryEntry(f"{i}+{i}", str(2 * i))


class TestAppend:
    def test_newest_first(self, storage):
        ledger = HistoryLedger(storage)
        ledger.append(entry(1))
        entries = ledger.append(entry(2))
        assert entries == (entry(2), entry(1))

    def test_bounded_to_fifty(self, storage):
        ledger = HistoryLedger(storage)
        for i in range(55):
            ledger.append(entry(i))
        assert len(ledger) == HISTORY_LIMIT == 50
        assert ledger.entries[0] == entry(54)
        assert ledger.entries[-1] == entry(5)
        assert entry(4) not in ledger.entries

    def test_persists_whole_list(self, storage):
        ledger = HistoryLedger(storage)
        ledger.append(entry(1))
        ledger.append(HistoryEntry("5/0", "Error"))
        assert json.loads(storage.data.decode("utf-8")) == [
            {"expression": "5/0", "result": "Error"},
            {"expression": "1+1", "result": "2"},
        ]

    def test_save_failure_is_not_fatal(self):
        ledger = HistoryLedger(FailingStorage())
        assert ledger.append(entry(1)) == (entry(1),)


class TestLoad:
    def test_round_trip(self, storage):
        ledger = HistoryLedger(storage)
        for i in range(3):
            ledger.append(entry(i))
        reloaded = HistoryLedger(storage)
        assert reloaded.load() == ledger.entries

    def test_absent_is_empty(self, storage):
        assert HistoryLedger(storage).load() == ()

    @pytest.mark.parametrize("raw", [
        b"not json",
        b"\xff\xfe",
        b'{"expression": "1", "result": "1"}',
        b'[{"expression": "1"}]',
        b'[{"expression": "1", "result": 1}]',
        b"[1, 2]",
        b'["1+1"]',
        b"[" * 100000,
    ])
    def test_malformed_is_empty(self, raw):
        assert HistoryLedger(MemoryStorage(raw)).load() == ()

    def test_unreadable_is_empty(self):
        assert HistoryLedger(FailingStorage()).load() == ()

    def test_truncates_oversized_data(self):
        items = [{"expression": str(i), "result": str(i)} for i in range(60)]
        ledger = HistoryLedger(MemoryStorage(json.dumps(items).encode("utf-8")))
        assert len(ledger.load()) == 50


class TestClear:
    def test_clear_then_reload(self, storage):
        ledger = HistoryLedger(storage)
        ledger.append(entry(1))
        ledger.clear()
        assert ledger.entries == ()
        assert HistoryLedger(storage).load() == ()

    def test_clear_file_storage(self, tmp_path):
        storage = JsonFileStorage(tmp_path)
        ledger = HistoryLedger(storage)
        ledger.append(entry(1))
        assert storage.path.exists()
        ledger.clear()
        assert not storage.path.exists()
        assert HistoryLedger(JsonFileStorage(tmp_path)).load() == ()
