from aurora_calc.storage import HISTORY_KEY, JsonFileStorage, MemoryStorage


class TestJsonFileStorage:
    def test_missing_file(self, tmp_path):
        assert JsonFileStorage(tmp_path).load() is None

    def test_namespaced_path(self, tmp_path):
        assert JsonFileStorage(tmp_path).path == tmp_path / f"{HISTORY_KEY}.json"

    def test_save_creates_directory(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "nested" / "dir")
        storage.save(b"[]")
        assert storage.load() == b"[]"

    def test_save_overwrites_without_leftovers(self, tmp_path):
        storage = JsonFileStorage(tmp_path)
        storage.save(b"[1]")
        storage.save(b"[2]")
        assert storage.load() == b"[2]"
        assert [p.name for p in tmp_path.iterdir()] == [f"{HISTORY_KEY}.json"]

    def test_clear_missing_is_noop(self, tmp_path):
        JsonFileStorage(tmp_path).clear()


class TestMemoryStorage:
    def test_cycle(self):
        storage = MemoryStorage()
        storage.save(b"x")
        assert storage.load() == b"x"
        storage.clear()
        assert storage.load() is None
