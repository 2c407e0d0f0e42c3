"""Tests for ledger persistence."""
import json
import pytest
from business_logic.ledger import Ledger
from config import config
from ledger_store import LedgerStore, PersistenceUnavailable
from conftest import T0


class TestLedgerStoreInitialization:
    """Test LedgerStore initialization."""

    def test_init_with_custom_file(self, data_file):
        store = LedgerStore(data_file=str(data_file))
        assert store.data_file == data_file

    def test_init_without_file_uses_config(self):
        store = LedgerStore()
        assert store.data_file == config.data_file

    def test_init_expands_tilde(self):
        store = LedgerStore(data_file="~/punch-data.json")
        assert "~" not in str(store.data_file)


class TestLoad:
    """Test loading the ledger."""

    def test_missing_file_is_empty_ledger(self, store):
        assert store.load() == Ledger()

    def test_load_saved_ledger(self, store, busy_ledger):
        store.store(busy_ledger)
        assert store.load() == busy_ledger

    def test_load_legacy_history_lists(self, store, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(json.dumps({"running": {"a": T0}, "history": {"b": [60, 30]}}))

        ledger = store.load()

        assert ledger.running == {"a": T0}
        assert ledger.history == {"b": 90}
        assert ledger.session_count("b") == 2

    def test_corrupt_json_raises(self, store, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text("{not json")
        with pytest.raises(PersistenceUnavailable):
            store.load()

    def test_wrong_shape_raises(self, store, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(json.dumps({"running": {"a": "yesterday"}}))
        with pytest.raises(PersistenceUnavailable):
            store.load()

    def test_unreadable_path_raises(self, tmp_path):
        """A directory where the file should be cannot be read."""
        target = tmp_path / "data.json"
        target.mkdir()
        with pytest.raises(PersistenceUnavailable):
            LedgerStore(data_file=str(target)).load()


class TestStore:
    """Test saving the ledger."""

    def test_creates_parent_directory(self, store, data_file, busy_ledger):
        store.store(busy_ledger)
        assert data_file.exists()

    def test_writes_pretty_json_with_all_maps(self, store, data_file, busy_ledger):
        store.store(busy_ledger)
        content = data_file.read_text()
        data = json.loads(content)
        assert data == {
            "running": {"write report": T0, "email": T0 + 60},
            "history": {"write report": 3600, "review": 90061, "lunch": 50},
            "sessions": {"write report": 2, "review": 1, "lunch": 1},
        }
        assert "\n  " in content

    def test_overwrites_previous_content(self, store, busy_ledger):
        store.store(busy_ledger)
        store.store(Ledger())
        assert store.load() == Ledger()

    def test_round_trip_is_byte_identical(self, store, data_file, busy_ledger):
        """Loading and storing without changes reproduces the same file."""
        store.store(busy_ledger)
        first = data_file.read_bytes()

        store.store(store.load())

        assert data_file.read_bytes() == first

    def test_no_temporary_file_left_behind(self, store, data_file, busy_ledger):
        store.store(busy_ledger)
        assert [p.name for p in data_file.parent.iterdir()] == ["data.json"]

    def test_unwritable_location_raises(self, tmp_path, busy_ledger):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = LedgerStore(data_file=str(blocker / "data.json"))
        with pytest.raises(PersistenceUnavailable):
            store.store(busy_ledger)
