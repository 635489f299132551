import pytest
import sqlite3

from db.store import KeyValueStore


class TestKeyValueStore:
    """Tests for KeyValueStore."""

    def test_get_missing_key_returns_default(self, db_manager_with_schema):
        store = KeyValueStore(db_manager_with_schema)

        assert store.get("terms") is None
        assert store.get("terms", []) == []

    def test_set_and_get_round_trip(self, db_manager_with_schema):
        store = KeyValueStore(db_manager_with_schema)

        store.set("terms", [{"id": "t1", "budget": "10.00"}])
        store.set("activeTermId", None)

        assert store.get("terms") == [{"id": "t1", "budget": "10.00"}]
        assert store.get("activeTermId", "fallback") is None

    def test_set_overwrites(self, db_manager_with_schema):
        store = KeyValueStore(db_manager_with_schema)

        store.set("globalCurrency", "USD")
        store.set("globalCurrency", "EUR")

        assert store.get("globalCurrency") == "EUR"

    def test_set_many_writes_all_keys(self, db_manager_with_schema):
        store = KeyValueStore(db_manager_with_schema)

        store.set_many({"terms": [], "expenses": [{"id": "e1"}], "activeTermId": "t1"})

        assert store.get("terms") == []
        assert store.get("expenses") == [{"id": "e1"}]
        assert store.get("activeTermId") == "t1"

    def test_set_many_is_all_or_nothing(self, db_manager_with_schema, test_db):
        """Test a failing value leaves earlier keys of the batch unwritten."""
        store = KeyValueStore(db_manager_with_schema)
        store.set("terms", ["old"])
        test_db.execute(
            """
            CREATE TRIGGER reject_expenses BEFORE INSERT ON kv_store
            WHEN NEW.key = 'expenses'
            BEGIN
                SELECT RAISE(ABORT, 'rejected');
            END
            """
        )

        with pytest.raises(sqlite3.IntegrityError):
            store.set_many({"terms": ["new"], "expenses": []})

        assert store.get("terms") == ["old"]
        assert store.get("expenses") is None

    def test_unserializable_value_raises(self, db_manager_with_schema):
        store = KeyValueStore(db_manager_with_schema)

        with pytest.raises(TypeError):
            store.set("terms", {object()})
