"""JSON key-value store backed by the kv_store table."""

import json
from typing import Any, Dict
from logger import get_logger

logger = get_logger()


class KeyValueStore:
    """Durable mapping from named keys to JSON-serializable values.

    Args:
        db_manager: Database manager providing ``connect()``.
    """

    def __init__(self, db_manager):
        self.db_manager = db_manager

    def get(self, key: str, default: Any = None) -> Any:
        """Read a value, returning ``default`` when the key was never written."""
        with self.db_manager.connect() as conn:
            cursor = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = cursor.fetchone()

        if row is None:
            return default
        return json.loads(row[0])

    def set(self, key: str, value: Any) -> None:
        """Write a single value.

        Raises:
            sqlite3.Error: If the write fails.
        """
        self.set_many({key: value})

    def set_many(self, values: Dict[str, Any]) -> None:
        """Write several values in one transaction.

        Either every key is written or none is.

        Raises:
            sqlite3.Error: If the write fails; the transaction is rolled back.
        """
        rows = [(key, json.dumps(value)) for key, value in values.items()]

        with self.db_manager.connect() as conn:
            try:
                conn.executemany(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    rows,
                )
                conn.commit()
            except Exception as e:
                conn.rollback()
                logger.error(f"Error writing keys {sorted(values)}: {e}")
                raise

        logger.debug(f"Persisted keys: {', '.join(sorted(values))}")
