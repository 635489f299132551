"""SQLite connection handling for the ledger database."""

import sqlite3
from contextlib import contextmanager
from config import Config, get_migrations_dir

STORE_TABLE = "kv_store"


class DatabaseManager:
    """Opens connections to the ledger database file.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

    @contextmanager
    def connect(self):
        """Open a connection that is closed when the block exits.

        Creates the data directory on first use.

        Yields:
            sqlite3.Connection: Database connection.
        """
        db_path = self.config.db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(db_path)
        try:
            yield conn
        finally:
            conn.close()

    def is_initialized(self) -> bool:
        """Check whether the key-value table has been created."""
        if not self.get_db_path().exists():
            return False

        with self.connect() as conn:
            cursor = conn.execute(
                "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?",
                (STORE_TABLE,),
            )
            return cursor.fetchone() is not None

    def get_db_path(self):
        return self.config.db_path

    def get_migrations_dir(self):
        return get_migrations_dir()
