"""Shared pytest fixtures for all tests."""

import itertools
import sqlite3
import pytest
from datetime import date
from pathlib import Path

from config import Config, get_migrations_dir
from services.base import Services
from tests.helpers import run_migrations

TODAY = date(2024, 6, 10)


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for testing.

    Yields:
        sqlite3.Connection: Connection to in-memory database.
    """
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "termledger",
        db_data_dir=tmp_path / "termledger" / "db",
        db_filename="test.db",
        log_level="DEBUG",
        log_dir=tmp_path / "termledger" / "logs",
        default_currency="USD",
    )


class TestDatabaseManager:
    """Test database manager that uses an already open connection."""

    __test__ = False

    def __init__(self, conn):
        self.conn = conn

    def connect(self):
        """Return a context manager for the test connection."""
        return _TestConnectionContext(self.conn)

    def get_db_path(self):
        """Return a fake path for the test database."""
        return Path(":memory:")

    def get_migrations_dir(self):
        """Get the migrations directory path."""
        return get_migrations_dir()


class _TestConnectionContext:
    """Context manager for test database connections."""

    def __init__(self, conn):
        self.conn = conn

    def __enter__(self):
        return self.conn

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Don't close the connection - let the fixture handle it
        pass


@pytest.fixture
def db_manager_with_schema(test_db):
    """Create a database manager with all migrations applied.

    Args:
        test_db: In-memory database connection fixture.

    Returns:
        TestDatabaseManager: Database manager with schema ready.
    """
    run_migrations(test_db, get_migrations_dir())
    return TestDatabaseManager(test_db)


@pytest.fixture
def id_factory():
    """Deterministic ids: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def clock():
    """A settable clock; tests change ``clock.today`` to move time."""

    class FixedClock:
        def __init__(self):
            self.today = TODAY

        def __call__(self):
            return self.today

    return FixedClock()


@pytest.fixture
def make_services(test_config, db_manager_with_schema, id_factory, clock):
    """Build a Services container over the shared test database.

    Calling it again simulates an application restart over the same data.
    """

    def _make():
        return Services(
            test_config,
            db_manager=db_manager_with_schema,
            id_factory=id_factory,
            clock=clock,
        )

    return _make


@pytest.fixture
def services(make_services):
    """Create a Services container with test database.

    Returns:
        Services: Services container for testing.
    """
    return make_services()


@pytest.fixture
def active_term(services):
    """A June 2024 term with a 2000 budget, set as active."""
    return services.terms.start_new(date(2024, 6, 1), 2000)
