"""Helper utilities for tests."""

from datetime import date
from decimal import Decimal
from pathlib import Path
import sqlite3

from models.expense import Expense
from models.term import Term


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        with open(migration_file, "r") as f:
            conn.executescript(f.read())

    conn.commit()


def make_term(
    start=date(2024, 6, 1),
    end=date(2024, 6, 30),
    budget="1000",
    currency="USD",
    id="term-1",
) -> Term:
    """Build a Term without going through the services."""
    return Term(
        id=id,
        start_date=start,
        end_date=end,
        budget=Decimal(budget),
        currency=currency,
    )


def make_expense(
    amount,
    category_id="cat-food",
    type="cash",
    day=date(2024, 6, 2),
    term_id="term-1",
    id=None,
) -> Expense:
    """Build an Expense without going through the services."""
    return Expense(
        id=id or f"exp-{category_id}-{amount}-{day.isoformat()}",
        term_id=term_id,
        amount=Decimal(str(amount)),
        category_id=category_id,
        type=type,
        date=day,
        note="",
    )
