"""In-memory ledger state committed through the key-value store."""

import json
import uuid
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, List, Optional

from config import get_seed_dir
from currencies import DEFAULT_CURRENCY, is_supported
from dates import parse_date
from models.category import Category
from models.expense import Expense
from models.term import Term
from logger import get_logger

logger = get_logger()

# Store keys, one per logical collection
GLOBAL_CURRENCY_KEY = "globalCurrency"
TERMS_KEY = "terms"
ACTIVE_TERM_KEY = "activeTermId"
EXPENSES_KEY = "expenses"
CATEGORIES_KEY = "categories"


def new_id() -> str:
    return str(uuid.uuid4())


def to_amount(value, field: str = "amount") -> Decimal:
    """Coerce a user-supplied amount to a positive Decimal.

    Raises:
        ValueError: If the value is not a finite number greater than zero.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid {field}: {value!r}")
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValueError(f"Invalid {field}: {value!r}") from None

    if not amount.is_finite() or amount <= 0:
        raise ValueError(f"{field.capitalize()} must be greater than zero, got {value!r}")
    return amount


def to_date(value) -> date:
    """Accept a date, datetime or ISO string and return a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date(value)


def load_default_categories() -> List[Category]:
    """Load the default category set from db/seed/categories.json."""
    seed_file = get_seed_dir() / "categories.json"
    with open(seed_file, "r") as f:
        categories_data = json.load(f)

    return [
        Category(id=item["id"], name=item["name"], is_default=True)
        for item in categories_data
    ]


class Ledger:
    """Single source of truth for terms, expenses, categories and preferences.

    Collections are replaced wholesale on every change: a mutation builds the
    new lists, writes them through the store and only then swaps them in, so a
    failed write leaves the in-memory snapshot untouched.

    Args:
        store: Key-value store with ``get``/``set_many``.
        id_factory: Callable producing fresh unique ids.
        clock: Callable returning today's date.
        default_currency: Global currency used until the user picks one.
    """

    def __init__(
        self,
        store,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], date]] = None,
        default_currency: str = "USD",
    ):
        self.store = store
        self.id_factory = id_factory or new_id
        self.clock = clock or date.today

        if not is_supported(default_currency):
            logger.warning(
                f"Configured default currency {default_currency!r} is not supported"
                f" - using {DEFAULT_CURRENCY}"
            )
            default_currency = DEFAULT_CURRENCY
        self.global_currency: str = store.get(
            GLOBAL_CURRENCY_KEY, default_currency.upper()
        )
        self.terms: List[Term] = [
            Term.from_dict(item) for item in store.get(TERMS_KEY, [])
        ]
        self.expenses: List[Expense] = [
            Expense.from_dict(item) for item in store.get(EXPENSES_KEY, [])
        ]

        active_term_id = store.get(ACTIVE_TERM_KEY, None)
        if active_term_id is not None and not any(
            t.id == active_term_id for t in self.terms
        ):
            logger.warning(f"Active term {active_term_id} no longer exists - clearing")
            active_term_id = None
        self.active_term_id: Optional[str] = active_term_id

        stored_categories = store.get(CATEGORIES_KEY, None)
        if stored_categories is None:
            self.categories: List[Category] = []
            self.commit(categories=load_default_categories())
            logger.info(f"Seeded {len(self.categories)} default categories")
        else:
            self.categories = [Category.from_dict(item) for item in stored_categories]

    def today(self) -> date:
        return self.clock()

    def find_term(self, term_id: Optional[str]) -> Optional[Term]:
        for term in self.terms:
            if term.id == term_id:
                return term
        return None

    def active_term(self) -> Optional[Term]:
        return self.find_term(self.active_term_id)

    def require_active_term(self) -> Term:
        """Return the active term.

        Raises:
            ValueError: If no term is active.
        """
        term = self.active_term()
        if term is None:
            raise ValueError("No active term. Start a new term first.")
        return term

    def commit(self, **changes) -> None:
        """Persist changed collections, then make them the current snapshot.

        Accepted keywords: terms, expenses, categories, active_term_id,
        global_currency.

        Raises:
            sqlite3.Error: If the store write fails; nothing is swapped in.
        """
        encoders = {
            "terms": (TERMS_KEY, lambda v: [t.to_dict() for t in v]),
            "expenses": (EXPENSES_KEY, lambda v: [e.to_dict() for e in v]),
            "categories": (CATEGORIES_KEY, lambda v: [c.to_dict() for c in v]),
            "active_term_id": (ACTIVE_TERM_KEY, lambda v: v),
            "global_currency": (GLOBAL_CURRENCY_KEY, lambda v: v),
        }

        payload = {}
        for name, value in changes.items():
            if name not in encoders:
                raise TypeError(f"Unknown ledger collection: {name}")
            key, encode = encoders[name]
            payload[key] = encode(value)

        self.store.set_many(payload)

        for name, value in changes.items():
            setattr(self, name, list(value) if isinstance(value, list) else value)
