"""Base services container for dependency injection."""

from datetime import date
from typing import Callable, Optional

from config import Config
from db.manager import DatabaseManager
from db.store import KeyValueStore


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a test database, a deterministic id factory and a fixed
    clock.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager for testing. If provided, config is
            not used to locate the database.
        id_factory: Optional callable producing unique ids.
        clock: Optional callable returning today's date.
    """

    def __init__(
        self,
        config: Config,
        db_manager=None,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], date]] = None,
    ):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)
        self.store = KeyValueStore(self.db_manager)

        # Lazy import to avoid circular dependencies
        from services.ledger import Ledger
        from services.terms import TermService
        from services.expenses import ExpenseService
        from services.categories import CategoryService
        from services.settings import SettingsService

        self.ledger = Ledger(
            self.store,
            id_factory=id_factory,
            clock=clock,
            default_currency=config.default_currency,
        )
        self.terms = TermService(self.ledger)
        self.expenses = ExpenseService(self.ledger)
        self.categories = CategoryService(self.ledger)
        self.settings = SettingsService(self.ledger)
