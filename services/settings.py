"""Settings service for global preferences."""

from currencies import is_supported
from logger import get_logger

logger = get_logger()


class SettingsService:
    """Service for the global currency preference."""

    def __init__(self, ledger):
        self.ledger = ledger

    def global_currency(self) -> str:
        return self.ledger.global_currency

    def set_global_currency(self, currency: str) -> str:
        """Set the currency new terms start with.

        Existing terms keep their own currency.

        Raises:
            ValueError: If the currency code is not supported.
        """
        if not is_supported(currency):
            raise ValueError(f"Unsupported currency: {currency}")

        code = currency.upper()
        if code != self.ledger.global_currency:
            self.ledger.commit(global_currency=code)
            logger.info(f"Global currency set to {code}")
        return code
