"""Currency catalog and amount formatting."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional, Union

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class Currency:
    code: str
    symbol: str
    name: str
    flag: str


SUPPORTED_CURRENCIES: Dict[str, Currency] = {
    "USD": Currency("USD", "$", "US Dollar", "🇺🇸"),
    "EUR": Currency("EUR", "€", "Euro", "🇪🇺"),
    "INR": Currency("INR", "₹", "Indian Rupee", "🇮🇳"),
    "GBP": Currency("GBP", "£", "British Pound", "🇬🇧"),
    "JPY": Currency("JPY", "¥", "Japanese Yen", "🇯🇵"),
    "AUD": Currency("AUD", "A$", "Australian Dollar", "🇦🇺"),
    "CAD": Currency("CAD", "C$", "Canadian Dollar", "🇨🇦"),
    "SGD": Currency("SGD", "S$", "Singapore Dollar", "🇸🇬"),
    "AED": Currency("AED", "د.إ", "UAE Dirham", "🇦🇪"),
    "CNY": Currency("CNY", "¥", "Chinese Yuan", "🇨🇳"),
    "CHF": Currency("CHF", "CHF", "Swiss Franc", "🇨🇭"),
    "NZD": Currency("NZD", "NZ$", "New Zealand Dollar", "🇳🇿"),
    "ZAR": Currency("ZAR", "R", "South African Rand", "🇿🇦"),
    "HKD": Currency("HKD", "HK$", "Hong Kong Dollar", "🇭🇰"),
    "KRW": Currency("KRW", "₩", "South Korean Won", "🇰🇷"),
}

CURRENCY_CODES = list(SUPPORTED_CURRENCIES)


def get_currency(code: Optional[str]) -> Optional[Currency]:
    """Look up a currency by code, returning None if it is not in the catalog."""
    if not code:
        return None
    return SUPPORTED_CURRENCIES.get(code.upper())


def is_supported(code: Optional[str]) -> bool:
    return get_currency(code) is not None


def format_currency(
    amount: Union[Decimal, int, float], currency_code: str = DEFAULT_CURRENCY
) -> str:
    """Format an amount with the currency's symbol and two fraction digits.

    Unknown codes are formatted as USD. Only the display falls back; callers
    keep whatever code they stored.

    Args:
        amount: The amount to format.
        currency_code: ISO code of the currency.

    Returns:
        Formatted string, e.g. "$1,234.50" or "-€12.00".

    Example:
        >>> format_currency(Decimal("1234.5"), "EUR")
        '€1,234.50'
    """
    currency = get_currency(currency_code) or SUPPORTED_CURRENCIES[DEFAULT_CURRENCY]
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{currency.symbol}{abs(value):,.2f}"
