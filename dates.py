"""Calendar helpers for term boundaries and display."""

from datetime import date, datetime
from typing import Optional

from dateutil.relativedelta import relativedelta


def end_of_month(start: date) -> date:
    """Return the last calendar day of the month containing ``start``.

    Example:
        >>> end_of_month(date(2024, 2, 5))
        datetime.date(2024, 2, 29)
    """
    return start + relativedelta(day=31)


def parse_date(value: str) -> date:
    """Parse a strict ISO ``YYYY-MM-DD`` date.

    Raises:
        ValueError: If the string is not a valid calendar date.
    """
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD") from None


def format_date_display(value: Optional[date]) -> str:
    """Format a date as e.g. ``5 Feb 2024``; empty string for None."""
    if value is None:
        return ""
    return f"{value.day} {value.strftime('%b %Y')}"
