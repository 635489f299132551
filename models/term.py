"""Term model for budgeting periods."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class Term:
    """A bounded budgeting period with a fixed budget and currency.

    Attributes:
        id: Unique identifier.
        start_date: First day of the term.
        end_date: Last day of the term (inclusive, never before start_date).
        budget: Budget for the whole term, always positive.
        currency: Currency code the term is kept in, e.g. "USD".
    """

    id: str
    start_date: date
    end_date: date
    budget: Decimal
    currency: str

    def contains(self, day: date) -> bool:
        """Check whether a day falls within the term (inclusive)."""
        return self.start_date <= day <= self.end_date

    def to_dict(self) -> dict:
        """Convert term to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "budget": str(self.budget),
            "currency": self.currency,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Term":
        return cls(
            id=data["id"],
            start_date=date.fromisoformat(data["startDate"]),
            end_date=date.fromisoformat(data["endDate"]),
            budget=Decimal(str(data["budget"])),
            currency=data["currency"],
        )
