from dataclasses import dataclass
from datetime import date
from decimal import Decimal

CASH = "cash"
NON_CASH = "non-cash"
PAYMENT_TYPES = (CASH, NON_CASH)


@dataclass
class Expense:
    id: str
    term_id: str
    amount: Decimal  # always positive
    category_id: str  # may dangle after a category is deleted
    type: str  # 'cash' or 'non-cash'
    date: date
    note: str = ""

    def to_dict(self) -> dict:
        """Convert expense to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "termId": self.term_id,
            "amount": str(self.amount),
            "categoryId": self.category_id,
            "type": self.type,
            "date": self.date.isoformat(),
            "note": self.note,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Expense":
        return cls(
            id=data["id"],
            term_id=data["termId"],
            amount=Decimal(str(data["amount"])),
            category_id=data["categoryId"],
            type=data["type"],
            date=date.fromisoformat(data["date"]),
            note=data.get("note", ""),
        )
