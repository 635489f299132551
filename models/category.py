"""Category model for expense classification."""

from dataclasses import dataclass


@dataclass
class Category:
    """Represents a label used to classify expenses.

    Attributes:
        id: Unique identifier, e.g. "cat-food".
        name: Display name (not required to be unique).
        is_default: True for the seeded categories.
    """

    id: str
    name: str
    is_default: bool = False

    def to_dict(self) -> dict:
        """Convert category to a JSON-ready dictionary."""
        return {"id": self.id, "name": self.name, "isDefault": self.is_default}

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        return cls(
            id=data["id"],
            name=data["name"],
            is_default=bool(data.get("isDefault", False)),
        )
