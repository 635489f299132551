"""Category service for managing expense categories."""

from dataclasses import replace
from typing import List, Optional

from models.category import Category
from logger import get_logger

logger = get_logger()

UNKNOWN_CATEGORY = "Unknown"


def lookup_category(categories: List[Category], category_id: str) -> Optional[Category]:
    """Find a category by ID in a snapshot, or None if it was deleted."""
    for category in categories:
        if category.id == category_id:
            return category
    return None


def category_label(categories: List[Category], category_id: str) -> str:
    """Display name for a category ID, "Unknown" for dangling references."""
    category = lookup_category(categories, category_id)
    return category.name if category else UNKNOWN_CATEGORY


def _check_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValueError("Category name cannot be empty")
    return name


class CategoryService:
    """Service for managing categories."""

    def __init__(self, ledger):
        """Initialize the category service.

        Args:
            ledger: Shared Ledger holding the collections.
        """
        self.ledger = ledger

    def find_all(self) -> List[Category]:
        """Get all categories.

        Returns:
            List of Category objects, defaults first then in creation order.
        """
        return list(self.ledger.categories)

    def find(self, category_id: str) -> Optional[Category]:
        """Get a single category by ID.

        Returns:
            Category object if found, None otherwise.
        """
        return lookup_category(self.ledger.categories, category_id)

    def name_for(self, category_id: str) -> str:
        return category_label(self.ledger.categories, category_id)

    def create(self, name: str) -> Category:
        """Create a new user category.

        Args:
            name: Category name (duplicates are allowed).

        Returns:
            The created Category with a fresh "cat-" prefixed id.

        Raises:
            ValueError: If the name is empty.
        """
        category = Category(
            id=f"cat-{self.ledger.id_factory()}",
            name=_check_name(name),
            is_default=False,
        )
        if self.find(category.id) is not None:
            raise ValueError(f"Category id {category.id} already exists")

        self.ledger.commit(categories=self.ledger.categories + [category])
        logger.info(f"Created category {category.id} ({category.name})")
        return category

    def update(self, category_id: str, name: str) -> Optional[Category]:
        """Rename a category.

        Returns:
            The updated Category, or None if not found.

        Raises:
            ValueError: If the name is empty.
        """
        name = _check_name(name)
        category = self.find(category_id)
        if category is None:
            logger.debug(f"Category {category_id} not found - nothing to update")
            return None

        updated = replace(category, name=name)
        self.ledger.commit(
            categories=[
                updated if c.id == category_id else c for c in self.ledger.categories
            ]
        )
        logger.info(f"Renamed category {category_id} to {name}")
        return updated

    def delete(self, category_id: str) -> bool:
        """Delete a category by ID.

        Expenses that use the category keep their category_id and are shown
        as "Unknown" afterwards.

        Returns:
            True if category was deleted, False if not found.
        """
        if self.find(category_id) is None:
            logger.debug(f"Category {category_id} not found - nothing to delete")
            return False

        self.ledger.commit(
            categories=[c for c in self.ledger.categories if c.id != category_id]
        )
        logger.info(f"Deleted category {category_id}")
        return True
