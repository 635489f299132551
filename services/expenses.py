"""Expense service for the active term's spending records."""

from dataclasses import replace
from typing import List, Optional

from models.expense import Expense, PAYMENT_TYPES
from services.ledger import to_amount, to_date
from logger import get_logger

logger = get_logger()

UPDATABLE_FIELDS = ("amount", "category_id", "type", "date", "note")


def sort_expenses(expenses: List[Expense]) -> List[Expense]:
    """Order expenses by date, newest first (stable for equal dates)."""
    return sorted(expenses, key=lambda e: e.date, reverse=True)


def _check_type(payment_type: str) -> str:
    if payment_type not in PAYMENT_TYPES:
        raise ValueError(
            f"Invalid payment type '{payment_type}', expected one of {PAYMENT_TYPES}"
        )
    return payment_type


class ExpenseService:
    """Service for managing expenses."""

    def __init__(self, ledger):
        """Initialize the expense service.

        Args:
            ledger: Shared Ledger holding the collections.
        """
        self.ledger = ledger

    def find_all(self) -> List[Expense]:
        """Get every expense across all terms, newest first."""
        return list(self.ledger.expenses)

    def find(self, expense_id: str) -> Optional[Expense]:
        """Get a single expense by ID.

        Returns:
            Expense object if found, None otherwise.
        """
        for expense in self.ledger.expenses:
            if expense.id == expense_id:
                return expense
        return None

    def for_term(self, term_id: str) -> List[Expense]:
        """Get all expenses attached to a term."""
        return [e for e in self.ledger.expenses if e.term_id == term_id]

    def for_active_term(self) -> List[Expense]:
        """Get the active term's expenses; empty when no term is active."""
        if self.ledger.active_term_id is None:
            return []
        return self.for_term(self.ledger.active_term_id)

    def add(
        self,
        amount,
        category_id: str,
        type: str,
        date,
        note: str = "",
    ) -> Expense:
        """Record an expense against the active term.

        Args:
            amount: Positive amount spent.
            category_id: ID of the category (not required to exist).
            type: 'cash' or 'non-cash'.
            date: Day of the expense (date or YYYY-MM-DD string).
            note: Optional free text.

        Returns:
            The created Expense.

        Raises:
            ValueError: If no term is active or any field is invalid.
        """
        term = self.ledger.require_active_term()
        expense = Expense(
            id=self.ledger.id_factory(),
            term_id=term.id,
            amount=to_amount(amount),
            category_id=category_id,
            type=_check_type(type),
            date=to_date(date),
            note=note or "",
        )

        if not term.contains(expense.date):
            logger.warning(
                f"Expense date {expense.date} is outside term "
                f"{term.start_date} to {term.end_date}"
            )

        self.ledger.commit(expenses=sort_expenses([expense] + self.ledger.expenses))
        logger.info(f"Added expense {expense.id}: {expense.amount} on {expense.date}")
        return expense

    def update(self, expense_id: str, **fields) -> Optional[Expense]:
        """Patch an expense in place.

        Args:
            expense_id: The expense ID to update.
            **fields: Any of amount, category_id, type, date, note.

        Returns:
            The updated Expense, or None if the expense does not exist.

        Raises:
            ValueError: If a field is unknown or its value is invalid.
        """
        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update expense fields: {', '.join(sorted(unknown))}")

        if "amount" in fields:
            fields["amount"] = to_amount(fields["amount"])
        if "type" in fields:
            _check_type(fields["type"])
        if "date" in fields:
            fields["date"] = to_date(fields["date"])
        if "note" in fields:
            fields["note"] = fields["note"] or ""

        expense = self.find(expense_id)
        if expense is None:
            logger.debug(f"Expense {expense_id} not found - nothing to update")
            return None

        updated = replace(expense, **fields)
        self.ledger.commit(
            expenses=sort_expenses(
                [updated if e.id == expense_id else e for e in self.ledger.expenses]
            )
        )
        logger.info(f"Updated expense {expense_id}: {sorted(fields)}")
        return updated

    def delete(self, expense_id: str) -> bool:
        """Delete an expense by ID.

        Returns:
            True if the expense was deleted, False if not found.
        """
        if self.find(expense_id) is None:
            logger.debug(f"Expense {expense_id} not found - nothing to delete")
            return False

        self.ledger.commit(
            expenses=[e for e in self.ledger.expenses if e.id != expense_id]
        )
        logger.info(f"Deleted expense {expense_id}")
        return True
