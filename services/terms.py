"""Term service for budgeting period lifecycle."""

from dataclasses import replace
from typing import List, Optional

from currencies import is_supported
from dates import end_of_month
from models.term import Term
from services.ledger import to_amount, to_date
from logger import get_logger

logger = get_logger()


def sort_terms(terms: List[Term]) -> List[Term]:
    """Order terms by start date, newest first."""
    return sorted(terms, key=lambda t: t.start_date, reverse=True)


class TermService:
    """Service for managing terms and the active-term pointer."""

    def __init__(self, ledger):
        """Initialize the term service.

        Args:
            ledger: Shared Ledger holding the collections.
        """
        self.ledger = ledger

    def find_all(self) -> List[Term]:
        """Get all terms.

        Returns:
            List of Term objects, ordered by start date (newest first).
        """
        return list(self.ledger.terms)

    def find(self, term_id: str) -> Optional[Term]:
        """Get a single term by ID.

        Returns:
            Term object if found, None otherwise.
        """
        return self.ledger.find_term(term_id)

    def active(self) -> Optional[Term]:
        """Get the term currently receiving expenses, if any."""
        return self.ledger.active_term()

    def history(self) -> List[Term]:
        """Get every term except the active one, newest first."""
        return [t for t in self.ledger.terms if t.id != self.ledger.active_term_id]

    def start_new(self, start_date, budget) -> Term:
        """Start a new term and make it the active one.

        The term runs to the last day of the start date's month and takes the
        current global currency. Overlapping terms are allowed.

        Args:
            start_date: First day of the term (date or YYYY-MM-DD string).
            budget: Positive budget for the term.

        Returns:
            The created Term.

        Raises:
            ValueError: If the date is malformed or the budget is not positive.
        """
        start = to_date(start_date)
        amount = to_amount(budget, "budget")

        term = Term(
            id=self.ledger.id_factory(),
            start_date=start,
            end_date=end_of_month(start),
            budget=amount,
            currency=self.ledger.global_currency,
        )
        self.ledger.commit(
            terms=sort_terms(self.ledger.terms + [term]),
            active_term_id=term.id,
        )
        logger.info(
            f"Started term {term.id} ({term.start_date} to {term.end_date}, "
            f"budget {term.budget} {term.currency})"
        )
        return term

    def update_budget(self, term_id: str, budget) -> Optional[Term]:
        """Change a term's budget.

        Returns:
            The updated Term, or None if the term does not exist.

        Raises:
            ValueError: If the budget is not positive.
        """
        amount = to_amount(budget, "budget")
        return self._update(term_id, budget=amount)

    def update_currency(self, term_id: str, currency: str) -> Optional[Term]:
        """Change the currency a single term is kept in.

        Returns:
            The updated Term, or None if the term does not exist.

        Raises:
            ValueError: If the currency code is not supported.
        """
        if not is_supported(currency):
            raise ValueError(f"Unsupported currency: {currency}")
        return self._update(term_id, currency=currency.upper())

    def end_current(self) -> Term:
        """End the active term today and clear the active pointer.

        Expenses dated after the new end date are kept as they are.

        Raises:
            ValueError: If no term is active.
        """
        term = self.ledger.require_active_term()
        # A term started in the future cannot end before it starts
        end = max(self.ledger.today(), term.start_date)
        ended = replace(term, end_date=end)

        self.ledger.commit(
            terms=[ended if t.id == term.id else t for t in self.ledger.terms],
            active_term_id=None,
        )
        logger.info(f"Ended term {term.id} on {end}")
        return ended

    def delete(self, term_id: str) -> bool:
        """Delete a term together with all of its expenses.

        Returns:
            True if the term was deleted, False if not found.
        """
        if self.ledger.find_term(term_id) is None:
            logger.debug(f"Term {term_id} not found - nothing to delete")
            return False

        remaining_expenses = [e for e in self.ledger.expenses if e.term_id != term_id]
        removed = len(self.ledger.expenses) - len(remaining_expenses)

        changes = {
            "terms": [t for t in self.ledger.terms if t.id != term_id],
            "expenses": remaining_expenses,
        }
        if self.ledger.active_term_id == term_id:
            changes["active_term_id"] = None

        self.ledger.commit(**changes)
        logger.info(f"Deleted term {term_id} and {removed} expense(s)")
        return True

    def reset_current(self) -> int:
        """Delete every expense of the active term, keeping the term itself.

        Returns:
            Number of expenses removed.

        Raises:
            ValueError: If no term is active.
        """
        term = self.ledger.require_active_term()
        remaining_expenses = [e for e in self.ledger.expenses if e.term_id != term.id]
        removed = len(self.ledger.expenses) - len(remaining_expenses)

        self.ledger.commit(expenses=remaining_expenses)
        logger.info(f"Reset term {term.id}: removed {removed} expense(s)")
        return removed

    def set_active(self, term_id: Optional[str]) -> bool:
        """Point the active term at any existing term, or clear it with None.

        Returns:
            True if the pointer now references ``term_id``, False if the term
            does not exist.
        """
        if term_id is not None and self.ledger.find_term(term_id) is None:
            logger.debug(f"Term {term_id} not found - active term unchanged")
            return False

        if self.ledger.active_term_id != term_id:
            self.ledger.commit(active_term_id=term_id)
            logger.info(f"Active term set to {term_id}")
        return True

    def _update(self, term_id: str, **fields) -> Optional[Term]:
        term = self.ledger.find_term(term_id)
        if term is None:
            logger.debug(f"Term {term_id} not found - nothing to update")
            return None

        updated = replace(term, **fields)
        self.ledger.commit(
            terms=[updated if t.id == term_id else t for t in self.ledger.terms]
        )
        logger.info(f"Updated term {term_id}: {fields}")
        return updated
