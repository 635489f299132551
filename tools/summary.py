"""Term aggregation tools.

Pure functions over a term, its expenses and the category list. Nothing here
mutates its inputs; every figure is recomputed from the snapshot passed in.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from models.category import Category
from models.expense import Expense, CASH, NON_CASH
from models.term import Term
from services.categories import category_label

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class CategoryTotal:
    name: str
    amount: Decimal


@dataclass(frozen=True)
class PaymentSplit:
    cash: Decimal
    non_cash: Decimal
    cash_percent: Decimal
    non_cash_percent: Decimal


@dataclass(frozen=True)
class DailyRateComparison:
    """Daily spend of an in-progress term against a completed one."""

    active_daily: Decimal
    past_daily: Decimal
    diff_percent: Decimal

    @property
    def is_spending_more(self) -> bool:
        return self.diff_percent > 0


@dataclass(frozen=True)
class TermSummary:
    term: Term
    total_spent: Decimal
    remaining: Decimal
    percent_used: Decimal
    percent_used_raw: Decimal
    category_breakdown: List[CategoryTotal] = field(default_factory=list)
    payment_split: Optional[PaymentSplit] = None

    @property
    def is_overspent(self) -> bool:
        return self.remaining < 0

    @property
    def top_category(self) -> Optional[CategoryTotal]:
        return self.category_breakdown[0] if self.category_breakdown else None


def total_spent(expenses: Iterable[Expense]) -> Decimal:
    return sum((e.amount for e in expenses), ZERO)


def remaining(term: Term, expenses: Iterable[Expense]) -> Decimal:
    """Budget left; negative when the term is overspent."""
    return term.budget - total_spent(expenses)


def percent_used_raw(term: Term, expenses: Iterable[Expense]) -> Decimal:
    """Share of the budget spent, not clamped (can exceed 100)."""
    return total_spent(expenses) / term.budget * HUNDRED


def percent_used(term: Term, expenses: Iterable[Expense]) -> Decimal:
    """Share of the budget spent, clamped at 100 for progress displays."""
    return min(percent_used_raw(term, expenses), HUNDRED)


def category_sums(expenses: Iterable[Expense]) -> Dict[str, Decimal]:
    """Sum amounts per category ID, keyed in first-encountered order."""
    sums: Dict[str, Decimal] = {}
    for expense in expenses:
        sums[expense.category_id] = sums.get(expense.category_id, ZERO) + expense.amount
    return sums


def category_breakdown(
    expenses: Iterable[Expense], categories: List[Category]
) -> List[CategoryTotal]:
    """Spend per category name, largest first.

    Expenses whose category was deleted are grouped under "Unknown".
    """
    by_name: Dict[str, Decimal] = {}
    for category_id, amount in category_sums(expenses).items():
        name = category_label(categories, category_id)
        by_name[name] = by_name.get(name, ZERO) + amount

    totals = [CategoryTotal(name=name, amount=amount) for name, amount in by_name.items()]
    return sorted(totals, key=lambda t: t.amount, reverse=True)


def payment_split(expenses: Iterable[Expense]) -> PaymentSplit:
    """Cash vs non-cash totals and their shares of the combined total.

    With no expenses both shares are 0.
    """
    expenses = list(expenses)
    cash = total_spent(e for e in expenses if e.type == CASH)
    non_cash = total_spent(e for e in expenses if e.type == NON_CASH)
    total = (cash + non_cash) or Decimal("1")

    return PaymentSplit(
        cash=cash,
        non_cash=non_cash,
        cash_percent=cash / total * HUNDRED,
        non_cash_percent=non_cash / total * HUNDRED,
    )


def days_between(start: date, end: date) -> int:
    """Whole days from start to end, at least 1."""
    return max(1, (end - start).days)


def term_length_days(term: Term) -> int:
    return days_between(term.start_date, term.end_date)


def cross_term_daily_rate_comparison(
    active_term: Term,
    active_expenses: Iterable[Expense],
    past_term: Term,
    past_expenses: Iterable[Expense],
    today: date,
) -> DailyRateComparison:
    """Compare daily spend of the active term so far with a past term.

    The active term is measured over the days elapsed up to ``today``; the
    past term over its full length, since it is closed. This keeps terms of
    different lengths comparable.

    Example:
        A 30-day past term that spent 300 (10/day) against an active term 10
        days in that spent 150 (15/day) gives ``diff_percent == 50``.
    """
    active_days = days_between(active_term.start_date, today)
    past_days = term_length_days(past_term)

    active_daily = total_spent(active_expenses) / active_days
    past_daily = total_spent(past_expenses) / past_days

    if past_daily == 0:
        diff = ZERO
    else:
        diff = (active_daily - past_daily) / past_daily * HUNDRED

    return DailyRateComparison(
        active_daily=active_daily,
        past_daily=past_daily,
        diff_percent=diff,
    )


def summarize_term(
    term: Term, expenses: Iterable[Expense], categories: List[Category]
) -> TermSummary:
    """Compute every headline figure for a term in one pass over the snapshot."""
    expenses = list(expenses)
    spent = total_spent(expenses)
    raw = spent / term.budget * HUNDRED

    return TermSummary(
        term=term,
        total_spent=spent,
        remaining=term.budget - spent,
        percent_used=min(raw, HUNDRED),
        percent_used_raw=raw,
        category_breakdown=category_breakdown(expenses, categories),
        payment_split=payment_split(expenses),
    )


def get_term_summary(services, term_id: Optional[str] = None) -> Optional[TermSummary]:
    """Summarize a stored term.

    Args:
        services: Services container with term, expense and category services.
        term_id: Term to summarize; defaults to the active term.

    Returns:
        TermSummary, or None if there is no such term.
    """
    term = services.terms.find(term_id) if term_id else services.terms.active()
    if term is None:
        return None

    return summarize_term(
        term,
        services.expenses.for_term(term.id),
        services.categories.find_all(),
    )
