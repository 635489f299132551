"""Rule-based spending insights for a term.

Rules run in a fixed order and each contributes at most one message:

1. no expenses -> a single prompt to add some, nothing else
2. budget tier on the unclamped percentage (over / warning / on track)
3. highest-spending category
4. payment mix (high digital / cash heavy / neither)
5. projected overspend, only while today is inside the term and more than
   three days have passed
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from currencies import format_currency, get_currency, SUPPORTED_CURRENCIES, DEFAULT_CURRENCY
from models.category import Category
from models.expense import Expense, NON_CASH
from models.term import Term
from services.categories import category_label
from tools.messages import MessageCatalog
from tools.summary import category_sums, percent_used_raw, total_spent

OVER_BUDGET_PERCENT = Decimal("100")
WARNING_PERCENT = Decimal("80")
HIGH_DIGITAL_PERCENT = Decimal("70")
CASH_HEAVY_PERCENT = Decimal("30")
MIN_DAYS_FOR_PROJECTION = 3

_default_catalog = MessageCatalog()


def _rounded(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def generate_insights(
    term: Term,
    expenses: List[Expense],
    categories: List[Category],
    today: date,
    catalog: Optional[MessageCatalog] = None,
) -> List[str]:
    """Generate ordered spending observations for a term.

    Args:
        term: The term being analysed.
        expenses: Expenses attached to the term.
        categories: Current category list (deleted ones show as "Unknown").
        today: Current date, used for the overspend projection.
        catalog: Optional message catalog; defaults to tools/messages.yaml.

    Returns:
        List of insight strings in rule order.
    """
    catalog = catalog or _default_catalog

    def say(name: str, **values) -> str:
        return catalog.render("insights", name, **values)

    if not expenses:
        return [say("no_expenses")]

    insights = []
    spent = total_spent(expenses)

    # Budget tier
    percent = percent_used_raw(term, expenses)
    if percent >= OVER_BUDGET_PERCENT:
        insights.append(say("over_budget"))
    elif percent >= WARNING_PERCENT:
        insights.append(say("budget_warning", percent=_rounded(percent)))
    else:
        insights.append(say("on_track", percent=_rounded(percent)))

    # Top category, first maximum wins
    sums = category_sums(expenses)
    if sums:
        top_id = max(sums, key=lambda category_id: sums[category_id])
        if sums[top_id] > 0:
            insights.append(
                say(
                    "top_category",
                    category=category_label(categories, top_id),
                    amount=format_currency(sums[top_id], term.currency),
                )
            )

    # Payment mix
    if spent > 0:
        non_cash = total_spent(e for e in expenses if e.type == NON_CASH)
        non_cash_percent = non_cash / spent * 100
        if non_cash_percent > HIGH_DIGITAL_PERCENT:
            insights.append(say("high_digital", percent=_rounded(non_cash_percent)))
        elif non_cash_percent < CASH_HEAVY_PERCENT:
            insights.append(say("cash_heavy", percent=_rounded(non_cash_percent)))

    # Overspend projection
    if term.contains(today):
        days_passed = (today - term.start_date).days + 1
        if days_passed > MIN_DAYS_FOR_PROJECTION:
            total_days = (term.end_date - term.start_date).days + 1
            daily_rate = spent / days_passed
            if daily_rate * total_days > term.budget:
                currency = get_currency(term.currency) or SUPPORTED_CURRENCIES[DEFAULT_CURRENCY]
                insights.append(
                    say(
                        "projected_overspend",
                        daily_rate=f"{currency.symbol}{_rounded(daily_rate):,}",
                    )
                )

    return insights
