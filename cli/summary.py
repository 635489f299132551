#!/usr/bin/env python3

import sys
from currencies import format_currency
from dates import format_date_display
from tools.insights import generate_insights
from tools.summary import cross_term_daily_rate_comparison, get_term_summary
from logger import get_logger

logger = get_logger()


def cmd_summary(args, services):
    """Show budget figures and insights for a term."""
    summary = get_term_summary(services, args.term)
    if summary is None:
        logger.error("No such term." if args.term else "No active term.")
        sys.exit(1)

    term = summary.term
    currency = term.currency

    def money(amount):
        return format_currency(amount, currency)

    logger.info(
        f"\nTerm {format_date_display(term.start_date)} - "
        f"{format_date_display(term.end_date)}"
    )
    logger.info("=" * 80)
    logger.info(f"Budget:     {money(term.budget)}")
    logger.info(f"Spent:      {money(summary.total_spent)} ({summary.percent_used:.1f}% used)")
    if summary.is_overspent:
        logger.info(f"Overspent:  {money(abs(summary.remaining))}")
    else:
        logger.info(f"Remaining:  {money(summary.remaining)}")

    if summary.category_breakdown:
        logger.info("\nBy category:")
        for item in summary.category_breakdown:
            logger.info(f"  {item.name:<14} {money(item.amount)}")

    split = summary.payment_split
    logger.info("\nPayment methods:")
    logger.info(f"  Cash       {money(split.cash)} ({split.cash_percent:.1f}%)")
    logger.info(f"  Non-cash   {money(split.non_cash)} ({split.non_cash_percent:.1f}%)")

    logger.info("\nInsights:")
    expenses = services.expenses.for_term(term.id)
    for insight in generate_insights(
        term, expenses, services.categories.find_all(), services.ledger.today()
    ):
        logger.info(f"  {insight}")

    if args.compare:
        _compare(args.compare, services)


def _compare(past_term_id, services):
    active = services.terms.active()
    past = services.terms.find(past_term_id)
    if active is None or past is None:
        logger.error("Comparison needs an active term and an existing past term.")
        sys.exit(1)

    comparison = cross_term_daily_rate_comparison(
        active,
        services.expenses.for_term(active.id),
        past,
        services.expenses.for_term(past.id),
        services.ledger.today(),
    )
    direction = "more" if comparison.is_spending_more else "less"
    logger.info("\nCompared to the past term:")
    logger.info(
        f"  Daily average now {format_currency(comparison.active_daily, active.currency)}, "
        f"then {format_currency(comparison.past_daily, past.currency)}"
    )
    logger.info(f"  You are spending {abs(comparison.diff_percent):.1f}% {direction} per day")


def setup_parser(subparsers):
    """Setup summary command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "summary",
        help="Show term summary and insights",
        description="Show budget usage, breakdowns and insights for a term",
    )
    parser.add_argument("--term", help="Term ID (default: active term)")
    parser.add_argument(
        "--compare", metavar="TERM_ID", help="Compare daily spend with a past term"
    )
    parser.set_defaults(func=cmd_summary)
