#!/usr/bin/env python3

import sys
from currencies import format_currency
from dates import format_date_display
from models.expense import PAYMENT_TYPES, CASH
from logger import get_logger

logger = get_logger()


def cmd_add(args, services):
    """Add an expense to the active term."""
    term = services.terms.active()
    if term is None:
        logger.error("No active term. Start one with 'terms start'.")
        sys.exit(1)

    if services.categories.find(args.category_id) is None:
        logger.warning(f"Category {args.category_id} does not exist; it will show as Unknown.")

    expense_date = args.date or services.ledger.today().isoformat()
    expense = services.expenses.add(
        args.amount, args.category_id, args.type, expense_date, args.note
    )
    logger.info(
        f"✓ Added {format_currency(expense.amount, term.currency)} "
        f"({services.categories.name_for(expense.category_id)}, {expense.type}) "
        f"on {format_date_display(expense.date)}"
    )


def cmd_list(args, services):
    """List expenses of the active term (or another term)."""
    term = services.terms.find(args.term) if args.term else services.terms.active()
    if term is None:
        logger.error("No such term." if args.term else "No active term.")
        sys.exit(1)

    expenses = services.expenses.for_term(term.id)
    if not expenses:
        logger.info("No expenses yet.")
        return

    logger.info(f"\nExpenses for term {term.id}:")
    logger.info("=" * 80)
    for expense in expenses:
        note = f" - {expense.note}" if expense.note else ""
        logger.info(
            f"{format_date_display(expense.date):>12}  "
            f"{format_currency(expense.amount, term.currency):>14}  "
            f"{services.categories.name_for(expense.category_id):<12} "
            f"{expense.type:<8} {expense.id}{note}"
        )
    logger.info(f"\n{len(expenses)} Total")


def cmd_update(args, services):
    """Update fields of an expense."""
    fields = {}
    for name in ("amount", "category_id", "type", "date", "note"):
        value = getattr(args, name)
        if value is not None:
            fields[name] = value

    if not fields:
        logger.error("Nothing to update.")
        sys.exit(1)

    expense = services.expenses.update(args.expense_id, **fields)
    if expense is None:
        logger.error(f"Expense {args.expense_id} not found.")
        sys.exit(1)
    logger.info(f"✓ Updated expense {expense.id}")


def cmd_delete(args, services):
    """Delete an expense."""
    if not services.expenses.delete(args.expense_id):
        logger.error(f"Expense {args.expense_id} not found.")
        sys.exit(1)
    logger.info("✓ Expense deleted.")


def setup_parser(subparsers):
    """Setup expenses subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "expenses",
        help="Manage expenses",
        description="Record and edit expenses of the active term",
    )

    expenses_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available expense commands",
        dest="subcommand",
        required=True,
    )

    add_parser = expenses_subparsers.add_parser("add", help="Add an expense")
    add_parser.add_argument("amount", help="Amount spent")
    add_parser.add_argument("category_id", help="Category ID, e.g. cat-food")
    add_parser.add_argument("--type", choices=PAYMENT_TYPES, default=CASH)
    add_parser.add_argument("--date", help="Date of the expense (default: today)")
    add_parser.add_argument("--note", default="", help="Optional note")
    add_parser.set_defaults(func=cmd_add)

    list_parser = expenses_subparsers.add_parser("list", help="List expenses")
    list_parser.add_argument("--term", help="Term ID (default: active term)")
    list_parser.set_defaults(func=cmd_list)

    update_parser = expenses_subparsers.add_parser("update", help="Update an expense")
    update_parser.add_argument("expense_id", help="Expense ID")
    update_parser.add_argument("--amount")
    update_parser.add_argument("--category-id", dest="category_id")
    update_parser.add_argument("--type", choices=PAYMENT_TYPES)
    update_parser.add_argument("--date")
    update_parser.add_argument("--note")
    update_parser.set_defaults(func=cmd_update)

    delete_parser = expenses_subparsers.add_parser("delete", help="Delete an expense")
    delete_parser.add_argument("expense_id", help="Expense ID")
    delete_parser.set_defaults(func=cmd_delete)
