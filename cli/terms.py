#!/usr/bin/env python3

import sys
from currencies import format_currency
from dates import format_date_display
from tools.summary import get_term_summary
from cli.prompts import confirm
from logger import get_logger

logger = get_logger()


def _describe(term, active_id=None):
    marker = " [active]" if term.id == active_id else ""
    return (
        f"{term.id}{marker}: {format_date_display(term.start_date)} - "
        f"{format_date_display(term.end_date)}, budget "
        f"{format_currency(term.budget, term.currency)} ({term.currency})"
    )


def cmd_start(args, services):
    """Start a new term and make it active."""
    term = services.terms.start_new(args.start_date, args.budget)
    logger.info(f"✓ Started term {_describe(term, term.id)}")


def cmd_list(args, services):
    """List all terms, newest first."""
    terms = services.terms.find_all()
    if not terms:
        logger.info("No terms found. Start one with 'terms start'.")
        return

    active = services.terms.active()
    active_id = active.id if active else None

    logger.info("\nTerms:")
    logger.info("=" * 80)
    for term in terms:
        summary = get_term_summary(services, term.id)
        status = "Overspent" if summary.is_overspent else "Under Budget"
        logger.info(_describe(term, active_id))
        logger.info(
            f"  Spent {format_currency(summary.total_spent, term.currency)} - {status}"
        )
        top = summary.top_category
        if top:
            logger.info(
                f"  Top expense: {top.name} ({format_currency(top.amount, term.currency)})"
            )
    logger.info(f"\nTotal terms: {len(terms)}")


def cmd_budget(args, services):
    """Change a term's budget."""
    term = services.terms.update_budget(args.term_id, args.budget)
    if term is None:
        logger.error(f"Term {args.term_id} not found.")
        sys.exit(1)
    logger.info(f"✓ Budget set to {format_currency(term.budget, term.currency)}")


def cmd_currency(args, services):
    """Change a term's currency."""
    term = services.terms.update_currency(args.term_id, args.currency)
    if term is None:
        logger.error(f"Term {args.term_id} not found.")
        sys.exit(1)
    logger.info(f"✓ Term {term.id} now uses {term.currency}")


def cmd_end(args, services):
    """End the active term today."""
    term = services.terms.end_current()
    logger.info(f"✓ Ended term {_describe(term)}")


def cmd_reset(args, services):
    """Remove every expense from the active term."""
    term = services.terms.active()
    if term is None:
        logger.error("No active term.")
        sys.exit(1)

    if not confirm(f"Delete all expenses of term {term.id}?", args):
        logger.info("Reset cancelled.")
        return

    removed = services.terms.reset_current()
    logger.info(f"✓ Removed {removed} expense(s)")


def cmd_delete(args, services):
    """Delete a term and its expenses."""
    term = services.terms.find(args.term_id)
    if term is None:
        logger.error(f"Term {args.term_id} not found.")
        sys.exit(1)

    logger.info(f"\nTerm to delete: {_describe(term)}")
    if not confirm("Delete this term and all of its expenses?", args):
        logger.info("Deletion cancelled.")
        return

    services.terms.delete(term.id)
    logger.info("✓ Term deleted.")


def cmd_activate(args, services):
    """Switch the active term."""
    if not services.terms.set_active(args.term_id):
        logger.error(f"Term {args.term_id} not found.")
        sys.exit(1)
    logger.info(f"✓ Active term is now {args.term_id}")


def setup_parser(subparsers):
    """Setup terms subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "terms",
        help="Manage budget terms",
        description="Start, end and manage budget terms",
    )

    terms_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available term commands",
        dest="subcommand",
        required=True,
    )

    start_parser = terms_subparsers.add_parser("start", help="Start a new term")
    start_parser.add_argument("start_date", help="First day of the term (YYYY-MM-DD)")
    start_parser.add_argument("budget", help="Budget for the term")
    start_parser.set_defaults(func=cmd_start)

    list_parser = terms_subparsers.add_parser("list", help="List all terms")
    list_parser.set_defaults(func=cmd_list)

    budget_parser = terms_subparsers.add_parser("budget", help="Change a term's budget")
    budget_parser.add_argument("term_id", help="Term ID")
    budget_parser.add_argument("budget", help="New budget")
    budget_parser.set_defaults(func=cmd_budget)

    currency_parser = terms_subparsers.add_parser(
        "currency", help="Change a term's currency"
    )
    currency_parser.add_argument("term_id", help="Term ID")
    currency_parser.add_argument("currency", help="Currency code, e.g. EUR")
    currency_parser.set_defaults(func=cmd_currency)

    end_parser = terms_subparsers.add_parser("end", help="End the active term today")
    end_parser.set_defaults(func=cmd_end)

    reset_parser = terms_subparsers.add_parser(
        "reset", help="Delete all expenses of the active term"
    )
    reset_parser.add_argument("--yes", action="store_true", help="Skip confirmation")
    reset_parser.set_defaults(func=cmd_reset)

    delete_parser = terms_subparsers.add_parser(
        "delete", help="Delete a term and its expenses"
    )
    delete_parser.add_argument("term_id", help="Term ID")
    delete_parser.add_argument("--yes", action="store_true", help="Skip confirmation")
    delete_parser.set_defaults(func=cmd_delete)

    activate_parser = terms_subparsers.add_parser(
        "activate", help="Make an existing term the active one"
    )
    activate_parser.add_argument("term_id", help="Term ID")
    activate_parser.set_defaults(func=cmd_activate)
