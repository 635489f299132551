#!/usr/bin/env python3
"""
termledger CLI - Track spending against a budget term.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    terms        Start, end and manage budget terms
    expenses     Record expenses against the active term
    categories   Manage expense categories
    currency     Show or change the global currency
    summary      Show totals and insights for a term
    migrate      Database migrations

Examples:
    python -m cli terms start 2024-06-01 2000
    python -m cli expenses add 12.50 cat-food --type cash --note lunch
    python -m cli summary --compare <past-term-id>
    python -m cli migrate apply
"""

import sys
import argparse
from cli import terms, expenses, categories, currency, summary, migrate
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="termledger - Personal budget term tracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    terms.setup_parser(subparsers)
    expenses.setup_parser(subparsers)
    categories.setup_parser(subparsers)
    currency.setup_parser(subparsers)
    summary.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)
            db_manager = DatabaseManager(config)

            if args.command == "migrate":
                args.func(args, db_manager)
            else:
                # The ledger reads its collections on startup, so the schema must exist
                migrate.apply_pending(db_manager)
                services = Services(config, db_manager=db_manager)
                args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
