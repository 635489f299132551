#!/usr/bin/env python3

from currencies import SUPPORTED_CURRENCIES
from logger import get_logger

logger = get_logger()


def cmd_show(args, services):
    """Show the global currency."""
    code = services.settings.global_currency()
    currency = SUPPORTED_CURRENCIES.get(code)
    label = f"{currency.flag} {currency.name} ({currency.symbol})" if currency else code
    logger.info(f"Global currency: {code} - {label}")


def cmd_set(args, services):
    """Set the currency used by new terms."""
    code = services.settings.set_global_currency(args.code)
    logger.info(f"✓ New terms will use {code}. Existing terms are unchanged.")


def cmd_list(args, services):
    """List supported currencies."""
    for currency in SUPPORTED_CURRENCIES.values():
        logger.info(f"{currency.flag} {currency.code:<4} {currency.symbol:<4} {currency.name}")


def setup_parser(subparsers):
    """Setup currency subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "currency",
        help="Global currency preference",
        description="Show or change the currency new terms start with",
    )

    currency_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available currency commands",
        dest="subcommand",
        required=True,
    )

    show_parser = currency_subparsers.add_parser("show", help="Show the global currency")
    show_parser.set_defaults(func=cmd_show)

    set_parser = currency_subparsers.add_parser("set", help="Set the global currency")
    set_parser.add_argument("code", help="Currency code, e.g. EUR")
    set_parser.set_defaults(func=cmd_set)

    list_parser = currency_subparsers.add_parser("list", help="List supported currencies")
    list_parser.set_defaults(func=cmd_list)
