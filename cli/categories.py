#!/usr/bin/env python3

import sys
from cli.prompts import confirm
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all categories."""
    categories = services.categories.find_all()

    if not categories:
        logger.info("No categories found.")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        default = " (default)" if category.is_default else ""
        logger.info(f"{category.id}: {category.name}{default}")

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_create(args, services):
    """Create a new category."""
    category = services.categories.create(args.name)
    logger.info(f"✓ Category created with ID: {category.id}")


def cmd_rename(args, services):
    """Rename a category."""
    category = services.categories.find(args.category_id)
    if category is None:
        logger.error(f"Category {args.category_id} not found.")
        sys.exit(1)
    if category.is_default:
        logger.error("Default categories cannot be renamed.")
        sys.exit(1)

    services.categories.update(category.id, args.name)
    logger.info(f"✓ Renamed '{category.name}' to '{args.name}'")


def cmd_delete(args, services):
    """Delete a category by ID."""
    category = services.categories.find(args.category_id)
    if category is None:
        logger.error(f"Category {args.category_id} not found.")
        sys.exit(1)
    if category.is_default:
        logger.error("Default categories cannot be deleted.")
        sys.exit(1)

    in_use = sum(
        1 for e in services.expenses.find_all() if e.category_id == category.id
    )
    if in_use:
        logger.info(f"{in_use} expense(s) use this category and will show as Unknown.")

    if not confirm(f"Delete category '{category.name}'?", args):
        logger.info("Deletion cancelled.")
        return

    services.categories.delete(category.id)
    logger.info(f"✓ Category '{category.name}' deleted successfully.")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="List, create, rename and delete expense categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.set_defaults(func=cmd_list)

    create_parser = categories_subparsers.add_parser("create", help="Create a category")
    create_parser.add_argument("name", help="Category name")
    create_parser.set_defaults(func=cmd_create)

    rename_parser = categories_subparsers.add_parser("rename", help="Rename a category")
    rename_parser.add_argument("category_id", help="Category ID")
    rename_parser.add_argument("name", help="New name")
    rename_parser.set_defaults(func=cmd_rename)

    delete_parser = categories_subparsers.add_parser("delete", help="Delete a category")
    delete_parser.add_argument("category_id", help="Category ID")
    delete_parser.add_argument("--yes", action="store_true", help="Skip confirmation")
    delete_parser.set_defaults(func=cmd_delete)
