"""Tests for CLI command handlers."""

import argparse
import pytest
from datetime import date

from cli import categories as categories_cli
from cli import terms as terms_cli


def _no_input(prompt=""):
    raise AssertionError("confirmation prompt should not be shown")


class TestCategoryCommands:
    """Tests for the categories command handlers."""

    def test_delete_with_yes_skips_prompt(self, services, monkeypatch):
        category = services.categories.create("Gym")
        monkeypatch.setattr("builtins.input", _no_input)

        categories_cli.cmd_delete(
            argparse.Namespace(category_id=category.id, yes=True), services
        )

        assert services.categories.find(category.id) is None

    def test_delete_prompts_without_yes(self, services, monkeypatch):
        category = services.categories.create("Gym")
        monkeypatch.setattr("builtins.input", lambda prompt="": "no")

        categories_cli.cmd_delete(
            argparse.Namespace(category_id=category.id, yes=False), services
        )

        assert services.categories.find(category.id) is not None

    def test_delete_default_category_refused(self, services):
        with pytest.raises(SystemExit):
            categories_cli.cmd_delete(
                argparse.Namespace(category_id="cat-food", yes=True), services
            )

        assert services.categories.find("cat-food") is not None


class TestTermCommands:
    """Tests for the terms command handlers."""

    def test_delete_with_yes_skips_prompt(self, services, monkeypatch):
        term = services.terms.start_new(date(2024, 6, 1), 100)
        monkeypatch.setattr("builtins.input", _no_input)

        terms_cli.cmd_delete(argparse.Namespace(term_id=term.id, yes=True), services)

        assert services.terms.find(term.id) is None
