import pytest
import sqlite3
from datetime import date
from decimal import Decimal


class TestExpenseService:
    """Tests for ExpenseService."""

    def test_add_expense(self, services, active_term):
        """Test adding an expense attaches it to the active term."""
        expense = services.expenses.add(
            "12.50", "cat-food", "cash", date(2024, 6, 3), "lunch"
        )

        assert expense.term_id == active_term.id
        assert expense.amount == Decimal("12.50")
        assert expense.category_id == "cat-food"
        assert expense.type == "cash"
        assert expense.date == date(2024, 6, 3)
        assert expense.note == "lunch"
        assert services.expenses.find(expense.id) == expense
        assert services.expenses.for_active_term() == [expense]

    def test_add_expense_without_active_term_raises(self, services):
        """Test expenses need an active term."""
        with pytest.raises(ValueError):
            services.expenses.add(10, "cat-food", "cash", date(2024, 6, 3))

        assert services.expenses.find_all() == []

    @pytest.mark.parametrize("amount", [0, -1, "ten", "Infinity"])
    def test_add_expense_rejects_bad_amount(self, services, active_term, amount):
        """Test non-positive or non-numeric amounts are rejected."""
        with pytest.raises(ValueError):
            services.expenses.add(amount, "cat-food", "cash", date(2024, 6, 3))

        assert services.expenses.find_all() == []

    def test_add_expense_rejects_bad_type(self, services, active_term):
        """Test only cash and non-cash are accepted."""
        with pytest.raises(ValueError):
            services.expenses.add(10, "cat-food", "crypto", date(2024, 6, 3))

    def test_add_expense_rejects_bad_date(self, services, active_term):
        """Test malformed dates are rejected."""
        with pytest.raises(ValueError):
            services.expenses.add(10, "cat-food", "cash", "06/03/2024")

    def test_add_expense_outside_term_is_kept(self, services, active_term):
        """Test dates outside the term are stored as data, not filtered."""
        expense = services.expenses.add(10, "cat-food", "cash", date(2024, 7, 15))

        assert services.expenses.for_active_term() == [expense]

    def test_add_expense_with_unknown_category(self, services, active_term):
        """Test a category id that does not exist is accepted."""
        expense = services.expenses.add(10, "cat-missing", "cash", date(2024, 6, 3))

        assert expense.category_id == "cat-missing"

    def test_expenses_sorted_by_date_descending(self, services, active_term):
        """Test the collection is kept newest first."""
        services.expenses.add(1, "cat-food", "cash", date(2024, 6, 5))
        services.expenses.add(2, "cat-food", "cash", date(2024, 6, 20))
        services.expenses.add(3, "cat-food", "cash", date(2024, 6, 10))

        dates = [e.date for e in services.expenses.for_active_term()]

        assert dates == [date(2024, 6, 20), date(2024, 6, 10), date(2024, 6, 5)]

    def test_for_term_filters_by_term(self, services):
        """Test expenses are retrievable per term."""
        may = services.terms.start_new(date(2024, 5, 1), 100)
        may_expense = services.expenses.add(1, "cat-food", "cash", date(2024, 5, 5))
        june = services.terms.start_new(date(2024, 6, 1), 100)
        june_expense = services.expenses.add(2, "cat-food", "cash", date(2024, 6, 5))

        assert services.expenses.for_term(may.id) == [may_expense]
        assert services.expenses.for_term(june.id) == [june_expense]
        assert services.expenses.for_active_term() == [june_expense]

    def test_update_expense(self, services, active_term):
        """Test patching several fields at once."""
        expense = services.expenses.add(10, "cat-food", "cash", date(2024, 6, 3))

        updated = services.expenses.update(
            expense.id, amount="15.25", type="non-cash", note="dinner"
        )

        assert updated.amount == Decimal("15.25")
        assert updated.type == "non-cash"
        assert updated.note == "dinner"
        assert updated.category_id == "cat-food"
        assert updated.term_id == active_term.id
        assert services.expenses.find(expense.id) == updated

    def test_update_expense_date_resorts(self, services, active_term):
        """Test moving an expense's date keeps the collection ordered."""
        first = services.expenses.add(1, "cat-food", "cash", date(2024, 6, 5))
        services.expenses.add(2, "cat-food", "cash", date(2024, 6, 10))

        services.expenses.update(first.id, date="2024-06-25")

        assert services.expenses.for_active_term()[0].id == first.id

    def test_update_expense_rejects_term_change(self, services, active_term):
        """Test the owning term cannot be patched."""
        expense = services.expenses.add(10, "cat-food", "cash", date(2024, 6, 3))

        with pytest.raises(ValueError):
            services.expenses.update(expense.id, term_id="other")

    def test_update_expense_rejects_bad_amount(self, services, active_term):
        """Test an invalid patch leaves the expense unchanged."""
        expense = services.expenses.add(10, "cat-food", "cash", date(2024, 6, 3))

        with pytest.raises(ValueError):
            services.expenses.update(expense.id, amount=0)

        assert services.expenses.find(expense.id) == expense

    def test_update_unknown_expense_is_noop(self, services, active_term):
        """Test updating a missing expense returns None."""
        assert services.expenses.update("missing", note="x") is None

    def test_delete_expense(self, services, active_term):
        """Test deleting an expense by id."""
        keep = services.expenses.add(10, "cat-food", "cash", date(2024, 6, 3))
        drop = services.expenses.add(20, "cat-food", "cash", date(2024, 6, 4))

        assert services.expenses.delete(drop.id) is True

        assert services.expenses.find_all() == [keep]

    def test_delete_expense_twice_is_noop(self, services, active_term):
        """Test deleting an already-deleted expense changes nothing."""
        keep = services.expenses.add(10, "cat-food", "cash", date(2024, 6, 3))
        drop = services.expenses.add(20, "cat-food", "cash", date(2024, 6, 4))
        services.expenses.delete(drop.id)

        assert services.expenses.delete(drop.id) is False
        assert services.expenses.find_all() == [keep]
        assert services.terms.active() == active_term

    def test_expenses_survive_restart(self, services, active_term, make_services):
        """Test expenses are read back from the store with exact amounts."""
        expense = services.expenses.add("0.10", "cat-food", "non-cash", date(2024, 6, 3), "gum")

        reloaded = make_services()

        assert reloaded.expenses.find_all() == [expense]

    def test_failed_write_leaves_state_unchanged(self, services, active_term, test_db):
        """Test a persistence failure does not commit the in-memory change."""
        kept = services.expenses.add(10, "cat-food", "cash", date(2024, 6, 3))
        test_db.execute("DROP TABLE kv_store")

        with pytest.raises(sqlite3.OperationalError):
            services.expenses.add(20, "cat-food", "cash", date(2024, 6, 4))

        with pytest.raises(sqlite3.OperationalError):
            services.terms.delete(active_term.id)

        assert services.expenses.find_all() == [kept]
        assert services.terms.active() == active_term
