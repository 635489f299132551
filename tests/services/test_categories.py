import pytest
from datetime import date


class TestCategoryService:
    """Tests for CategoryService."""

    def test_default_categories_seeded(self, services):
        """Test the six default categories exist on first use."""
        categories = services.categories.find_all()

        assert [c.name for c in categories] == [
            "Food",
            "Travel",
            "Rent",
            "Bills",
            "Shopping",
            "Other",
        ]
        assert all(c.is_default for c in categories)
        assert services.categories.find("cat-food").name == "Food"

    def test_defaults_not_reseeded_after_delete(self, services, make_services):
        """Test deleted defaults stay deleted across restarts."""
        services.categories.delete("cat-travel")

        reloaded = make_services()

        assert reloaded.categories.find("cat-travel") is None
        assert len(reloaded.categories.find_all()) == 5

    def test_create_category(self, services):
        """Test creating a user category."""
        category = services.categories.create("Gym")

        assert category.id == "cat-id-1"
        assert category.name == "Gym"
        assert category.is_default is False
        assert services.categories.find_all()[-1] == category

    def test_create_category_strips_name(self, services):
        """Test surrounding whitespace is removed."""
        assert services.categories.create("  Pets ").name == "Pets"

    def test_create_category_empty_name_raises(self, services):
        """Test an empty name is rejected."""
        with pytest.raises(ValueError):
            services.categories.create("   ")

        assert len(services.categories.find_all()) == 6

    def test_create_duplicate_name_allowed(self, services):
        """Test names are not required to be unique."""
        first = services.categories.create("Coffee")
        second = services.categories.create("Coffee")

        assert first.id != second.id

    def test_update_category(self, services):
        """Test renaming a category."""
        category = services.categories.create("Gym")

        updated = services.categories.update(category.id, "Fitness")

        assert updated.id == category.id
        assert services.categories.find(category.id).name == "Fitness"

    def test_update_unknown_category_is_noop(self, services):
        """Test renaming a missing category returns None."""
        assert services.categories.update("cat-missing", "X") is None

    def test_delete_category(self, services):
        """Test deleting a category by id."""
        category = services.categories.create("Gym")

        assert services.categories.delete(category.id) is True
        assert services.categories.find(category.id) is None

    def test_delete_category_twice_is_noop(self, services):
        """Test deleting an already-deleted category changes nothing."""
        category = services.categories.create("Gym")
        services.categories.delete(category.id)
        before = services.categories.find_all()

        assert services.categories.delete(category.id) is False
        assert services.categories.find_all() == before

    def test_delete_category_keeps_expenses(self, services, active_term):
        """Test deleting a used category leaves a dangling reference."""
        category = services.categories.create("Gym")
        expense = services.expenses.add(30, category.id, "cash", date(2024, 6, 3))

        services.categories.delete(category.id)

        assert services.expenses.find(expense.id).category_id == category.id
        assert services.categories.name_for(category.id) == "Unknown"

    def test_name_for_existing_category(self, services):
        assert services.categories.name_for("cat-rent") == "Rent"
