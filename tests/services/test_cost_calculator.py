"""Tests for app/services/cost_calculator.py - recipe cost calculation."""
import pytest

from app.services.cost_calculator import calculate_recipe_cost, ingredient_line_cost


class TestIngredientLineCost:
    def test_applies_conversion_factor(self):
        assert ingredient_line_cost(250, 0.001, 40) == pytest.approx(10.0)

    def test_missing_factor_means_one(self):
        assert ingredient_line_cost(3, None, 4) == 12


class TestCalculateRecipeCost:
    def test_uses_current_price(
        self, db, inventory_item_factory, recipe_factory, recipe_ingredient_factory,
    ):
        """Cost follows the inventory price at calculation time."""
        shrimp = inventory_item_factory(name="Shrimp", unit="kg", price=300)
        recipe = recipe_factory(name="Tom Yum", selling_price=150)
        recipe_ingredient_factory(recipe, shrimp, quantity=0.2)

        assert calculate_recipe_cost(db, recipe.id).total_cost == 60.0

        shrimp.price = 350
        db.flush()
        breakdown = calculate_recipe_cost(db, recipe.id)
        assert breakdown.total_cost == 70.0
        assert breakdown.gross_profit == 80.0
        assert breakdown.margin_percent == 53.3

    def test_recipe_without_ingredients(self, db, recipe_factory):
        recipe = recipe_factory(selling_price=50)

        breakdown = calculate_recipe_cost(db, recipe.id)
        assert breakdown.total_cost == 0
        assert breakdown.margin_percent == 100.0
        assert breakdown.ingredients == []

    def test_zero_selling_price_has_no_margin(self, db, recipe_factory):
        recipe = recipe_factory(selling_price=0)
        assert calculate_recipe_cost(db, recipe.id).margin_percent is None

    def test_not_found(self, db):
        with pytest.raises(ValueError, match="not found"):
            calculate_recipe_cost(db, 12345)
