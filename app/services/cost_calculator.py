"""Cost calculation service for recipes.

Ingredient cost is quantity x unit_conversion_factor x the inventory item's
current price, so costs always follow live inventory pricing.
"""
from sqlalchemy.orm import Session, joinedload

from app.models.recipe import Recipe, RecipeIngredient
from app.schemas.recipe import IngredientCostBreakdown, RecipeCostBreakdown


def ingredient_line_cost(quantity: float, unit_conversion_factor: float | None, unit_price: float) -> float:
    factor = 1 if unit_conversion_factor is None else unit_conversion_factor
    return quantity * factor * unit_price


def calculate_recipe_cost(db: Session, recipe_id: int) -> RecipeCostBreakdown:
    """
    Get cost breakdown for a recipe.

    Raises:
        ValueError: if the recipe does not exist
    """
    recipe = (
        db.query(Recipe)
        .options(joinedload(Recipe.ingredients).joinedload(RecipeIngredient.inventory_item))
        .filter(Recipe.id == recipe_id)
        .first()
    )
    if not recipe:
        raise ValueError(f"Recipe {recipe_id} not found")

    lines = []
    for ri in recipe.ingredients:
        item = ri.inventory_item
        lines.append(
            IngredientCostBreakdown(
                inventory_item_id=ri.inventory_item_id,
                ingredient_name=item.name,
                quantity=ri.quantity,
                unit=ri.unit,
                unit_conversion_factor=ri.unit_conversion_factor if ri.unit_conversion_factor is not None else 1,
                unit_price=item.price,
                line_cost=round(ingredient_line_cost(ri.quantity, ri.unit_conversion_factor, item.price), 4),
            )
        )

    total_cost = round(sum(line.line_cost for line in lines), 2)
    selling_price = recipe.selling_price or 0
    gross_profit = round(selling_price - total_cost, 2)
    margin = round(gross_profit / selling_price * 100, 1) if selling_price else None

    return RecipeCostBreakdown(
        recipe_id=recipe.id,
        recipe_name=recipe.name,
        selling_price=selling_price,
        total_cost=total_cost,
        gross_profit=gross_profit,
        margin_percent=margin,
        ingredients=lines,
    )
