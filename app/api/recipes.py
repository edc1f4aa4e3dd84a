"""Recipe and recipe category endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import get_db
from app.errors import ConflictError
from app.models.finance import FinanceRecipeSale
from app.models.inventory import InventoryItem
from app.models.recipe import Recipe, RecipeCategory, RecipeIngredient
from app.schemas.inventory import SuccessResponse
from app.schemas.recipe import (
    RecipeCategoryCreate,
    RecipeCategoryResponse,
    RecipeCreate,
    RecipeUpdate,
    RecipeResponse,
    RecipeWithDetails,
    RecipeIngredientCreate,
    RecipeIngredientResponse,
    RecipeCostBreakdown,
)
from app.services.cost_calculator import calculate_recipe_cost

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])


# ============================================================================
# Category Endpoints
# ============================================================================


@router.get("/categories", response_model=list[RecipeCategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    """List all recipe categories."""
    return db.query(RecipeCategory).order_by(RecipeCategory.name).all()


@router.post("/categories", response_model=RecipeCategoryResponse, status_code=201)
def create_category(
    data: RecipeCategoryCreate,
    db: Session = Depends(get_db),
):
    """Create a recipe category."""
    category = RecipeCategory(**data.model_dump())
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


# ============================================================================
# Recipe Endpoints
# ============================================================================


def _validate_references(db: Session, category_id: int | None, ingredients: list[RecipeIngredientCreate]) -> None:
    """Reject bodies pointing at categories or inventory items that don't exist."""
    if category_id is not None and not db.get(RecipeCategory, category_id):
        raise HTTPException(status_code=400, detail=f"Recipe category with ID {category_id} not found")

    item_ids = {ing.inventory_item_id for ing in ingredients}
    if not item_ids:
        return
    found = {
        row.id
        for row in db.query(InventoryItem.id).filter(InventoryItem.id.in_(item_ids)).all()
    }
    missing = sorted(item_ids - found)
    if missing:
        raise HTTPException(
            status_code=400,
            detail=f"Inventory item with ID {missing[0]} not found",
        )


def _build_ingredients(ingredients: list[RecipeIngredientCreate]) -> list[RecipeIngredient]:
    return [
        RecipeIngredient(
            inventory_item_id=ing.inventory_item_id,
            quantity=ing.quantity,
            unit=ing.unit,
            unit_conversion_factor=ing.unit_conversion_factor,
        )
        for ing in ingredients
    ]


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning(f"Recipe {action} rolled back: {exc.orig}")
        raise HTTPException(status_code=400, detail=f"Recipe {action} failed: invalid reference") from exc


@router.get("", response_model=list[RecipeResponse])
def list_recipes(db: Session = Depends(get_db)):
    """List all recipes (without ingredients)."""
    return db.query(Recipe).order_by(Recipe.id).all()


@router.get("/{recipe_id}", response_model=RecipeWithDetails)
def get_recipe(
    recipe_id: int,
    db: Session = Depends(get_db),
):
    """Get a single recipe with ingredient names and current prices."""
    recipe = db.query(Recipe).filter(Recipe.id == recipe_id).first()
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")

    rows = (
        db.query(RecipeIngredient, InventoryItem.name, InventoryItem.price)
        .join(InventoryItem, RecipeIngredient.inventory_item_id == InventoryItem.id)
        .filter(RecipeIngredient.recipe_id == recipe_id)
        .order_by(RecipeIngredient.id)
        .all()
    )

    ingredients_response = [
        RecipeIngredientResponse(
            id=ri.id,
            recipe_id=ri.recipe_id,
            inventory_item_id=ri.inventory_item_id,
            quantity=ri.quantity,
            unit=ri.unit,
            unit_conversion_factor=ri.unit_conversion_factor if ri.unit_conversion_factor is not None else 1,
            ingredient_name=name,
            price=price,
        )
        for ri, name, price in rows
    ]

    return RecipeWithDetails(
        id=recipe.id,
        name=recipe.name,
        instructions=recipe.instructions,
        selling_price=recipe.selling_price,
        image_url=recipe.image_url,
        category_id=recipe.category_id,
        created_at=recipe.created_at,
        updated_at=recipe.updated_at,
        ingredients=ingredients_response,
    )


@router.get("/{recipe_id}/cost", response_model=RecipeCostBreakdown)
def get_recipe_cost(
    recipe_id: int,
    db: Session = Depends(get_db),
):
    """Get cost breakdown for a recipe at current inventory prices."""
    try:
        return calculate_recipe_cost(db, recipe_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=RecipeWithDetails, status_code=201)
def create_recipe(
    data: RecipeCreate,
    db: Session = Depends(get_db),
):
    """Create a recipe and its ingredients in one transaction."""
    _validate_references(db, data.category_id, data.ingredients)

    recipe = Recipe(
        name=data.name,
        instructions=data.instructions,
        selling_price=data.selling_price,
        image_url=data.image_url,
        category_id=data.category_id,
    )
    recipe.ingredients = _build_ingredients(data.ingredients)
    db.add(recipe)
    _commit(db, "create")

    logger.info(f"Created recipe {recipe.id} ({recipe.name}) with {len(data.ingredients)} ingredients")
    return get_recipe(recipe.id, db)


@router.put("/{recipe_id}", response_model=RecipeWithDetails)
def update_recipe(
    recipe_id: int,
    data: RecipeUpdate,
    db: Session = Depends(get_db),
):
    """Replace a recipe. The ingredient list is replaced only when supplied."""
    recipe = db.query(Recipe).filter(Recipe.id == recipe_id).first()
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")

    _validate_references(db, data.category_id, data.ingredients or [])

    for field, value in data.model_dump(exclude={"ingredients"}).items():
        setattr(recipe, field, value)
    if data.ingredients is not None:
        recipe.ingredients = _build_ingredients(data.ingredients)

    _commit(db, "update")
    return get_recipe(recipe.id, db)


@router.delete("/{recipe_id}", response_model=SuccessResponse)
def delete_recipe(
    recipe_id: int,
    db: Session = Depends(get_db),
):
    """Delete a recipe and its ingredients."""
    recipe = db.query(Recipe).filter(Recipe.id == recipe_id).first()
    if not recipe:
        return SuccessResponse()

    sold = db.query(FinanceRecipeSale).filter(FinanceRecipeSale.recipe_id == recipe_id).count()
    if sold:
        raise ConflictError(f"Recipe {recipe_id} is referenced by {sold} finance sale(s)")

    db.delete(recipe)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(f"Recipe {recipe_id} is still referenced") from exc

    logger.info(f"Deleted recipe {recipe_id}")
    return SuccessResponse()
