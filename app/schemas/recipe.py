"""Pydantic schemas for Recipe, RecipeIngredient, and RecipeCategory."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Category Schemas
# ============================================================================


class RecipeCategoryCreate(BaseModel):
    """Schema for creating a recipe category."""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class RecipeCategoryResponse(RecipeCategoryCreate):
    """Recipe category as stored."""

    model_config = ConfigDict(from_attributes=True)

    id: int


# ============================================================================
# Recipe Schemas
# ============================================================================


class RecipeIngredientBase(BaseModel):
    """Base recipe ingredient fields."""

    inventory_item_id: int
    quantity: float = Field(..., description="Amount in the recipe's unit")
    unit: str
    unit_conversion_factor: float = Field(1, description="Multiplier from recipe unit to inventory unit")


class RecipeIngredientCreate(RecipeIngredientBase):
    """Schema for adding an ingredient to a recipe."""

    pass


class RecipeIngredientResponse(RecipeIngredientBase):
    """Recipe ingredient joined with its inventory item."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    recipe_id: int
    ingredient_name: Optional[str] = None
    price: Optional[float] = Field(None, description="Current inventory price per unit")


class RecipeBase(BaseModel):
    """Base recipe fields."""

    name: str
    instructions: Optional[str] = None
    selling_price: float
    image_url: Optional[str] = None
    category_id: Optional[int] = None


class RecipeCreate(RecipeBase):
    """Schema for creating a recipe with its ingredients."""

    ingredients: list[RecipeIngredientCreate] = []


class RecipeUpdate(RecipeBase):
    """Schema for replacing a recipe. Omitting ingredients keeps the current list."""

    ingredients: Optional[list[RecipeIngredientCreate]] = None


class RecipeResponse(RecipeBase):
    """Recipe row without ingredients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RecipeWithDetails(RecipeResponse):
    """Recipe with joined ingredients."""

    ingredients: list[RecipeIngredientResponse] = []


# ============================================================================
# Cost Schemas
# ============================================================================


class IngredientCostBreakdown(BaseModel):
    """Cost of one ingredient line at the current inventory price."""

    inventory_item_id: int
    ingredient_name: str
    quantity: float
    unit: str
    unit_conversion_factor: float
    unit_price: float
    line_cost: float


class RecipeCostBreakdown(BaseModel):
    """Recipe cost against its selling price."""

    recipe_id: int
    recipe_name: str
    selling_price: float
    total_cost: float
    gross_profit: float
    margin_percent: Optional[float] = Field(None, description="None when selling price is zero")
    ingredients: list[IngredientCostBreakdown]
