"""RecipeCategory, Recipe, and RecipeIngredient models."""
from datetime import datetime

from sqlalchemy import Column, Integer, Float, Text, TIMESTAMP, ForeignKey, Index
from sqlalchemy.orm import relationship

from . import Base


class RecipeCategory(Base):
    """Optional grouping for recipes ('mains', 'desserts', ...)."""

    __tablename__ = "recipe_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text)

    # Relationships
    recipes = relationship("Recipe", back_populates="category", passive_deletes=True)

    def __repr__(self):
        return f"<RecipeCategory(name='{self.name}')>"


class Recipe(Base):
    """Dishes sold to customers."""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    instructions = Column(Text)
    selling_price = Column(Float, nullable=False, default=0, server_default="0")
    image_url = Column(Text)
    category_id = Column(Integer, ForeignKey("recipe_categories.id", ondelete="SET NULL"))
    created_at = Column(TIMESTAMP, default=datetime.utcnow)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    category = relationship("RecipeCategory", back_populates="recipes")
    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="RecipeIngredient.id",
    )
    sales = relationship("FinanceRecipeSale", back_populates="recipe", passive_deletes="all")

    def __repr__(self):
        return f"<Recipe(name='{self.name}')>"


class RecipeIngredient(Base):
    """Inventory items used in each recipe."""

    __tablename__ = "recipe_ingredients"
    __table_args__ = (
        Index("idx_recipe_ingredients_recipe", "recipe_id"),
        Index("idx_recipe_ingredients_item", "inventory_item_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False)
    inventory_item_id = Column(
        Integer, ForeignKey("inventory_items.id", ondelete="RESTRICT"), nullable=False
    )
    quantity = Column(Float, nullable=False)
    unit = Column(Text, nullable=False)
    unit_conversion_factor = Column(Float, default=1, server_default="1")  # Recipe unit -> inventory unit

    # Relationships
    recipe = relationship("Recipe", back_populates="ingredients")
    inventory_item = relationship("InventoryItem", back_populates="recipe_ingredients")

    def __repr__(self):
        return f"<RecipeIngredient(recipe_id={self.recipe_id}, inventory_item_id={self.inventory_item_id})>"
