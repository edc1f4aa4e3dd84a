"""SQLAlchemy models for the kitchen manager."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models to register them with Base.metadata
from .inventory import InventoryItem, StockHistory
from .recipe import RecipeCategory, Recipe, RecipeIngredient
from .finance import FinanceRecord, FinanceRecipeSale
from .analytics import ProfitAnalytics

__all__ = [
    "Base",
    "InventoryItem",
    "StockHistory",
    "RecipeCategory",
    "Recipe",
    "RecipeIngredient",
    "FinanceRecord",
    "FinanceRecipeSale",
    "ProfitAnalytics",
]
