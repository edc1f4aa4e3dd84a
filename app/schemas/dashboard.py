"""Pydantic schemas for dashboard figures."""
from pydantic import BaseModel

from app.schemas.inventory import InventoryItemResponse


class DailyTotals(BaseModel):
    date: str  # YYYY-MM-DD
    income: float
    expense: float


class CategoryTotal(BaseModel):
    name: str
    value: float


class DashboardSummary(BaseModel):
    """Figures shown on the dashboard page."""

    inventory_value: float
    recipe_count: int
    total_income: float
    total_expense: float
    net_profit: float
    profit_margin: float
    daily_totals: list[DailyTotals]
    expenses_by_category: list[CategoryTotal]
    low_stock_items: list[InventoryItemResponse]
