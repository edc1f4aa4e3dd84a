"""Dashboard summary endpoint."""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session, selectinload

from app.database import get_db
from app.models.finance import FinanceRecord
from app.models.inventory import InventoryItem
from app.models.recipe import Recipe
from app.schemas.dashboard import DashboardSummary
from app.schemas.finance import FinanceRecordResponse
from app.schemas.inventory import InventoryItemResponse
from app.schemas.recipe import RecipeResponse
from app.services.dashboard import build_summary

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _dump(schema, rows) -> list[dict]:
    return [schema.model_validate(row).model_dump(mode="json") for row in rows]


@router.get("", response_model=DashboardSummary)
def get_dashboard(
    days: int = Query(7, ge=1, le=90),
    db: Session = Depends(get_db),
):
    """Inventory value, totals, profit margin and chart series."""
    inventory = _dump(InventoryItemResponse, db.query(InventoryItem).order_by(InventoryItem.id).all())
    recipes = _dump(RecipeResponse, db.query(Recipe).order_by(Recipe.id).all())
    transactions = _dump(
        FinanceRecordResponse,
        db.query(FinanceRecord)
        .options(selectinload(FinanceRecord.recipe_sales))
        .order_by(FinanceRecord.record_id)
        .all(),
    )
    return build_summary(inventory, recipes, transactions, days=days)
