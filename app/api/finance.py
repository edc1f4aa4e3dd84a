"""Finance record endpoints."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, selectinload

from app.database import get_db
from app.models.finance import FinanceRecord, FinanceRecipeSale
from app.models.recipe import Recipe
from app.schemas.finance import FinanceRecordCreate, FinanceRecordResponse, FinanceType, Timeframe
from app.services.dashboard import timeframe_start

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/finance", tags=["finance"])


@router.get("", response_model=list[FinanceRecordResponse])
def list_finance_records(
    timeframe: Timeframe = "all",
    type: Optional[FinanceType] = None,
    db: Session = Depends(get_db),
):
    """List finance records, optionally limited to a timeframe and type."""
    query = db.query(FinanceRecord).options(selectinload(FinanceRecord.recipe_sales))

    start = timeframe_start(timeframe)
    if start is not None:
        query = query.filter(FinanceRecord.date >= start)
    if type:
        query = query.filter(FinanceRecord.type == type)

    return query.order_by(FinanceRecord.record_id).all()


@router.post("", response_model=FinanceRecordResponse, status_code=201)
def create_finance_record(
    data: FinanceRecordCreate,
    db: Session = Depends(get_db),
):
    """Record an income or expense, with any recipes it sold."""
    recipe_ids = {sale.recipe_id for sale in data.recipe_sales}
    if recipe_ids:
        found = {row.id for row in db.query(Recipe.id).filter(Recipe.id.in_(recipe_ids)).all()}
        missing = sorted(recipe_ids - found)
        if missing:
            raise HTTPException(status_code=400, detail=f"Recipe with ID {missing[0]} not found")

    record = FinanceRecord(**data.model_dump(exclude={"recipe_sales"}, exclude_none=True))
    record.recipe_sales = [
        FinanceRecipeSale(recipe_id=sale.recipe_id, quantity_sold=sale.quantity_sold)
        for sale in data.recipe_sales
    ]
    db.add(record)
    db.commit()
    db.refresh(record)

    logger.info(f"Recorded {record.type} {record.record_id}: {record.amount}")
    return record
