"""Monthly profit analytics endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.analytics import ProfitAnalytics
from app.schemas.finance import AnalyticsCalculateRequest, ProfitAnalyticsResponse
from app.services.analytics import calculate_profit_analytics

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("", response_model=list[ProfitAnalyticsResponse])
def list_analytics(db: Session = Depends(get_db)):
    """List all stored monthly snapshots."""
    return db.query(ProfitAnalytics).order_by(ProfitAnalytics.month).all()


@router.post("/calculate", response_model=ProfitAnalyticsResponse, status_code=201)
def calculate_analytics(
    data: AnalyticsCalculateRequest,
    replace: bool = False,
    db: Session = Depends(get_db),
):
    """
    Calculate and store income, expense and net profit for a month.

    - month: 'YYYY-MM'
    - replace: overwrite an existing snapshot; otherwise a second calculation
      for the same month is rejected with 409
    """
    return calculate_profit_analytics(db, data.month, replace=replace)
