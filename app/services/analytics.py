"""Monthly profit analytics.

Aggregates finance records by calendar month into ProfitAnalytics
snapshots. A month is addressed as 'YYYY-MM'; a record belongs to the month
when its date falls in [first day of month, first day of next month).
"""
import logging
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import ConflictError
from app.models.analytics import ProfitAnalytics
from app.models.finance import FinanceRecord, FinanceRecipeSale

logger = logging.getLogger(__name__)


def month_bounds(month: str) -> tuple[datetime, datetime]:
    """Return the half-open datetime range covered by a 'YYYY-MM' month.

    Raises:
        ValueError: if month is not a valid 'YYYY-MM' string
    """
    start = datetime.strptime(month, "%Y-%m")
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


def calculate_month_totals(db: Session, month: str) -> dict:
    """Sum income, expense and recipe sales for a month.

    Returns:
        Dict with total_income, total_expense, net_profit, recipe_sales_count
    """
    start, end = month_bounds(month)
    in_month = (FinanceRecord.date >= start, FinanceRecord.date < end)

    rows = (
        db.query(FinanceRecord.type, func.coalesce(func.sum(FinanceRecord.amount), 0))
        .filter(*in_month)
        .group_by(FinanceRecord.type)
        .all()
    )
    sums = {record_type: float(total) for record_type, total in rows}
    income = sums.get(FinanceRecord.INCOME, 0.0)
    expense = sums.get(FinanceRecord.EXPENSE, 0.0)

    sales_count = (
        db.query(func.coalesce(func.sum(FinanceRecipeSale.quantity_sold), 0))
        .join(FinanceRecord, FinanceRecipeSale.finance_id == FinanceRecord.record_id)
        .filter(*in_month)
        .scalar()
    )

    return {
        "total_income": income,
        "total_expense": expense,
        "net_profit": income - expense,
        "recipe_sales_count": int(sales_count or 0),
    }


def calculate_profit_analytics(db: Session, month: str, replace: bool = False) -> ProfitAnalytics:
    """Compute and store the snapshot for a month.

    Args:
        db: Database session
        month: 'YYYY-MM'
        replace: Overwrite an existing snapshot instead of rejecting

    Raises:
        ConflictError: if the month already has a snapshot and replace is False
    """
    totals = calculate_month_totals(db, month)

    snapshot = db.query(ProfitAnalytics).filter(ProfitAnalytics.month == month).first()
    if snapshot and not replace:
        raise ConflictError(f"Analytics for {month} already calculated")

    if snapshot is None:
        snapshot = ProfitAnalytics(month=month)
        db.add(snapshot)

    for field, value in totals.items():
        setattr(snapshot, field, value)
    snapshot.updated_at = datetime.utcnow()

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(f"Analytics for {month} already calculated") from exc
    db.refresh(snapshot)

    logger.info(
        f"Calculated analytics for {month}: income={snapshot.total_income} "
        f"expense={snapshot.total_expense} net={snapshot.net_profit}"
    )
    return snapshot
