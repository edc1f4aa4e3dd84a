"""Pydantic schemas for finance records and monthly analytics."""
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.services.analytics import month_bounds

FinanceType = Literal["income", "expense"]
Timeframe = Literal["all", "today", "week", "month", "year"]


# ============================================================================
# Finance Schemas
# ============================================================================


class FinanceRecipeSaleCreate(BaseModel):
    """A recipe sold as part of a finance record."""

    recipe_id: int
    quantity_sold: int = Field(1, ge=1)


class FinanceRecipeSaleResponse(FinanceRecipeSaleCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class FinanceRecordBase(BaseModel):
    """Base finance record fields. Amount sign is not constrained."""

    description: Optional[str] = None
    amount: float
    type: FinanceType
    category: Optional[str] = None


class FinanceRecordCreate(FinanceRecordBase):
    """Schema for recording a transaction."""

    date: Optional[datetime] = Field(None, description="Defaults to now")
    recipe_sales: list[FinanceRecipeSaleCreate] = []


class FinanceRecordResponse(FinanceRecordBase):
    """Finance record as stored."""

    model_config = ConfigDict(from_attributes=True)

    record_id: int
    date: Optional[datetime] = None
    recipe_sales: list[FinanceRecipeSaleResponse] = []


# ============================================================================
# Analytics Schemas
# ============================================================================


class AnalyticsCalculateRequest(BaseModel):
    """Month to aggregate."""

    month: str = Field(..., pattern=r"^\d{4}-(0[1-9]|1[0-2])$", description="YYYY-MM")

    @field_validator("month")
    @classmethod
    def month_in_range(cls, v: str) -> str:
        try:
            month_bounds(v)
        except ValueError:
            raise ValueError(f"month {v} is out of range") from None
        return v


class ProfitAnalyticsResponse(BaseModel):
    """Monthly profit snapshot."""

    model_config = ConfigDict(from_attributes=True)

    analytics_id: int
    month: str
    total_income: float
    total_expense: float
    net_profit: float
    recipe_sales_count: int = 0
    updated_at: Optional[datetime] = None
