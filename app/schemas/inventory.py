"""Pydantic schemas for InventoryItem and StockHistory."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InventoryItemBase(BaseModel):
    """Base inventory fields. Negative quantities and prices are accepted."""

    name: str
    quantity: float
    unit: str = Field(..., description="e.g., 'kg', 'l', 'units'")
    price: float = Field(..., description="Price per unit")


class InventoryItemCreate(InventoryItemBase):
    """Schema for creating an inventory item."""

    low_stock_threshold: Optional[int] = Field(None, description="Defaults to 5 when omitted")
    description: Optional[str] = None


class InventoryItemUpdate(InventoryItemBase):
    """Full replacement of the four core fields; extras only when supplied."""

    low_stock_threshold: Optional[int] = None
    description: Optional[str] = None


class InventoryItemResponse(InventoryItemBase):
    """Inventory item as stored."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    low_stock_threshold: Optional[int] = None
    description: Optional[str] = None
    last_updated: Optional[datetime] = None


class StockHistoryResponse(BaseModel):
    """One quantity change of an inventory item."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    inventory_item_id: int
    quantity_change: float
    reason: Optional[str] = None
    recipe_id: Optional[int] = None
    change_date: Optional[datetime] = None


class SuccessResponse(BaseModel):
    """Acknowledgement for writes that return no row."""

    success: bool = True
