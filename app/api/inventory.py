"""Inventory CRUD endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import get_db
from app.errors import ConflictError
from app.models.inventory import InventoryItem, StockHistory
from app.models.recipe import RecipeIngredient
from app.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemUpdate,
    InventoryItemResponse,
    StockHistoryResponse,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("", response_model=list[InventoryItemResponse])
def list_inventory(db: Session = Depends(get_db)):
    """List all inventory items in insertion order."""
    return db.query(InventoryItem).order_by(InventoryItem.id).all()


@router.get("/low-stock", response_model=list[InventoryItemResponse])
def list_low_stock(db: Session = Depends(get_db)):
    """List items at or below their low-stock threshold.

    Items without a threshold use the default one.
    """
    threshold = func.coalesce(
        InventoryItem.low_stock_threshold, InventoryItem.DEFAULT_LOW_STOCK_THRESHOLD
    )
    return (
        db.query(InventoryItem)
        .filter(InventoryItem.quantity <= threshold)
        .order_by(InventoryItem.id)
        .all()
    )


@router.post("", response_model=InventoryItemResponse, status_code=201)
def create_inventory_item(
    data: InventoryItemCreate,
    db: Session = Depends(get_db),
):
    """Create a new inventory item."""
    item = InventoryItem(**data.model_dump(exclude_none=True))
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info(f"Created inventory item {item.id} ({item.name})")
    return item


@router.put("/{item_id}", response_model=SuccessResponse)
def update_inventory_item(
    item_id: int,
    data: InventoryItemUpdate,
    db: Session = Depends(get_db),
):
    """Overwrite name, quantity, unit and price of an item.

    Answers success even when no item has this id.
    """
    item = db.get(InventoryItem, item_id)
    if not item:
        logger.debug(f"Update for missing inventory item {item_id} ignored")
        return SuccessResponse()

    change = data.quantity - item.quantity
    if change:
        db.add(StockHistory(inventory_item_id=item.id, quantity_change=change, reason="adjustment"))

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(item, field, value)

    db.commit()
    return SuccessResponse()


@router.delete("/{item_id}", response_model=SuccessResponse)
def delete_inventory_item(
    item_id: int,
    db: Session = Depends(get_db),
):
    """Delete an item and its stock history.

    Items still used by a recipe are kept and the request is rejected.
    """
    item = db.get(InventoryItem, item_id)
    if not item:
        return SuccessResponse()

    used_by = (
        db.query(RecipeIngredient)
        .filter(RecipeIngredient.inventory_item_id == item_id)
        .count()
    )
    if used_by:
        raise ConflictError(f"Inventory item {item_id} is used by {used_by} recipe ingredient(s)")

    db.delete(item)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(f"Inventory item {item_id} is still referenced") from exc

    logger.info(f"Deleted inventory item {item_id}")
    return SuccessResponse()


@router.get("/{item_id}/history", response_model=list[StockHistoryResponse])
def get_stock_history(
    item_id: int,
    db: Session = Depends(get_db),
):
    """Stock changes of an item, newest first."""
    item = db.get(InventoryItem, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Inventory item not found")

    return (
        db.query(StockHistory)
        .filter(StockHistory.inventory_item_id == item_id)
        .order_by(StockHistory.change_date.desc(), StockHistory.id.desc())
        .all()
    )
