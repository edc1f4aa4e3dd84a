"""InventoryItem and StockHistory models."""
from datetime import datetime

from sqlalchemy import Column, Integer, Float, Text, TIMESTAMP, ForeignKey, Index
from sqlalchemy.orm import relationship

from . import Base


class InventoryItem(Base):
    """Stock on hand, priced per unit."""

    __tablename__ = "inventory_items"

    DEFAULT_LOW_STOCK_THRESHOLD = 5

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    quantity = Column(Float, nullable=False)
    unit = Column(Text, nullable=False)  # 'kg', 'l', 'units', ...
    price = Column(Float, nullable=False)  # Price per unit
    low_stock_threshold = Column(Integer, default=DEFAULT_LOW_STOCK_THRESHOLD, server_default="5")
    description = Column(Text)
    last_updated = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    # Deletion is left to the database: history cascades, recipe usage restricts
    stock_history = relationship(
        "StockHistory",
        back_populates="inventory_item",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="StockHistory.id",
    )
    recipe_ingredients = relationship(
        "RecipeIngredient",
        back_populates="inventory_item",
        passive_deletes="all",
    )

    def __repr__(self):
        return f"<InventoryItem(name='{self.name}', quantity={self.quantity} {self.unit})>"


class StockHistory(Base):
    """Append-only log of inventory quantity changes."""

    __tablename__ = "inventory_stock_history"
    __table_args__ = (
        Index("idx_stock_history_item", "inventory_item_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    inventory_item_id = Column(
        Integer, ForeignKey("inventory_items.id", ondelete="CASCADE"), nullable=False
    )
    quantity_change = Column(Float, nullable=False)
    reason = Column(Text)  # 'adjustment', 'recipe', 'restock'
    recipe_id = Column(Integer, ForeignKey("recipes.id", ondelete="SET NULL"))
    change_date = Column(TIMESTAMP, default=datetime.utcnow)

    # Relationships
    inventory_item = relationship("InventoryItem", back_populates="stock_history")

    def __repr__(self):
        return f"<StockHistory(inventory_item_id={self.inventory_item_id}, change={self.quantity_change})>"
