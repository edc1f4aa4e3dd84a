"""FinanceRecord and FinanceRecipeSale models."""
from datetime import datetime

from sqlalchemy import Column, Integer, Float, Text, TIMESTAMP, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship

from . import Base


class FinanceRecord(Base):
    """Income and expense transactions."""

    __tablename__ = "finance"
    __table_args__ = (
        CheckConstraint("type IN ('income', 'expense')", name="ck_finance_type"),
        Index("idx_finance_date", "date"),
    )

    INCOME = "income"
    EXPENSE = "expense"

    record_id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(TIMESTAMP, default=datetime.utcnow)
    description = Column(Text)
    amount = Column(Float, nullable=False)
    type = Column(Text, nullable=False)
    category = Column(Text)

    # Relationships
    recipe_sales = relationship(
        "FinanceRecipeSale",
        back_populates="finance_record",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<FinanceRecord(type='{self.type}', amount={self.amount})>"


class FinanceRecipeSale(Base):
    """Recipes sold as part of a finance record."""

    __tablename__ = "finance_recipe_sales"

    id = Column(Integer, primary_key=True, autoincrement=True)
    finance_id = Column(Integer, ForeignKey("finance.record_id", ondelete="CASCADE"), nullable=False)
    recipe_id = Column(Integer, ForeignKey("recipes.id", ondelete="RESTRICT"), nullable=False)
    quantity_sold = Column(Integer, nullable=False, default=1, server_default="1")

    # Relationships
    finance_record = relationship("FinanceRecord", back_populates="recipe_sales")
    recipe = relationship("Recipe", back_populates="sales")

    def __repr__(self):
        return f"<FinanceRecipeSale(finance_id={self.finance_id}, recipe_id={self.recipe_id})>"
