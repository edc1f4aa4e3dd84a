"""ProfitAnalytics model."""
from datetime import datetime

from sqlalchemy import Column, Integer, Float, String, TIMESTAMP

from . import Base


class ProfitAnalytics(Base):
    """Monthly profit snapshot, one row per month."""

    __tablename__ = "profit_analytics"

    analytics_id = Column(Integer, primary_key=True, autoincrement=True)
    month = Column(String(7), nullable=False, unique=True)  # 'YYYY-MM'
    total_income = Column(Float, default=0, server_default="0")
    total_expense = Column(Float, default=0, server_default="0")
    net_profit = Column(Float, default=0, server_default="0")
    recipe_sales_count = Column(Integer, default=0, server_default="0")
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<ProfitAnalytics(month='{self.month}', net_profit={self.net_profit})>"
