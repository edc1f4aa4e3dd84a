"""Tests for app/services/analytics.py - monthly profit aggregation."""
from datetime import datetime

import pytest

from app.errors import ConflictError
from app.models.analytics import ProfitAnalytics
from app.services.analytics import (
    calculate_month_totals,
    calculate_profit_analytics,
    month_bounds,
)


class TestMonthBounds:
    def test_regular_month(self):
        assert month_bounds("2024-03") == (datetime(2024, 3, 1), datetime(2024, 4, 1))

    def test_december_rolls_year(self):
        assert month_bounds("2023-12") == (datetime(2023, 12, 1), datetime(2024, 1, 1))

    def test_invalid(self):
        with pytest.raises(ValueError):
            month_bounds("2024-13")

    def test_years_outside_datetime_range(self):
        for month in ("0000-01", "9999-12"):
            with pytest.raises(ValueError):
                month_bounds(month)


class TestCalculateMonthTotals:
    def test_boundaries(self, db, finance_factory):
        """Records on the first instant count; the next month's first instant does not."""
        finance_factory(amount=10, type="income", date=datetime(2024, 2, 29, 23, 59, 59))
        finance_factory(amount=20, type="income", date=datetime(2024, 3, 1, 0, 0, 0))
        finance_factory(amount=30, type="expense", date=datetime(2024, 3, 31, 23, 59, 59))
        finance_factory(amount=40, type="expense", date=datetime(2024, 4, 1, 0, 0, 0))

        totals = calculate_month_totals(db, "2024-03")
        assert totals["total_income"] == 20
        assert totals["total_expense"] == 30
        assert totals["net_profit"] == -10

    def test_sums_multiple_records(self, db, finance_factory):
        for amount in (12.5, 7.5, 30):
            finance_factory(amount=amount, type="income", date=datetime(2024, 5, 2))
        finance_factory(amount=-5, type="expense", date=datetime(2024, 5, 3))

        totals = calculate_month_totals(db, "2024-05")
        assert totals["total_income"] == 50
        assert totals["total_expense"] == -5
        assert totals["net_profit"] == 55


class TestCalculateProfitAnalytics:
    def test_inserts_snapshot(self, db, finance_factory):
        finance_factory(amount=100, type="income", date=datetime(2024, 3, 5))

        snapshot = calculate_profit_analytics(db, "2024-03")
        assert snapshot.analytics_id is not None
        assert snapshot.total_income == 100
        assert db.query(ProfitAnalytics).count() == 1

    def test_duplicate_month_raises(self, db):
        calculate_profit_analytics(db, "2024-03")

        with pytest.raises(ConflictError):
            calculate_profit_analytics(db, "2024-03")
        assert db.query(ProfitAnalytics).count() == 1

    def test_replace_updates_in_place(self, db, finance_factory):
        first = calculate_profit_analytics(db, "2024-03")
        first_id = first.analytics_id

        finance_factory(amount=75, type="income", date=datetime(2024, 3, 9))
        second = calculate_profit_analytics(db, "2024-03", replace=True)

        assert second.analytics_id == first_id
        assert second.total_income == 75
        assert db.query(ProfitAnalytics).count() == 1
