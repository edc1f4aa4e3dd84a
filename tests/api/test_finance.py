"""Tests for finance API endpoints."""
from datetime import datetime, timedelta

from app.models.finance import FinanceRecord, FinanceRecipeSale


class TestListFinance:
    def test_list_empty(self, client, db):
        response = client.get("/finance")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_all(self, client, finance_factory):
        """Should return every record regardless of date."""
        finance_factory(amount=500, type="income", description="Lunch service")
        finance_factory(amount=120, type="expense", date=datetime(2020, 1, 1))

        response = client.get("/finance")
        assert response.status_code == 200
        data = response.json()
        assert [r["amount"] for r in data] == [500, 120]
        assert all(isinstance(r["record_id"], int) for r in data)

    def test_filter_by_type(self, client, finance_factory):
        """Should filter by income or expense."""
        finance_factory(amount=500, type="income")
        finance_factory(amount=120, type="expense")

        response = client.get("/finance?type=expense")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["type"] == "expense"

    def test_filter_by_timeframe(self, client, finance_factory):
        """Should drop records older than the timeframe."""
        now = datetime.utcnow()
        finance_factory(amount=1, date=now - timedelta(hours=1))
        finance_factory(amount=2, date=now - timedelta(days=3))
        finance_factory(amount=3, date=now - timedelta(days=20))
        finance_factory(amount=4, date=now - timedelta(days=400))

        week = client.get("/finance?timeframe=week").json()
        year = client.get("/finance?timeframe=year").json()
        everything = client.get("/finance?timeframe=all").json()

        assert sorted(r["amount"] for r in week) == [1, 2]
        assert sorted(r["amount"] for r in year) == [1, 2, 3]
        assert len(everything) == 4

    def test_invalid_timeframe(self, client, db):
        response = client.get("/finance?timeframe=decade")
        assert response.status_code == 422


class TestCreateFinance:
    def test_create_income(self, client, db):
        """Should store and return the record."""
        payload = {
            "description": "Dinner service",
            "amount": 2500.5,
            "type": "income",
            "category": "Sales",
            "date": "2024-03-15T19:30:00",
        }

        response = client.post("/finance", json=payload)
        assert response.status_code == 201
        data = response.json()
        assert isinstance(data["record_id"], int)
        assert data["amount"] == 2500.5
        assert data["category"] == "Sales"
        assert data["date"].startswith("2024-03-15T19:30")

    def test_create_defaults_date(self, client, db):
        """Date defaults to now when omitted."""
        response = client.post("/finance", json={"amount": 10, "type": "expense"})
        assert response.status_code == 201
        data = response.json()
        assert data["date"] is not None
        assert data["description"] is None

    def test_create_negative_amount(self, client, db):
        """Amount sign is not constrained."""
        response = client.post("/finance", json={"amount": -30, "type": "income"})
        assert response.status_code == 201

    def test_create_invalid_type(self, client, db):
        """Type must be income or expense."""
        response = client.post("/finance", json={"amount": 10, "type": "refund"})
        assert response.status_code == 422
        assert db.query(FinanceRecord).count() == 0

    def test_create_with_recipe_sales(self, client, recipe_factory):
        """Should link sold recipes to the record."""
        recipe = recipe_factory(name="Pad Thai")

        response = client.post(
            "/finance",
            json={
                "amount": 270,
                "type": "income",
                "recipe_sales": [{"recipe_id": recipe.id, "quantity_sold": 3}],
            },
        )
        assert response.status_code == 201
        sales = response.json()["recipe_sales"]
        assert len(sales) == 1
        assert sales[0]["recipe_id"] == recipe.id
        assert sales[0]["quantity_sold"] == 3

    def test_create_with_unknown_recipe(self, client, db):
        """Unknown recipes reject the whole record."""
        response = client.post(
            "/finance",
            json={"amount": 90, "type": "income", "recipe_sales": [{"recipe_id": 77}]},
        )
        assert response.status_code == 400
        assert db.query(FinanceRecord).count() == 0
        assert db.query(FinanceRecipeSale).count() == 0
