"""Test fixtures and configuration."""
import os

# Keep the app from touching a database file during tests
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_SCHEMA"] = "false"

from datetime import datetime

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import Base
from app.models.finance import FinanceRecord, FinanceRecipeSale
from app.models.inventory import InventoryItem, StockHistory
from app.models.recipe import Recipe, RecipeCategory, RecipeIngredient


@pytest.fixture(scope="function")
def engine():
    """Create an in-memory SQLite engine for testing."""
    # Use check_same_thread=False for compatibility with FastAPI TestClient
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )

    # CASCADE / RESTRICT / SET NULL behaviour is under test
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    # Create all tables
    Base.metadata.create_all(engine)

    yield engine

    # Clean up
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    """Create a test database session."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.rollback()
    session.close()


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def inventory_item_factory(db):
    """Factory to create test inventory items."""
    def _create(name="Flour", quantity=10.0, unit="kg", price=2.5, **kwargs):
        item = InventoryItem(name=name, quantity=quantity, unit=unit, price=price, **kwargs)
        db.add(item)
        db.flush()
        return item
    return _create


@pytest.fixture
def stock_history_factory(db):
    """Factory to create stock history entries."""
    def _create(item, quantity_change=1.0, reason="restock", **kwargs):
        entry = StockHistory(
            inventory_item_id=item.id,
            quantity_change=quantity_change,
            reason=reason,
            **kwargs,
        )
        db.add(entry)
        db.flush()
        return entry
    return _create


@pytest.fixture
def category_factory(db):
    """Factory to create recipe categories."""
    def _create(name="Mains", **kwargs):
        category = RecipeCategory(name=name, **kwargs)
        db.add(category)
        db.flush()
        return category
    return _create


@pytest.fixture
def recipe_factory(db):
    """Factory to create test recipes."""
    def _create(name="Pad Thai", selling_price=120.0, **kwargs):
        recipe = Recipe(
            name=name,
            selling_price=selling_price,
            created_at=datetime.utcnow(),
            updated_at=datetime.utcnow(),
            **kwargs,
        )
        db.add(recipe)
        db.flush()
        return recipe
    return _create


@pytest.fixture
def recipe_ingredient_factory(db):
    """Factory to create recipe ingredients."""
    def _create(recipe, item, quantity=1.0, unit=None, **kwargs):
        ri = RecipeIngredient(
            recipe_id=recipe.id,
            inventory_item_id=item.id,
            quantity=quantity,
            unit=unit or item.unit,
            unit_conversion_factor=kwargs.pop("unit_conversion_factor", 1),
            **kwargs,
        )
        db.add(ri)
        db.flush()
        return ri
    return _create


@pytest.fixture
def finance_factory(db):
    """Factory to create finance records."""
    def _create(amount=100.0, type="income", date=None, **kwargs):
        record = FinanceRecord(
            amount=amount,
            type=type,
            date=date or datetime.utcnow(),
            **kwargs,
        )
        db.add(record)
        db.flush()
        return record
    return _create


@pytest.fixture
def recipe_sale_factory(db):
    """Factory to link recipes to finance records."""
    def _create(record, recipe, quantity_sold=1):
        sale = FinanceRecipeSale(
            finance_id=record.record_id,
            recipe_id=recipe.id,
            quantity_sold=quantity_sold,
        )
        db.add(sale)
        db.flush()
        return sale
    return _create
