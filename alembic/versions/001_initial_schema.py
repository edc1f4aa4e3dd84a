"""Initial schema - all core tables

Revision ID: 001
Revises:
Create Date: 2025-03-01

Creates:
- inventory_items
- recipe_categories
- recipes
- inventory_stock_history
- recipe_ingredients
- finance
- finance_recipe_sales
- profit_analytics
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # === INVENTORY_ITEMS ===
    op.create_table(
        "inventory_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("quantity", sa.Float, nullable=False),
        sa.Column("unit", sa.Text, nullable=False),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column("low_stock_threshold", sa.Integer, server_default="5"),
        sa.Column("description", sa.Text),
        sa.Column("last_updated", sa.TIMESTAMP, server_default=sa.func.now()),
    )

    # === RECIPE_CATEGORIES ===
    op.create_table(
        "recipe_categories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text),
    )

    # === RECIPES ===
    op.create_table(
        "recipes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("instructions", sa.Text),
        sa.Column("selling_price", sa.Float, nullable=False, server_default="0"),
        sa.Column("image_url", sa.Text),
        sa.Column(
            "category_id",
            sa.Integer,
            sa.ForeignKey("recipe_categories.id", ondelete="SET NULL"),
        ),
        sa.Column("created_at", sa.TIMESTAMP, server_default=sa.func.now()),
        sa.Column("updated_at", sa.TIMESTAMP, server_default=sa.func.now()),
    )

    # === INVENTORY_STOCK_HISTORY ===
    op.create_table(
        "inventory_stock_history",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "inventory_item_id",
            sa.Integer,
            sa.ForeignKey("inventory_items.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("quantity_change", sa.Float, nullable=False),
        sa.Column("reason", sa.Text),
        sa.Column("recipe_id", sa.Integer, sa.ForeignKey("recipes.id", ondelete="SET NULL")),
        sa.Column("change_date", sa.TIMESTAMP, server_default=sa.func.now()),
    )
    op.create_index("idx_stock_history_item", "inventory_stock_history", ["inventory_item_id"])

    # === RECIPE_INGREDIENTS ===
    op.create_table(
        "recipe_ingredients",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "recipe_id",
            sa.Integer,
            sa.ForeignKey("recipes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "inventory_item_id",
            sa.Integer,
            sa.ForeignKey("inventory_items.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Float, nullable=False),
        sa.Column("unit", sa.Text, nullable=False),
        sa.Column("unit_conversion_factor", sa.Float, server_default="1"),
    )
    op.create_index("idx_recipe_ingredients_recipe", "recipe_ingredients", ["recipe_id"])
    op.create_index("idx_recipe_ingredients_item", "recipe_ingredients", ["inventory_item_id"])

    # === FINANCE ===
    op.create_table(
        "finance",
        sa.Column("record_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("date", sa.TIMESTAMP, server_default=sa.func.now()),
        sa.Column("description", sa.Text),
        sa.Column("amount", sa.Float, nullable=False),
        sa.Column("type", sa.Text, nullable=False),
        sa.Column("category", sa.Text),
        sa.CheckConstraint("type IN ('income', 'expense')", name="ck_finance_type"),
    )
    op.create_index("idx_finance_date", "finance", ["date"])

    # === FINANCE_RECIPE_SALES ===
    op.create_table(
        "finance_recipe_sales",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "finance_id",
            sa.Integer,
            sa.ForeignKey("finance.record_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "recipe_id",
            sa.Integer,
            sa.ForeignKey("recipes.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("quantity_sold", sa.Integer, nullable=False, server_default="1"),
    )

    # === PROFIT_ANALYTICS ===
    op.create_table(
        "profit_analytics",
        sa.Column("analytics_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("month", sa.String(7), nullable=False, unique=True),
        sa.Column("total_income", sa.Float, server_default="0"),
        sa.Column("total_expense", sa.Float, server_default="0"),
        sa.Column("net_profit", sa.Float, server_default="0"),
        sa.Column("recipe_sales_count", sa.Integer, server_default="0"),
        sa.Column("updated_at", sa.TIMESTAMP, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("profit_analytics")
    op.drop_table("finance_recipe_sales")
    op.drop_table("finance")
    op.drop_table("recipe_ingredients")
    op.drop_table("inventory_stock_history")
    op.drop_table("recipes")
    op.drop_table("recipe_categories")
    op.drop_table("inventory_items")
