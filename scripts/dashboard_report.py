#!/usr/bin/env python3
"""
Dashboard report for a running Kitchen Manager API.
Fetches inventory, recipes and finance records in parallel and prints the
dashboard figures.

Usage:
    python3 scripts/dashboard_report.py
    python3 scripts/dashboard_report.py --base-url http://localhost:3000 --days 14
"""

import argparse
import asyncio
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import get_settings
from app.services.dashboard import build_summary
from app.services.kitchen_client import KitchenApiClient, KitchenApiError


def print_summary(summary: dict, inventory: list[dict]) -> None:
    print(f"\n{'='*60}")
    print("Dashboard")
    print('='*60)

    print(f"\n📦 Inventory value: {summary['inventory_value']:.2f}")
    print(f"🍳 Recipes:         {summary['recipe_count']}")
    print(f"💰 Net profit:      {summary['net_profit']:.2f}")
    print(f"📈 Profit margin:   {summary['profit_margin']:.1f}%")
    print(f"   Income {summary['total_income']:.2f} / Expense {summary['total_expense']:.2f}")

    print(f"\n📅 Last {len(summary['daily_totals'])} days:")
    print("-" * 40)
    for day in summary["daily_totals"]:
        print(f"{day['date']}  income {day['income']:10.2f}  expense {day['expense']:10.2f}")

    if summary["expenses_by_category"]:
        print("\n🧾 Expenses by category:")
        print("-" * 40)
        for category in summary["expenses_by_category"]:
            print(f"{category['name']:25} {category['value']:12.2f}")

    if summary["low_stock_items"]:
        print("\n⚠️  Low stock:")
        for item in summary["low_stock_items"]:
            print(f"   {item['name']}: {item['quantity']} {item['unit']}")

    print(f"\n📋 Inventory ({len(inventory)} items):")
    print("-" * 60)
    for item in inventory:
        value = item["price"] * item["quantity"]
        print(f"{item['name'][:25]:25} {item['quantity']:8.2f} {item['unit']:8} @ {item['price']:8.2f} = {value:10.2f}")


async def main(base_url: str, days: int) -> int:
    async with KitchenApiClient(base_url) as client:
        try:
            data = await client.fetch_dashboard_data()
        except KitchenApiError as e:
            print(f"\n❌ Failed to load dashboard data: {e}")
            return 1

    summary = build_summary(data.inventory, data.recipes, data.transactions, days=days)
    print_summary(summary, data.inventory)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print the kitchen dashboard")
    parser.add_argument("--base-url", default=get_settings().API_BASE_URL, help="API root URL")
    parser.add_argument("--days", type=int, default=7, help="Days in the daily income/expense table")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)
    sys.exit(asyncio.run(main(args.base_url, args.days)))
