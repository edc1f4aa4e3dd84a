"""Dashboard figures derived from inventory, recipe and finance rows.

Functions here work on plain JSON-shaped dicts so the same derivations serve
both the /dashboard endpoint (rows dumped from the ORM) and the dashboard
client (rows fetched over HTTP).
"""
import calendar
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Optional

from app.models.inventory import InventoryItem

Row = dict[str, Any]

UNCATEGORIZED = "Uncategorized"


def _row_date(value: Any) -> Optional[date]:
    """Calendar day of a row timestamp (datetime, date, or ISO string)."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _months_ago(moment: datetime, months: int) -> datetime:
    month_index = moment.year * 12 + moment.month - 1 - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def timeframe_start(timeframe: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """Earliest timestamp included by a finance page timeframe.

    'today' starts at midnight, 'week' 7 days back, 'month' one calendar
    month back, 'year' one year back. 'all' (or anything else) has no bound.
    """
    now = now or datetime.utcnow()
    if timeframe == "today":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if timeframe == "week":
        return now - timedelta(days=7)
    if timeframe == "month":
        return _months_ago(now, 1)
    if timeframe == "year":
        return _months_ago(now, 12)
    return None


def inventory_value(inventory: Iterable[Row]) -> float:
    return round(sum(item["price"] * item["quantity"] for item in inventory), 2)


def transaction_totals(transactions: Iterable[Row]) -> tuple[float, float]:
    """Return (income, expense) sums."""
    income = 0.0
    expense = 0.0
    for t in transactions:
        if t["type"] == "income":
            income += t["amount"]
        elif t["type"] == "expense":
            expense += t["amount"]
    return income, expense


def profit_margin(income: float, expense: float) -> float:
    """Net profit as a percentage of income, 0 when there is no income."""
    if income <= 0:
        return 0.0
    return round((income - expense) / income * 100, 1)


def daily_totals(transactions: Iterable[Row], today: Optional[date] = None, days: int = 7) -> list[Row]:
    """Income and expense per day for the last `days` days, oldest first."""
    today = today or datetime.utcnow().date()
    window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    buckets = {day: {"date": day.isoformat(), "income": 0.0, "expense": 0.0} for day in window}

    for t in transactions:
        bucket = buckets.get(_row_date(t.get("date")))
        if bucket is not None and t["type"] in ("income", "expense"):
            bucket[t["type"]] += t["amount"]

    return [buckets[day] for day in window]


def expenses_by_category(transactions: Iterable[Row]) -> list[Row]:
    """Expense totals grouped by category, in first-seen order."""
    totals: dict[str, float] = {}
    for t in transactions:
        if t["type"] != "expense":
            continue
        name = t.get("category") or UNCATEGORIZED
        totals[name] = totals.get(name, 0.0) + t["amount"]
    return [{"name": name, "value": value} for name, value in totals.items()]


def low_stock_items(inventory: Iterable[Row]) -> list[Row]:
    """Items at or below their low-stock threshold."""
    low = []
    for item in inventory:
        threshold = item.get("low_stock_threshold")
        if threshold is None:
            threshold = InventoryItem.DEFAULT_LOW_STOCK_THRESHOLD
        if item["quantity"] <= threshold:
            low.append(item)
    return low


def build_summary(
    inventory: list[Row],
    recipes: list[Row],
    transactions: list[Row],
    today: Optional[date] = None,
    days: int = 7,
) -> Row:
    """All dashboard figures in one dict (matches DashboardSummary)."""
    income, expense = transaction_totals(transactions)
    return {
        "inventory_value": inventory_value(inventory),
        "recipe_count": len(recipes),
        "total_income": income,
        "total_expense": expense,
        "net_profit": round(income - expense, 2),
        "profit_margin": profit_margin(income, expense),
        "daily_totals": daily_totals(transactions, today=today, days=days),
        "expenses_by_category": expenses_by_category(transactions),
        "low_stock_items": low_stock_items(inventory),
    }
