"""
Spending summaries over meals and grocery trips.

Seed-only (demo) meals never count toward spend. Output shapes follow the
per-purchaser breakdown the dashboard shows:
- details: one row per (purchaser, category) with count/total/avg/min/max
- people: per-purchaser totals across categories
- totals: combined, meals, groceries, last 30 days, month to date
- daily: meal spend per day over the last 14 days
"""
from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from .recommender import SEED_MARKER
from .recommender.dates import parse_day

CATEGORY_MEALS = "meals"
CATEGORY_GROCERIES = "groceries"
RECENT_WINDOW_DAYS = 30
DAILY_SERIES_DAYS = 14


def _money(value: Decimal) -> float:
    return float(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def is_seed_meal(meal: Dict[str, Any]) -> bool:
    return bool(meal.get("seed_only")) or SEED_MARKER in (meal.get("notes") or "")


def _transactions(meals: List[Dict], groceries: List[Dict]) -> List[Dict[str, Any]]:
    """Flatten both sources to (purchaser, category, day, amount) rows."""
    rows = []
    for meal in meals:
        if is_seed_meal(meal):
            continue
        rows.append({
            "purchaser_name": meal.get("purchaser_name") or "",
            "category": CATEGORY_MEALS,
            "day": parse_day(meal["date"]),
            "amount": Decimal(str(meal["cost"])),
        })
    for grocery in groceries:
        rows.append({
            "purchaser_name": grocery.get("purchaser_name") or "",
            "category": CATEGORY_GROCERIES,
            "day": parse_day(grocery["date"]),
            "amount": Decimal(str(grocery["amount"])),
        })
    return rows


def summarize_spending(
    meals: List[Dict[str, Any]],
    groceries: List[Dict[str, Any]],
    *,
    today: Optional[date] = None,
    monthly_budget: Optional[Decimal] = None,
) -> Dict[str, Any]:
    """Aggregate spend for one household."""
    today = today or date.today()
    rows = _transactions(meals, groceries)

    groups: Dict[tuple, List[Dict]] = defaultdict(list)
    for row in rows:
        groups[(row["purchaser_name"], row["category"])].append(row)

    details = []
    for (purchaser, category), items in sorted(groups.items()):
        amounts = [i["amount"] for i in items]
        days = [i["day"] for i in items]
        total = sum(amounts, Decimal("0"))
        details.append({
            "purchaser_name": purchaser,
            "category": category,
            "transaction_count": len(items),
            "total_amount": _money(total),
            "avg_amount": _money(total / len(items)),
            "min_amount": _money(min(amounts)),
            "max_amount": _money(max(amounts)),
            "earliest_date": min(days).isoformat(),
            "latest_date": max(days).isoformat(),
        })

    people = []
    by_person: Dict[str, List[Dict]] = defaultdict(list)
    for detail in details:
        by_person[detail["purchaser_name"]].append(detail)
    for purchaser, person_details in sorted(by_person.items()):
        total_spent = sum(d["total_amount"] for d in person_details)
        people.append({
            "purchaser_name": purchaser,
            "total_transactions": sum(d["transaction_count"] for d in person_details),
            "total_spent": round(total_spent, 2),
            "avg_per_category": round(total_spent / len(person_details), 2),
            "first_purchase": min(d["earliest_date"] for d in person_details),
            "last_purchase": max(d["latest_date"] for d in person_details),
        })

    def _total(predicate) -> Decimal:
        return sum((r["amount"] for r in rows if predicate(r)), Decimal("0"))

    month_start = today.replace(day=1)
    month_to_date = _total(lambda r: month_start <= r["day"] <= today)
    totals = {
        "combined": _money(_total(lambda r: True)),
        "meals": _money(_total(lambda r: r["category"] == CATEGORY_MEALS)),
        "groceries": _money(_total(lambda r: r["category"] == CATEGORY_GROCERIES)),
        "meals_last_30_days": _money(_total(
            lambda r: r["category"] == CATEGORY_MEALS
            and 0 <= (today - r["day"]).days <= RECENT_WINDOW_DAYS
        )),
        "month_to_date": _money(month_to_date),
        "monthly_budget": _money(monthly_budget) if monthly_budget is not None else None,
        "monthly_remaining": (
            _money(monthly_budget - month_to_date) if monthly_budget is not None else None
        ),
    }

    return {
        "details": details,
        "people": people,
        "totals": totals,
        "daily": daily_meal_spend(rows, today),
    }


def daily_meal_spend(rows: List[Dict[str, Any]], today: date, days: int = DAILY_SERIES_DAYS) -> List[Dict[str, Any]]:
    """Oldest-first series of meal spend per calendar day."""
    by_day: Dict[date, Decimal] = defaultdict(Decimal)
    for row in rows:
        if row["category"] == CATEGORY_MEALS:
            by_day[row["day"]] += row["amount"]

    series = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        series.append({"day": day.isoformat(), "spend": _money(by_day.get(day, Decimal("0")))})
    return series
