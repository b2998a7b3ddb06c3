"""Tests for spending summaries."""
from datetime import date, timedelta
from decimal import Decimal

from foodchooser.core.spending import is_seed_meal, summarize_spending

TODAY = date(2026, 3, 15)


def meal(cost, days_ago=1, purchaser="Sam", **extra):
    return {
        "date": (TODAY - timedelta(days=days_ago)).isoformat(),
        "cost": cost,
        "purchaser_name": purchaser,
        **extra,
    }


def grocery(amount, days_ago=1, purchaser="Sam"):
    return {
        "date": (TODAY - timedelta(days=days_ago)).isoformat(),
        "amount": amount,
        "purchaser_name": purchaser,
    }


def test_seed_meals_excluded():
    meals = [meal(20), meal(50, seed_only=True), meal(30, notes="#seed demo")]
    summary = summarize_spending(meals, [], today=TODAY)
    assert summary["totals"]["meals"] == 20


def test_is_seed_meal():
    assert is_seed_meal({"seed_only": 1})
    assert is_seed_meal({"notes": "from #seed file"})
    assert not is_seed_meal({"notes": "seedless grapes"})


def test_per_purchaser_details():
    meals = [meal(10, purchaser="Sam"), meal(30, purchaser="Sam"), meal(12.5, purchaser="Alex")]
    groceries = [grocery(80, purchaser="Alex")]
    summary = summarize_spending(meals, groceries, today=TODAY)

    sam = next(d for d in summary["details"] if d["purchaser_name"] == "Sam")
    assert sam["transaction_count"] == 2
    assert sam["total_amount"] == 40
    assert sam["avg_amount"] == 20
    assert sam["min_amount"] == 10
    assert sam["max_amount"] == 30

    alex = next(p for p in summary["people"] if p["purchaser_name"] == "Alex")
    assert alex["total_spent"] == 92.5
    assert alex["total_transactions"] == 2
    assert summary["totals"]["combined"] == 132.5


def test_windows_and_monthly_budget():
    meals = [meal(10, days_ago=3), meal(40, days_ago=45)]
    summary = summarize_spending(meals, [grocery(25, days_ago=2)], today=TODAY,
                                 monthly_budget=Decimal("300"))
    totals = summary["totals"]
    assert totals["meals_last_30_days"] == 10
    assert totals["month_to_date"] == 35
    assert totals["monthly_remaining"] == 265


def test_daily_series():
    summary = summarize_spending([meal(10, days_ago=0), meal(5, days_ago=0), meal(7, days_ago=20)],
                                 [], today=TODAY)
    daily = summary["daily"]
    assert len(daily) == 14
    assert daily[-1] == {"day": TODAY.isoformat(), "spend": 15}
    assert daily[0]["day"] == (TODAY - timedelta(days=13)).isoformat()


def test_empty():
    summary = summarize_spending([], [], today=TODAY)
    assert summary["details"] == []
    assert summary["totals"]["combined"] == 0
    assert summary["totals"]["monthly_budget"] is None
