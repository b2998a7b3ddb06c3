"""
Cuisine-level recommendations aggregated over the whole history.

Independent of the per-dish ranking: it suggests a cuisine category,
not a specific past dish, and uses its own weights.

score = avg_rating*6 + recency + budget_fit + weather + trend + override
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping, Optional

from ..dates import days_since
from ..models import (
    BudgetPreferences,
    CuisineRecommendation,
    MealRecord,
    WeatherCondition,
    WeatherContext,
)
from .tiers import classify_tier
from .weather import weather_bonus

CUISINE_WEATHER_BONUS = {
    WeatherCondition.HOT: 3,
    WeatherCondition.COLD: 4,
    WeatherCondition.RAIN: 5,
}

TREND_WINDOW_DAYS = 30
OVERRIDE_WEIGHT = 3


def build_cuisine_recommendations(
    history: list[MealRecord],
    budget: BudgetPreferences,
    forbid_repeat_days: int,
    overrides: Optional[Mapping[str, int]],
    enforce_no_repeat: bool,
    weather: WeatherContext,
    *,
    today: Optional[date] = None,
    search: Optional[str] = None,
    strict_budget: bool = False,
) -> list[CuisineRecommendation]:
    """Score every cuisine in the history, best first."""
    today = today or date.today()
    overrides = overrides or {}

    by_cuisine: dict[str, list[MealRecord]] = defaultdict(list)
    for record in history:
        by_cuisine[record.cuisine.strip()].append(record)

    recs = []
    for cuisine, records in by_cuisine.items():
        last = max(records, key=lambda r: r.date)
        last_days = days_since(last.date, today)

        if enforce_no_repeat and forbid_repeat_days > 0 and last_days <= forbid_repeat_days:
            continue

        avg_rating = sum(_rating(r) for r in records) / len(records)
        avg_cost = sum((r.cost for r in records), Decimal("0")) / len(records)

        breakdown = {
            "rating": avg_rating * 6,
            "recency_penalty": _score_recency(last_days),
            "budget_fit": _score_budget_fit(float(last.cost), float(budget.min), float(budget.max)),
            "weather_bonus": weather_bonus(cuisine, weather, CUISINE_WEATHER_BONUS),
            "trend": _score_trend(records, avg_rating, today),
            "override_bonus": overrides.get(cuisine, 0) * OVERRIDE_WEIGHT,
        }
        est_cost = avg_cost.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

        recs.append(CuisineRecommendation(
            cuisine=cuisine,
            score=sum(breakdown.values()),
            avg_rating=avg_rating,
            last_cost=last.cost,
            last_days=last_days,
            est_cost=est_cost,
            tier=classify_tier(est_cost),
            suggested_restaurant=last.restaurant,
            dish=last.dish,
            breakdown=breakdown,
        ))

    recs = [r for r in recs if budget.contains(r.last_cost)]
    if strict_budget:
        recs = [r for r in recs if budget.contains(r.est_cost)]
    if search:
        needle = search.strip().lower()
        recs = [r for r in recs if needle in r.cuisine.lower()]

    recs.sort(key=lambda r: -r.score)
    return recs


def _rating(record: MealRecord) -> int:
    return record.rating if record.rating is not None else 3


def _score_recency(days: int) -> int:
    return max(-8, -(6 - min(6, days)))


def _score_budget_fit(cost: float, low: float, high: float) -> float:
    if low <= cost <= high:
        return 12
    boundary = low if cost < low else high
    return -min(abs(cost - boundary) / 5, 10)


def _score_trend(records: list[MealRecord], avg_rating: float, today: date) -> int:
    """Popular lately: two or more visits in 30 days with a 4+ average."""
    recent = sum(1 for r in records if days_since(r.date, today) <= TREND_WINDOW_DAYS)
    return 5 if recent >= 2 and avg_rating >= 4 else 0
