"""
Per-meal desirability score.

Components:
- Rating weight: (rating or 3) * 10
- Recency penalty: -12 .. 0, fading out over 20 days
- Budget fit: +8 inside the range, down to -12 outside it
- Weather bonus: +2 hot / +3 cold / +3 rain for matching cuisines
- Jitter: uniform in [-scale, scale] from the injected random source
"""

from datetime import date
from typing import Optional

from ..dates import days_since
from ..models import BudgetPreferences, MealRecord, ScoreBreakdown, WeatherCondition, WeatherContext
from .random_source import RandomSource, default_source
from .weather import weather_bonus

JITTER_SCALE = 1.5

MEAL_WEATHER_BONUS = {
    WeatherCondition.HOT: 2,
    WeatherCondition.COLD: 3,
    WeatherCondition.RAIN: 3,
}


def score_meal(
    record: MealRecord,
    budget: BudgetPreferences,
    weather: WeatherContext,
    *,
    today: Optional[date] = None,
    rng: Optional[RandomSource] = None,
    jitter_scale: float = JITTER_SCALE,
) -> ScoreBreakdown:
    """Score one meal. With jitter_scale=0 the result is fully deterministic."""
    today = today or date.today()

    return ScoreBreakdown(
        rating_weight=_score_rating(record),
        recency_penalty=_score_recency(days_since(record.date, today)),
        budget_fit=_score_budget_fit(float(record.cost), float(budget.min), float(budget.max)),
        weather_bonus=weather_bonus(record.cuisine.strip(), weather, MEAL_WEATHER_BONUS),
        jitter=_draw_jitter(rng, jitter_scale),
    )


def _score_rating(record: MealRecord) -> int:
    rating = record.rating if record.rating is not None else 3
    return rating * 10


def _score_recency(days: int) -> int:
    """Eaten today scores -12; 20+ days ago scores 0."""
    return max(-12, -(20 - min(20, days)))


def _score_budget_fit(cost: float, low: float, high: float) -> float:
    if low <= cost <= high:
        return 8
    boundary = low if cost < low else high
    return -min(abs(cost - boundary) / 4, 12)


def _draw_jitter(rng: Optional[RandomSource], scale: float) -> float:
    if not scale:
        return 0.0
    draw = default_source(rng).next()
    return (draw * 2 - 1) * scale
