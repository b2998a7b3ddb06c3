"""Tests for the per-meal score."""

import pytest
from ..models import BudgetPreferences, WeatherCondition, WeatherContext
from ..services.random_source import SequenceRandom
from ..services.scoring import (
    score_meal,
    _score_rating,
    _score_recency,
    _score_budget_fit,
)
from .helpers import BUDGET, MILD, TODAY, make_meal


def test_rating_weight():
    assert _score_rating(make_meal(rating=5)) == 50
    assert _score_rating(make_meal(rating=1)) == 10


def test_missing_rating_scores_as_three():
    assert _score_rating(make_meal(rating=None)) == 30


@pytest.mark.parametrize("days,expected", [
    (0, -12),
    (10, -10),
    (20, 0),
    (100, 0),
])
def test_recency_penalty(days, expected):
    assert _score_recency(days) == expected


def test_budget_fit_at_bounds():
    assert _score_budget_fit(10, 10, 35) == 8
    assert _score_budget_fit(35, 10, 35) == 8


def test_budget_fit_scales_with_distance():
    assert _score_budget_fit(39, 10, 35) == pytest.approx(-1)
    assert _score_budget_fit(6, 10, 35) == pytest.approx(-1)


def test_budget_fit_clamps():
    assert _score_budget_fit(83, 10, 35) == -12
    assert _score_budget_fit(500, 10, 35) == -12
    assert _score_budget_fit(0, 50, 100) == -12


def test_score_breakdown_components():
    """Chipotle bowl, 6 days ago, cold day with a non-matching cuisine."""
    record = make_meal()
    cold = WeatherContext(WeatherCondition.COLD, 40)
    breakdown = score_meal(record, BUDGET, cold, today=TODAY, jitter_scale=0)
    assert breakdown.rating_weight == 40
    assert breakdown.recency_penalty == -12
    assert breakdown.budget_fit == 8
    assert breakdown.weather_bonus == 0
    assert breakdown.jitter == 0.0
    assert breakdown.total == 36


def test_weather_bonus_applies():
    hot = WeatherContext(WeatherCondition.HOT, 92)
    breakdown = score_meal(make_meal(days_ago=30), BUDGET, hot, today=TODAY, jitter_scale=0)
    assert breakdown.weather_bonus == 2
    assert breakdown.total == 50


def test_deterministic_without_jitter():
    record = make_meal(rating=2, cost=50, days_ago=3)
    first = score_meal(record, BUDGET, MILD, today=TODAY, jitter_scale=0)
    second = score_meal(record, BUDGET, MILD, today=TODAY, jitter_scale=0)
    assert first == second


def test_jitter_from_injected_source():
    record = make_meal(days_ago=30)
    low = score_meal(record, BUDGET, MILD, today=TODAY, rng=SequenceRandom([0.0]))
    high = score_meal(record, BUDGET, MILD, today=TODAY, rng=SequenceRandom([0.75]))
    assert low.jitter == pytest.approx(-1.5)
    assert high.jitter == pytest.approx(0.75)
    assert high.total - low.total == pytest.approx(2.25)


def test_jitter_stays_in_range():
    record = make_meal()
    for draw in (0.0, 0.25, 0.5, 0.999):
        breakdown = score_meal(record, BUDGET, MILD, today=TODAY, rng=SequenceRandom([draw]))
        assert -1.5 <= breakdown.jitter <= 1.5


def test_breakdown_to_dict_includes_total():
    breakdown = score_meal(make_meal(), BudgetPreferences(), MILD, today=TODAY, jitter_scale=0)
    data = breakdown.to_dict()
    assert set(data) == {
        "rating_weight", "recency_penalty", "budget_fit", "weather_bonus", "jitter", "total"
    }
    assert data["total"] == breakdown.total
