"""Tests for ranking, weighted sampling and the egg."""

import pytest
from ..models import BudgetPreferences, ScoreBreakdown, ScoredCandidate, Tier
from ..services.keys import normalize_key
from ..services.random_source import SeededRandom, SequenceRandom
from ..services.ranking import TOP_N, crack_egg, rank_candidates, sample_choice, top_choices
from ..services.tiers import classify_tier
from .helpers import BUDGET, MILD, TODAY, make_meal


def candidate(score, cost=20, dish=None):
    record = make_meal(dish=dish or f"Dish {score}", cost=cost)
    breakdown = ScoreBreakdown(
        rating_weight=score, recency_penalty=0, budget_fit=0, weather_bonus=0
    )
    return ScoredCandidate(record=record, breakdown=breakdown)


def test_single_meal_scenario():
    """Chipotle bowl at $14.50 six days ago is the sole, Bronze candidate."""
    history = [make_meal()]
    ranked = rank_candidates(history, BUDGET, 1, {}, MILD, today=TODAY, jitter_scale=0)
    assert len(ranked) == 1
    assert ranked[0].record.restaurant == "Chipotle"
    assert classify_tier(ranked[0].record.cost) == Tier.BRONZE


def test_empty_history_is_empty():
    assert rank_candidates([], BUDGET, 1, None, MILD, today=TODAY) == []


def test_sorted_by_score_then_cost():
    history = [
        make_meal(dish="Cheap", cuisine="Thai", cost=12, rating=4, days_ago=30),
        make_meal(dish="Pricey", cuisine="Greek", cost=30, rating=4, days_ago=30),
        make_meal(dish="Best", cuisine="French", cost=20, rating=5, days_ago=30),
    ]
    ranked = rank_candidates(history, BUDGET, 1, None, MILD, today=TODAY, jitter_scale=0)
    assert [c.record.dish for c in ranked] == ["Best", "Pricey", "Cheap"]


def test_dedupe_drops_lower_duplicate():
    history = [
        make_meal(restaurant="Chipotle", dish="Bowl", rating=2, days_ago=10, meal_id="old"),
        make_meal(restaurant="Chipotle", dish="Bowl", rating=5, days_ago=10, meal_id="new"),
    ]
    ranked = rank_candidates(history, BUDGET, 1, None, MILD, today=TODAY, jitter_scale=0)
    assert [c.record.id for c in ranked] == ["new"]


def test_disabled_item_not_ranked():
    history = [make_meal()]
    disabled = {normalize_key("Chipotle", "Bowl")}
    assert rank_candidates(history, BUDGET, 1, disabled, MILD, today=TODAY) == []


def test_top_choices_limit():
    ranked = [candidate(s) for s in range(10, 0, -1)]
    assert len(top_choices(ranked)) == TOP_N


def test_sample_choice_empty():
    assert sample_choice([], SequenceRandom([0.5])) is None


def test_sample_choice_thresholds():
    """Equal scores split the unit interval evenly."""
    pool = [candidate(10), candidate(10)]
    assert sample_choice(pool, SequenceRandom([0.0])) == 0
    assert sample_choice(pool, SequenceRandom([0.49])) == 0
    assert sample_choice(pool, SequenceRandom([0.51])) == 1


def test_sample_choice_only_top_five():
    pool = [candidate(10) for _ in range(8)]
    assert sample_choice(pool, SequenceRandom([0.99])) == TOP_N - 1


def test_dominant_candidate_almost_always_wins():
    pool = [candidate(1030), candidate(30), candidate(28), candidate(25)]
    rng = SeededRandom(42)
    wins = sum(1 for _ in range(1000) if sample_choice(pool, rng) == 0)
    assert wins > 990


def test_crack_egg_shares_draw():
    history = [
        make_meal(dish="A", cuisine="Thai", days_ago=30),
        make_meal(dish="B", cuisine="Greek", days_ago=30),
    ]
    result = crack_egg(
        history, BUDGET, None, MILD, today=TODAY, rng=SequenceRandom([0.9]), jitter_scale=0
    )
    assert len(result.choices) == 2
    assert result.chosen is result.choices[result.chosen_index]


def test_crack_egg_is_replayable():
    history = [make_meal(dish=f"Dish {i}", cuisine=f"C{i}", days_ago=10 + i) for i in range(8)]
    first = crack_egg(history, BUDGET, None, MILD, today=TODAY, rng=SeededRandom(7))
    second = crack_egg(history, BUDGET, None, MILD, today=TODAY, rng=SeededRandom(7))
    assert first.chosen_index == second.chosen_index
    assert [c.score for c in first.choices] == [c.score for c in second.choices]


def test_crack_egg_empty_pool():
    result = crack_egg([], BudgetPreferences(), None, MILD, today=TODAY)
    assert result.choices == []
    assert result.chosen_index is None
    assert result.chosen is None
