"""Candidate filtering (budget, no-repeat window, disabled items) and dedup."""

from datetime import date
from typing import Iterable, Mapping, Optional, Union

from ..dates import days_since
from ..models import BudgetPreferences, ItemKey, MealRecord, ScoredCandidate, WeatherContext
from .keys import normalize_key
from .random_source import RandomSource, default_source
from .scoring import JITTER_SCALE, score_meal

DisabledItems = Union[Mapping[ItemKey, bool], Iterable[ItemKey]]


def disabled_key_set(disabled: Optional[DisabledItems]) -> set[ItemKey]:
    """Accept either a key -> flag mapping or a plain collection of keys."""
    if not disabled:
        return set()
    if isinstance(disabled, Mapping):
        return {key for key, flag in disabled.items() if flag}
    return set(disabled)


def latest_by_cuisine(history: Iterable[MealRecord]) -> dict[str, date]:
    latest: dict[str, date] = {}
    for record in history:
        cuisine = record.cuisine.strip()
        if cuisine not in latest or record.date > latest[cuisine]:
            latest[cuisine] = record.date
    return latest


def filter_candidates(
    history: list[MealRecord],
    budget: BudgetPreferences,
    forbid_repeat_days: int,
    disabled: Optional[DisabledItems] = None,
    *,
    today: Optional[date] = None,
) -> list[MealRecord]:
    """
    Apply, in order: budget range, cuisine no-repeat window, disabled items.

    The no-repeat window looks at the latest meal of each cuisine across the
    whole history, so a cuisine eaten today drops out entirely while the
    window is open.
    """
    today = today or date.today()
    latest = latest_by_cuisine(history)
    blocked = disabled_key_set(disabled)

    kept = []
    for record in history:
        if not budget.contains(record.cost):
            continue
        if forbid_repeat_days > 0:
            if days_since(latest[record.cuisine.strip()], today) <= forbid_repeat_days:
                continue
        if normalize_key(record.restaurant, record.dish) in blocked:
            continue
        kept.append(record)
    return kept


def score_and_dedupe(
    records: Iterable[MealRecord],
    budget: BudgetPreferences,
    weather: WeatherContext,
    *,
    today: Optional[date] = None,
    rng: Optional[RandomSource] = None,
    jitter_scale: float = JITTER_SCALE,
) -> list[ScoredCandidate]:
    """Score each record and keep only the best one per (restaurant, dish)."""
    rng = default_source(rng)
    best: dict[ItemKey, ScoredCandidate] = {}

    for record in records:
        breakdown = score_meal(record, budget, weather, today=today, rng=rng, jitter_scale=jitter_scale)
        candidate = ScoredCandidate(record=record, breakdown=breakdown)
        key = normalize_key(record.restaurant, record.dish)
        if key not in best or candidate.score > best[key].score:
            best[key] = candidate

    return list(best.values())
