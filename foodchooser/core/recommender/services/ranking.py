"""
Ranking and softmax-weighted sampling over the top candidates.

weight_i = exp((score_i - max_score) / TEMPERATURE). Lower temperature
makes the best score dominate; higher flattens toward uniform.
"""

import logging
import math
from datetime import date
from typing import Optional

from ..models import BudgetPreferences, EggResult, MealRecord, ScoredCandidate, WeatherContext
from .candidates import DisabledItems, filter_candidates, score_and_dedupe
from .random_source import RandomSource, default_source
from .scoring import JITTER_SCALE

logger = logging.getLogger(__name__)

TOP_N = 5
TEMPERATURE = 8.0


def sort_candidates(candidates: list[ScoredCandidate]) -> list[ScoredCandidate]:
    """Score descending, ties broken by cost descending."""
    return sorted(candidates, key=lambda c: (-c.score, -c.record.cost))


def rank_candidates(
    history: list[MealRecord],
    budget: BudgetPreferences,
    forbid_repeat_days: int,
    disabled: Optional[DisabledItems],
    weather: WeatherContext,
    *,
    today: Optional[date] = None,
    rng: Optional[RandomSource] = None,
    jitter_scale: float = JITTER_SCALE,
) -> list[ScoredCandidate]:
    """Filter, score, dedupe and order the history. Empty list when nothing qualifies."""
    survivors = filter_candidates(history, budget, forbid_repeat_days, disabled, today=today)
    scored = score_and_dedupe(
        survivors, budget, weather, today=today, rng=rng, jitter_scale=jitter_scale
    )
    return sort_candidates(scored)


def top_choices(ranked: list[ScoredCandidate], n: int = TOP_N) -> list[ScoredCandidate]:
    return ranked[:n]


def sample_choice(
    candidates: list[ScoredCandidate],
    rng: Optional[RandomSource] = None,
    temperature: float = TEMPERATURE,
) -> Optional[int]:
    """Index of the weighted pick within the first TOP_N candidates, or None if empty."""
    pool = candidates[:TOP_N]
    if not pool:
        return None

    best = max(c.score for c in pool)
    weights = [math.exp((c.score - best) / temperature) for c in pool]
    threshold = default_source(rng).next() * sum(weights)

    cumulative = 0.0
    for index, weight in enumerate(weights):
        cumulative += weight
        if threshold < cumulative:
            return index
    return len(pool) - 1


def crack_egg(
    history: list[MealRecord],
    budget: BudgetPreferences,
    disabled: Optional[DisabledItems],
    weather: WeatherContext,
    *,
    today: Optional[date] = None,
    rng: Optional[RandomSource] = None,
    jitter_scale: float = JITTER_SCALE,
) -> EggResult:
    """Rank once and sample once; the egg reveal and the choices list share the draw."""
    rng = default_source(rng)
    ranked = rank_candidates(
        history, budget, budget.forbid_repeat_days, disabled, weather,
        today=today, rng=rng, jitter_scale=jitter_scale,
    )
    choices = top_choices(ranked)
    chosen_index = sample_choice(choices, rng)
    if chosen_index is None:
        logger.info(f"No eligible meal among {len(history)} history records")
    return EggResult(choices=choices, chosen_index=chosen_index)
