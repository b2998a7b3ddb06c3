"""Recommender services."""

from .random_source import RandomSource, SeededRandom, SequenceRandom
from .keys import normalize_key, parse_key
from .weather import classify_weather
from .tiers import classify_tier, tier_eligibility
from .scoring import score_meal
from .candidates import filter_candidates, score_and_dedupe
from .ranking import (
    rank_candidates,
    sort_candidates,
    top_choices,
    sample_choice,
    crack_egg,
)
from .cuisine import build_cuisine_recommendations

__all__ = [
    'RandomSource',
    'SeededRandom',
    'SequenceRandom',
    'normalize_key',
    'parse_key',
    'classify_weather',
    'classify_tier',
    'tier_eligibility',
    'score_meal',
    'filter_candidates',
    'score_and_dedupe',
    'rank_candidates',
    'sort_candidates',
    'top_choices',
    'sample_choice',
    'crack_egg',
    'build_cuisine_recommendations',
]
