# Meal recommendation core
# Pure functions over already-loaded household data - no storage or network imports

from .models import (
    MealRecord,
    BudgetPreferences,
    WeatherContext,
    WeatherCondition,
    Tier,
    ItemKey,
    ScoreBreakdown,
    ScoredCandidate,
    TierEligibility,
    CuisineRecommendation,
    EggResult,
    InvalidPreferencesError,
    FALLBACK_WEATHER,
    SEED_MARKER,
)
from .services import (
    RandomSource,
    SeededRandom,
    SequenceRandom,
    normalize_key,
    parse_key,
    classify_weather,
    classify_tier,
    tier_eligibility,
    score_meal,
    rank_candidates,
    sample_choice,
    top_choices,
    crack_egg,
    build_cuisine_recommendations,
)

__all__ = [
    # Models
    "MealRecord",
    "BudgetPreferences",
    "WeatherContext",
    "WeatherCondition",
    "Tier",
    "ItemKey",
    "ScoreBreakdown",
    "ScoredCandidate",
    "TierEligibility",
    "CuisineRecommendation",
    "EggResult",
    "InvalidPreferencesError",
    "FALLBACK_WEATHER",
    "SEED_MARKER",
    # Randomness
    "RandomSource",
    "SeededRandom",
    "SequenceRandom",
    # Classification
    "normalize_key",
    "parse_key",
    "classify_weather",
    "classify_tier",
    "tier_eligibility",
    # Ranking
    "score_meal",
    "rank_candidates",
    "sample_choice",
    "top_choices",
    "crack_egg",
    "build_cuisine_recommendations",
]
