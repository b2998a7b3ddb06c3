"""
Recommendations API router - the mystery egg, cuisine suggestions, tiers.
"""
import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from foodchooser.api.models import (
    CuisineRecommendationResponse,
    MealRecommendationsResponse,
    SelectRecommendationRequest,
    TierEligibilityResponse,
)
from foodchooser.core.config import settings
from foodchooser.core.db import (
    create_meal,
    get_disabled_items,
    get_overrides_map,
    get_preferences,
    increment_override,
    load_meal_history,
)
from foodchooser.core.recommender import (
    FALLBACK_WEATHER,
    MealRecord,
    ScoredCandidate,
    SeededRandom,
    WeatherCondition,
    WeatherContext,
    build_cuisine_recommendations,
    classify_tier,
    crack_egg,
    tier_eligibility,
)
from foodchooser.core.weather import fetch_current_weather

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/households/{household_id}", tags=["Recommendations"])


def resolve_weather(
    condition: Optional[WeatherCondition],
    temp_f: Optional[float],
    lat: Optional[float],
    lon: Optional[float],
) -> WeatherContext:
    """Explicit condition wins; otherwise ask the weather provider."""
    if condition is not None:
        return WeatherContext(
            condition=condition,
            temp_f=temp_f if temp_f is not None else FALLBACK_WEATHER.temp_f,
        )
    return fetch_current_weather(lat, lon)


def meal_to_dict(record: MealRecord) -> dict:
    return {
        "id": record.id,
        "date": record.date.isoformat(),
        "restaurant": record.restaurant,
        "dish": record.dish,
        "cuisine": record.cuisine,
        "cost": float(record.cost),
        "rating": record.rating,
        "notes": record.notes,
        "seed_only": record.seed_only,
    }


def candidate_to_dict(candidate: ScoredCandidate) -> dict:
    return {
        "meal": meal_to_dict(candidate.record),
        "score": candidate.score,
        "tier": classify_tier(candidate.record.cost).value,
        "breakdown": candidate.breakdown.to_dict(),
    }


@router.get("/recommendations/meals", response_model=MealRecommendationsResponse)
def recommend_meals(
    household_id: str,
    seed: Optional[int] = Query(None, description="Seed the draw to replay a result"),
    condition: Optional[WeatherCondition] = Query(None),
    temp_f: Optional[float] = Query(None),
    lat: Optional[float] = Query(None),
    lon: Optional[float] = Query(None),
):
    """
    Crack the egg: top 5 dishes plus the sampled pick.

    The same draw marks chosen_index in the list and is the egg reveal,
    so both views always agree.
    """
    history = load_meal_history(household_id)
    prefs = get_preferences(household_id)
    weather = resolve_weather(condition, temp_f, lat, lon)

    result = crack_egg(
        history,
        prefs,
        get_disabled_items(household_id),
        weather,
        today=date.today(),
        rng=SeededRandom(seed),
        jitter_scale=settings.JITTER_SCALE,
    )

    return {
        "weather": {"condition": weather.condition.value, "temp_f": weather.temp_f},
        "choices": [candidate_to_dict(c) for c in result.choices],
        "chosen_index": result.chosen_index,
        "total_candidates": len(result.choices),
    }


@router.get("/recommendations/cuisines", response_model=list[CuisineRecommendationResponse])
def recommend_cuisines(
    household_id: str,
    search: Optional[str] = Query(None),
    enforce_no_repeat: bool = Query(True),
    condition: Optional[WeatherCondition] = Query(None),
    temp_f: Optional[float] = Query(None),
    lat: Optional[float] = Query(None),
    lon: Optional[float] = Query(None),
):
    """Cuisine-level suggestions, best first."""
    prefs = get_preferences(household_id)
    weather = resolve_weather(condition, temp_f, lat, lon)

    recs = build_cuisine_recommendations(
        load_meal_history(household_id),
        prefs,
        prefs.forbid_repeat_days,
        get_overrides_map(household_id),
        enforce_no_repeat,
        weather,
        today=date.today(),
        search=search,
        strict_budget=prefs.strict_budget,
    )

    return [
        {
            "cuisine": r.cuisine,
            "score": r.score,
            "avg_rating": r.avg_rating,
            "last_cost": float(r.last_cost),
            "last_days": r.last_days,
            "est_cost": float(r.est_cost),
            "tier": r.tier.value,
            "suggested_restaurant": r.suggested_restaurant,
            "dish": r.dish,
            "breakdown": r.breakdown,
        }
        for r in recs
    ]


@router.post("/recommendations/select")
def select_recommendation(household_id: str, request: SelectRecommendationRequest):
    """
    Save a recommendation as today's meal.

    Manual picks also bump the cuisine override so the cuisine
    recommender learns the preference.
    """
    try:
        meal = create_meal(
            household_id,
            date=date.today(),
            restaurant=request.restaurant,
            dish=request.dish,
            cuisine=request.cuisine,
            cost=request.cost,
            purchaser_name=request.purchaser_name,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    override_count = None
    if request.manual:
        override_count = increment_override(household_id, request.cuisine.strip())

    return {"success": True, "meal": meal, "override_count": override_count}


@router.get("/tiers", response_model=list[TierEligibilityResponse])
def get_tier_eligibility(household_id: str):
    """Which egg tiers the saved budget can produce."""
    prefs = get_preferences(household_id)
    return [
        {"tier": t.tier.value, "eligible": t.eligible, "hint": t.hint}
        for t in tier_eligibility(prefs)
    ]


@router.get("/tiers/classify")
def classify_cost(household_id: str, cost: float = Query(..., ge=0)):
    return {"cost": cost, "tier": classify_tier(cost).value}
