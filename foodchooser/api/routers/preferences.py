"""
Preferences API router - budget, cuisine overrides, disabled items.
"""
from fastapi import APIRouter, HTTPException

from foodchooser.api.models import DisabledItemRequest, OverrideRequest, PreferencesRequest
from foodchooser.core.db import (
    get_preferences, save_preferences,
    list_overrides, upsert_override,
    get_disabled_items, set_disabled_item
)
from foodchooser.core.recommender import BudgetPreferences, InvalidPreferencesError, parse_key

router = APIRouter(prefix="/api/households/{household_id}", tags=["Preferences"])


def preferences_to_dict(prefs: BudgetPreferences) -> dict:
    return {
        "budget_min": float(prefs.min),
        "budget_max": float(prefs.max),
        "forbid_repeat_days": prefs.forbid_repeat_days,
        "strict_budget": prefs.strict_budget,
        "monthly_budget": float(prefs.monthly_budget) if prefs.monthly_budget is not None else None,
    }


@router.get("/preferences")
def read_preferences(household_id: str):
    """Saved preferences, or defaults for a new household."""
    return preferences_to_dict(get_preferences(household_id))


@router.put("/preferences")
def write_preferences(household_id: str, request: PreferencesRequest):
    prefs = BudgetPreferences(
        min=request.budget_min,
        max=request.budget_max,
        forbid_repeat_days=request.forbid_repeat_days,
        strict_budget=request.strict_budget,
        monthly_budget=request.monthly_budget,
    )
    try:
        saved = save_preferences(household_id, prefs)
    except InvalidPreferencesError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return preferences_to_dict(saved)


@router.get("/overrides")
def read_overrides(household_id: str):
    overrides = list_overrides(household_id)
    return {
        "overrides": {o["cuisine"]: o["count"] for o in overrides},
        "count": len(overrides)
    }


@router.put("/overrides/{cuisine}")
def write_override(household_id: str, cuisine: str, request: OverrideRequest):
    row = upsert_override(household_id, cuisine, request.count)
    return {"cuisine": row["cuisine"], "count": row["count"]}


@router.get("/disabled")
def read_disabled(household_id: str):
    items = get_disabled_items(household_id)
    return {
        "items": [
            {"key": str(key), "restaurant": key.restaurant, "dish": key.dish, "disabled": flag}
            for key, flag in sorted(items.items(), key=lambda kv: str(kv[0]))
        ],
        "count": len(items)
    }


@router.put("/disabled")
def write_disabled(household_id: str, request: DisabledItemRequest):
    restaurant, dish = request.restaurant, request.dish
    if request.key:
        try:
            parsed = parse_key(request.key)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        restaurant, dish = parsed.restaurant, parsed.dish

    key = set_disabled_item(household_id, restaurant, dish, request.disabled)
    return {"key": str(key), "disabled": request.disabled}
