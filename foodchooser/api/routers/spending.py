"""
Spending and demo data API router.
"""
from datetime import date

from fastapi import APIRouter, Depends

from foodchooser.api.security import require_api_key
from foodchooser.core.db import get_preferences, list_groceries, list_meals
from foodchooser.core.seed import clear_seed, seed_household
from foodchooser.core.spending import summarize_spending

router = APIRouter(prefix="/api/households/{household_id}", tags=["Spending"])


@router.get("/spending")
def get_spending(household_id: str):
    """Per-purchaser spend, category totals and the 14-day meal series."""
    prefs = get_preferences(household_id)
    return summarize_spending(
        list_meals(household_id),
        list_groceries(household_id),
        today=date.today(),
        monthly_budget=prefs.monthly_budget,
    )


@router.post("/seed")
def load_demo_data(household_id: str):
    """Add demo meals (seed-only, never counted as spend)."""
    meals = seed_household(household_id)
    return {"success": True, "created": len(meals)}


@router.delete("/seed", dependencies=[Depends(require_api_key)])
def remove_demo_data(household_id: str):
    removed = clear_seed(household_id)
    return {"success": True, "removed": removed}
