"""
Meals API router.
"""
from fastapi import APIRouter, Depends, HTTPException, Query

from foodchooser.api.models import MealRequest, MealUpdateRequest
from foodchooser.api.security import require_api_key
from foodchooser.core.db import create_meal, get_meal, list_meals, update_meal, delete_meal

router = APIRouter(prefix="/api/households/{household_id}/meals", tags=["Meals"])


@router.get("")
def get_meals(
    household_id: str,
    include_seed: bool = Query(True),
    limit: int = Query(500, ge=1, le=5000)
):
    """Meal history, newest first."""
    meals = list_meals(household_id, include_seed=include_seed, limit=limit)
    return {"meals": meals, "count": len(meals)}


@router.post("")
def add_meal(household_id: str, request: MealRequest):
    """Log a meal."""
    try:
        meal = create_meal(household_id, **request.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "meal": meal}


@router.get("/{meal_id}")
def get_single_meal(household_id: str, meal_id: str):
    meal = get_meal(household_id, meal_id)
    if not meal:
        raise HTTPException(status_code=404, detail="Meal not found")
    return meal


@router.put("/{meal_id}")
def edit_meal(household_id: str, meal_id: str, request: MealUpdateRequest):
    """
    Edit a meal.

    Changing the restaurant or dish saves a new meal and leaves the
    original in the history; created tells the caller which happened.
    """
    try:
        meal = update_meal(household_id, meal_id, **request.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if meal is None:
        raise HTTPException(status_code=404, detail="Meal not found")
    return {"success": True, "meal": meal, "created": meal["id"] != meal_id}


@router.delete("/{meal_id}", dependencies=[Depends(require_api_key)])
def remove_meal(household_id: str, meal_id: str):
    if not delete_meal(household_id, meal_id):
        raise HTTPException(status_code=404, detail="Meal not found")
    return {"success": True, "deleted": meal_id}
