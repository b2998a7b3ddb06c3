"""
Groceries API router.
"""
from fastapi import APIRouter, Depends, HTTPException, Query

from foodchooser.api.models import GroceryRequest, GroceryUpdateRequest
from foodchooser.api.security import require_api_key
from foodchooser.core.db import (
    create_grocery, get_grocery, list_groceries, update_grocery, delete_grocery
)

router = APIRouter(prefix="/api/households/{household_id}/groceries", tags=["Groceries"])


@router.get("")
def get_groceries(household_id: str, limit: int = Query(500, ge=1, le=5000)):
    groceries = list_groceries(household_id, limit=limit)
    return {"groceries": groceries, "count": len(groceries)}


@router.post("")
def add_grocery(household_id: str, request: GroceryRequest):
    try:
        grocery = create_grocery(household_id, **request.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "grocery": grocery}


@router.put("/{grocery_id}")
def edit_grocery(household_id: str, grocery_id: str, request: GroceryUpdateRequest):
    if not get_grocery(household_id, grocery_id):
        raise HTTPException(status_code=404, detail="Grocery trip not found")
    try:
        grocery = update_grocery(household_id, grocery_id, **request.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "grocery": grocery}


@router.delete("/{grocery_id}", dependencies=[Depends(require_api_key)])
def remove_grocery(household_id: str, grocery_id: str):
    if not delete_grocery(household_id, grocery_id):
        raise HTTPException(status_code=404, detail="Grocery trip not found")
    return {"success": True, "deleted": grocery_id}
